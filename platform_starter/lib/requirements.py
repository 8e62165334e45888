from __future__ import annotations

import enum
import logging
from dataclasses import dataclass
from typing import Iterable

from ..errors import InstallError, StarterError
from .command import find_executable
from .pkg import locate_package_manager

logger = logging.getLogger(__name__)


class RequirementKind(enum.Enum):
    EXECUTABLE = "executable"
    PACKAGE = "package"


@dataclass(frozen=True)
class Requirement:
    name: str
    kind: RequirementKind


REQUIREMENTS: tuple[Requirement, ...] = (
    Requirement("csscomb", RequirementKind.EXECUTABLE),
    Requirement("editorconfig-tools", RequirementKind.EXECUTABLE),
    Requirement("eslint", RequirementKind.EXECUTABLE),
    Requirement("prettier", RequirementKind.EXECUTABLE),
    Requirement("svgo", RequirementKind.EXECUTABLE),
    Requirement("eslint-plugin-prettier", RequirementKind.PACKAGE),
    Requirement("eslint-config-airbnb-base", RequirementKind.PACKAGE),
    Requirement("eslint-plugin-import", RequirementKind.PACKAGE),
)


def install(
    package: str,
    *,
    force_fallback: bool = False,
    primary: str = "yarn",
    fallback: str = "npm",
) -> None:
    logger.info("Installing %s...", package)
    try:
        manager = locate_package_manager(force_fallback, primary=primary, fallback=fallback)
        manager.install_global(package)
    except StarterError as e:
        raise InstallError(package, f"Unable to install `{package}`: {e}") from e


def ensure_installed(
    requirement: Requirement,
    *,
    force_fallback: bool = False,
    primary: str = "yarn",
    fallback: str = "npm",
) -> None:
    """Make sure a single requirement is available.

    Executables are probed on PATH and only installed when missing.
    Packages have nothing to probe, so the install always runs and the
    package manager is trusted to treat a reinstall as a no-op.
    """

    if requirement.kind is RequirementKind.EXECUTABLE:
        if find_executable(requirement.name):
            logger.debug("%s found on PATH", requirement.name)
            return
        logger.warning("Looks like `%s` is not installed", requirement.name)

    install(requirement.name, force_fallback=force_fallback, primary=primary, fallback=fallback)


def ensure_all(
    requirements: Iterable[Requirement] = REQUIREMENTS,
    *,
    force_fallback: bool = False,
    primary: str = "yarn",
    fallback: str = "npm",
) -> None:
    for r in requirements:
        ensure_installed(r, force_fallback=force_fallback, primary=primary, fallback=fallback)
