from __future__ import annotations

import logging
from dataclasses import dataclass

from ..config import GLOBAL_INSTALL_ARGS
from ..errors import NoPackageManagerFound
from .command import find_executable, run_cmd

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PackageManager:
    """A package manager bound to its resolved executable."""

    name: str
    path: str

    def global_install_argv(self, package: str) -> list[str]:
        return [self.path, *GLOBAL_INSTALL_ARGS[self.name], package]

    def install_global(self, package: str) -> None:
        run_cmd(self.global_install_argv(package))


def locate_package_manager(
    force_fallback: bool = False,
    *,
    primary: str = "yarn",
    fallback: str = "npm",
) -> PackageManager:
    if not force_fallback:
        path = find_executable(primary)
        if path:
            return PackageManager(name=primary, path=path)
        logger.warning("%s is not installed, resorting to install using %s", primary, fallback)

    path = find_executable(fallback)
    if path:
        return PackageManager(name=fallback, path=path)

    if force_fallback:
        raise NoPackageManagerFound(f"{fallback} is not installed. Aborting process.")
    raise NoPackageManagerFound(f"{fallback} and {primary} are not installed. Aborting process.")
