from __future__ import annotations

from pathlib import Path
from typing import Sequence


class StarterError(RuntimeError):
    """Base class for every fatal provisioning failure."""


class ConfigError(StarterError):
    pass


class NoPackageManagerFound(StarterError):
    pass


class CommandError(StarterError):
    def __init__(self, argv: Sequence[str], returncode: int | None, message: str) -> None:
        super().__init__(message)
        self.argv = list(argv)
        self.returncode = returncode


class InstallError(StarterError):
    def __init__(self, requirement: str, message: str) -> None:
        super().__init__(message)
        self.requirement = requirement


class AssetNotFound(StarterError):
    pass


class AssetManifestError(StarterError):
    pass


class DeployError(StarterError):
    def __init__(self, path: Path, message: str) -> None:
        super().__init__(message)
        self.path = path


class RepoInitError(StarterError):
    pass
