from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from .errors import StarterError


@dataclass(frozen=True)
class ProvisioningContext:
    """Read-only run parameters, created once at startup."""

    project_root: Path
    target_dir: Path
    use_fallback_package_manager: bool = False

    @classmethod
    def from_args(cls, target_dir: str = ".", *, npm: bool = False, cwd: Optional[str] = None) -> "ProvisioningContext":
        try:
            root = Path(cwd or os.getcwd())
        except OSError as e:
            raise StarterError(f"unable to get current working directory: {e}") from e
        return cls(
            project_root=root,
            target_dir=Path(os.path.abspath(os.path.expanduser(target_dir))),
            use_fallback_package_manager=npm,
        )
