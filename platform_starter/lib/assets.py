from __future__ import annotations

import enum
import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional, Protocol

import yaml

from ..context import ProvisioningContext
from ..errors import AssetManifestError, AssetNotFound, DeployError
from .manifests import load_asset_manifest
from .prompt import Confirm

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Asset:
    name: str
    content: bytes
    mode: int


class AssetStore(Protocol):
    """Read-only lookup of bundled template files."""

    def get(self, name: str) -> Asset:
        ...


class PackagedAssetStore:
    """Assets shipped as package data next to this package."""

    def __init__(self, base: Optional[Path] = None) -> None:
        self._base = base
        self._manifest: Optional[Dict[str, Dict[str, Any]]] = None
        self._cache: Dict[str, Asset] = {}

    def _entries(self) -> Dict[str, Dict[str, Any]]:
        if self._manifest is None:
            try:
                self._manifest = load_asset_manifest(self._base)
            except (OSError, ValueError, yaml.YAMLError) as e:
                raise AssetManifestError(f"Unable to load asset manifest: {e}") from e
        return self._manifest

    def get(self, name: str) -> Asset:
        if name in self._cache:
            return self._cache[name]
        entry = self._entries().get(name)
        if entry is None:
            raise AssetNotFound(f"Asset {name} not found")
        try:
            content = Path(entry["file"]).read_bytes()
        except OSError as e:
            raise AssetNotFound(f"Asset {name} is unreadable: {e}") from e
        asset = Asset(name=name, content=content, mode=entry["mode"])
        self._cache[name] = asset
        return asset


class Anchor(enum.Enum):
    ROOT = "root"  # the project root (cwd)
    WORKDIR = "workdir"  # the --dir target


@dataclass(frozen=True)
class FileSpec:
    asset: str
    dest: tuple[str, ...]
    anchor: Anchor

    def __post_init__(self) -> None:
        if not self.dest:
            raise ValueError(f"FileSpec for {self.asset} has an empty destination")

    @property
    def display(self) -> str:
        return os.path.join(*self.dest)

    def path(self, ctx: ProvisioningContext) -> Path:
        base = ctx.project_root if self.anchor is Anchor.ROOT else ctx.target_dir
        return Path(base).joinpath(*self.dest)


def write_asset(path: Path, asset: Asset) -> None:
    """Create ``path`` with the asset's bytes and exact permission bits."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_bytes(asset.content)
    # chmod separately: the umask would otherwise mask the recorded mode.
    os.chmod(path, asset.mode)


def deploy_file(
    spec: FileSpec,
    ctx: ProvisioningContext,
    *,
    store: AssetStore,
    confirm: Confirm,
) -> bool:
    """Copy an asset to its destination, asking before replacing a file.

    Returns True when the file was written, False when the user kept the
    existing one.
    """

    asset = store.get(spec.asset)
    path = spec.path(ctx)

    try:
        exists = path.exists()
    except OSError as e:
        raise DeployError(path, f"unable to stat {path}: {e}") from e

    if exists:
        logger.warning("file %s already exists", spec.display)
        if not confirm("Do you want to overwrite it?"):
            logger.warning("Skipped copy of file %s", spec.display)
            return False
        try:
            path.unlink()
        except OSError as e:
            raise DeployError(path, f"unable to remove file {path}: {e}") from e

    try:
        write_asset(path, asset)
    except OSError as e:
        raise DeployError(path, f"unable to write {path}: {e}") from e
    return True
