from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, Optional

import yaml


def assets_dir() -> Path:
    # platform_starter/lib/manifests.py -> platform_starter/assets
    return Path(__file__).resolve().parents[1] / "assets"


def load_asset_manifest(base: Optional[Path] = None) -> Dict[str, Dict[str, Any]]:
    """Load ``manifest.yaml`` describing each bundled asset.

    Returns ``{name: {"file": Path, "mode": int}}``. Modes are written as
    octal strings (``"0644"``) so YAML does not reinterpret them.
    """

    root = base or assets_dir()
    p = root / "manifest.yaml"
    data = yaml.safe_load(p.read_text(encoding="utf-8")) or {}
    if not isinstance(data, dict) or not isinstance(data.get("assets"), dict):
        raise ValueError(f"Manifest must contain an 'assets' mapping: {p}")

    out: Dict[str, Dict[str, Any]] = {}
    for name, entry in data["assets"].items():
        if not isinstance(entry, dict) or "file" not in entry:
            raise ValueError(f"Manifest entry {name!r} needs a 'file': {p}")
        out[str(name)] = {
            "file": root / str(entry["file"]),
            "mode": int(str(entry.get("mode", "0644")), 8),
        }
    return out
