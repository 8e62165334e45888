from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from .errors import ConfigError

CONFIG_ENV_VAR = "PLATFORM_STARTER_CONFIG"
DEFAULT_CONFIG_PATH = "~/.config/platform-starter/config.yaml"
DEFAULT_COMMIT_MESSAGE = "initial commit with platform-starter config"
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

# Global-install argv per supported package manager.
GLOBAL_INSTALL_ARGS: Dict[str, tuple[str, ...]] = {
    "yarn": ("global", "add"),
    "npm": ("install", "-g"),
    "pnpm": ("add", "-g"),
}


@dataclass(frozen=True)
class StarterConfig:
    raw: Dict[str, Any] = field(default_factory=dict)

    def _section(self, name: str) -> Dict[str, Any]:
        section = self.raw.get(name) or {}
        if not isinstance(section, dict):
            raise ConfigError(f"Config section {name!r} must be a mapping/object")
        return section

    @property
    def primary_manager(self) -> str:
        return str(self._section("package_managers").get("primary") or "yarn")

    @property
    def fallback_manager(self) -> str:
        return str(self._section("package_managers").get("fallback") or "npm")

    @property
    def git_binary(self) -> str:
        return str(self._section("git").get("binary") or "git")

    @property
    def commit_message(self) -> str:
        return str(self._section("git").get("commit_message") or DEFAULT_COMMIT_MESSAGE)

    @property
    def log_level(self) -> str:
        return str(self._section("logging").get("level") or "INFO").upper()

    @property
    def log_path(self) -> Optional[str]:
        p = self._section("logging").get("path")
        return str(p) if p else None

    def validate(self) -> "StarterConfig":
        for name in (self.primary_manager, self.fallback_manager):
            if name not in GLOBAL_INSTALL_ARGS:
                supported = ", ".join(sorted(GLOBAL_INSTALL_ARGS))
                raise ConfigError(f"Unsupported package manager {name!r} (supported: {supported})")
        if self.log_level not in LOG_LEVELS:
            raise ConfigError(f"Unsupported log level {self.log_level!r}")
        return self


def _default_path() -> Optional[Path]:
    env = os.environ.get(CONFIG_ENV_VAR)
    if env:
        return Path(env).expanduser()
    p = Path(DEFAULT_CONFIG_PATH).expanduser()
    return p if p.exists() else None


def load_config(path: Optional[str] = None) -> StarterConfig:
    """Load the optional YAML config, falling back to built-in defaults."""

    p = Path(path).expanduser() if path else _default_path()
    if p is None:
        return StarterConfig()

    if not p.exists():
        raise ConfigError(f"Config file not found: {p}")

    if p.suffix.lower() not in {".yaml", ".yml"}:
        raise ConfigError(f"Config file must be YAML: {p}")

    try:
        raw = yaml.safe_load(p.read_text(encoding="utf-8")) or {}
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {p}: {e}") from e

    if not isinstance(raw, dict):
        raise ConfigError(f"Config file must contain a mapping/object: {p}")

    return StarterConfig(raw=raw).validate()
