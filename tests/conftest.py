"""Pytest fixtures for platform-starter tests."""

from __future__ import annotations

import shutil
from pathlib import Path
from typing import Dict, Iterable, List, Optional

import pytest

from platform_starter.config import CONFIG_ENV_VAR
from platform_starter.context import ProvisioningContext
from platform_starter.errors import AssetNotFound, CommandError
from platform_starter.lib.assets import Asset
from platform_starter.lib.command import CmdResult


class MemoryAssetStore:
    """In-memory asset store keyed by name."""

    def __init__(self, assets: Iterable[Asset]) -> None:
        self.assets: Dict[str, Asset] = {a.name: a for a in assets}

    def get(self, name: str) -> Asset:
        try:
            return self.assets[name]
        except KeyError:
            raise AssetNotFound(f"Asset {name} not found") from None


class FakePath:
    """Stand-in for PATH lookups: only names in ``available`` resolve."""

    def __init__(self) -> None:
        self.available: set[str] = set()
        self.lookups: List[str] = []

    def __call__(self, name: str) -> Optional[str]:
        self.lookups.append(name)
        return f"/usr/local/bin/{name}" if name in self.available else None


class FakeRunner:
    """Records package-manager invocations instead of running them."""

    def __init__(self) -> None:
        self.calls: List[List[str]] = []
        self.fail_on: set[str] = set()

    def __call__(self, argv, *, check: bool = True, cwd=None) -> CmdResult:
        argv = list(argv)
        self.calls.append(argv)
        if argv[-1] in self.fail_on:
            raise CommandError(argv, 1, f"Command failed (1): {' '.join(argv)}")
        return CmdResult(argv=argv, returncode=0)

    @property
    def installed(self) -> List[str]:
        return [argv[-1] for argv in self.calls]


@pytest.fixture(autouse=True)
def isolated_config(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep the user's own config file out of every test."""
    monkeypatch.delenv(CONFIG_ENV_VAR, raising=False)
    monkeypatch.setenv("HOME", str(tmp_path / "home"))


@pytest.fixture
def project(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """An empty project root that is also the cwd."""
    root = tmp_path / "project"
    root.mkdir()
    monkeypatch.chdir(root)
    return root


@pytest.fixture
def ctx(project: Path) -> ProvisioningContext:
    return ProvisioningContext(project_root=project, target_dir=project)


@pytest.fixture
def fake_path(monkeypatch: pytest.MonkeyPatch) -> FakePath:
    fake = FakePath()
    monkeypatch.setattr("platform_starter.lib.pkg.find_executable", fake)
    monkeypatch.setattr("platform_starter.lib.requirements.find_executable", fake)
    return fake


@pytest.fixture
def fake_runner(monkeypatch: pytest.MonkeyPatch) -> FakeRunner:
    fake = FakeRunner()
    monkeypatch.setattr("platform_starter.lib.pkg.run_cmd", fake)
    return fake


@pytest.fixture
def store() -> MemoryAssetStore:
    return MemoryAssetStore(
        [
            Asset(".csscomb.json", b'{"quotes": "single"}\n', 0o644),
            Asset(".eslintrc.js", b"module.exports = {};\n", 0o644),
            Asset(".editorconfig", b"root = true\n", 0o644),
            Asset(".gitignore", b"node_modules/\n", 0o644),
            Asset("pre-commit", b"#!/bin/sh\nexit 0\n", 0o755),
        ]
    )


@pytest.fixture
def git_env(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Run real git isolated from the user's and system git config."""
    if shutil.which("git") is None:
        pytest.skip("git is not installed")
    gitconfig = tmp_path / "gitconfig"
    gitconfig.write_text("[init]\n\tdefaultBranch = main\n", encoding="utf-8")
    monkeypatch.setenv("GIT_CONFIG_GLOBAL", str(gitconfig))
    monkeypatch.setenv("GIT_CONFIG_NOSYSTEM", "1")
    monkeypatch.setenv("GIT_AUTHOR_NAME", "Test User")
    monkeypatch.setenv("GIT_AUTHOR_EMAIL", "test@example.com")
    monkeypatch.setenv("GIT_COMMITTER_NAME", "Test User")
    monkeypatch.setenv("GIT_COMMITTER_EMAIL", "test@example.com")
