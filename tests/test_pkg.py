"""Tests for package manager resolution."""

import pytest

from platform_starter.errors import NoPackageManagerFound
from platform_starter.lib.pkg import PackageManager, locate_package_manager


def test_prefers_primary_when_available(fake_path) -> None:
    fake_path.available = {"yarn", "npm"}

    pm = locate_package_manager(False)

    assert pm == PackageManager(name="yarn", path="/usr/local/bin/yarn")
    assert fake_path.lookups == ["yarn"]


def test_falls_back_and_warns_when_primary_missing(fake_path, caplog) -> None:
    fake_path.available = {"npm"}

    pm = locate_package_manager(False)

    assert pm.name == "npm"
    assert "resorting to install using npm" in caplog.text


def test_force_fallback_skips_primary_probe(fake_path, caplog) -> None:
    fake_path.available = {"yarn", "npm"}

    pm = locate_package_manager(True)

    assert pm.name == "npm"
    assert fake_path.lookups == ["npm"]
    assert "resorting" not in caplog.text


def test_neither_manager_is_fatal(fake_path) -> None:
    with pytest.raises(NoPackageManagerFound, match="npm and yarn are not installed"):
        locate_package_manager(False)


def test_forced_fallback_missing_is_fatal(fake_path) -> None:
    fake_path.available = {"yarn"}

    with pytest.raises(NoPackageManagerFound):
        locate_package_manager(True)


@pytest.mark.parametrize(
    "name, expected",
    [
        ("yarn", ["/bin/yarn", "global", "add", "eslint"]),
        ("npm", ["/bin/npm", "install", "-g", "eslint"]),
        ("pnpm", ["/bin/pnpm", "add", "-g", "eslint"]),
    ],
)
def test_global_install_argv(name: str, expected: list) -> None:
    pm = PackageManager(name=name, path=f"/bin/{name}")
    assert pm.global_install_argv("eslint") == expected


def test_install_global_runs_command(fake_runner) -> None:
    PackageManager(name="npm", path="/bin/npm").install_global("svgo")
    assert fake_runner.calls == [["/bin/npm", "install", "-g", "svgo"]]
