from __future__ import annotations

import logging
from pathlib import Path

from ..config import DEFAULT_COMMIT_MESSAGE
from ..errors import CommandError, RepoInitError
from .command import run_cmd

logger = logging.getLogger(__name__)


def is_repo(root: Path) -> bool:
    return (Path(root) / ".git").is_dir()


def initialize_repo(
    root: Path,
    *,
    git: str = "git",
    message: str = DEFAULT_COMMIT_MESSAGE,
) -> None:
    """git init, stage everything and record a single commit.

    A failed step leaves the repository as that step left it.
    """

    logger.info("Initializing git repository in %s...", root)
    cwd = str(root)

    try:
        run_cmd([git, "init"], cwd=cwd)
    except CommandError as e:
        raise RepoInitError(f"unable to initialize git repo: {e}") from e

    try:
        run_cmd([git, "add", "-A"], cwd=cwd)
    except CommandError as e:
        raise RepoInitError(f"unable to add files to repo: {e}") from e

    try:
        run_cmd([git, "commit", "-m", message], cwd=cwd)
    except CommandError as e:
        raise RepoInitError(f"unable to commit: {e}") from e
