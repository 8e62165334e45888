from __future__ import annotations

import logging
import shlex
import shutil
import subprocess
from dataclasses import dataclass
from typing import Optional, Sequence

from ..errors import CommandError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CmdResult:
    argv: list[str]
    returncode: int


def _fmt_argv(argv: Sequence[str]) -> str:
    return " ".join(shlex.quote(a) for a in argv)


def find_executable(name: str) -> Optional[str]:
    """Return the absolute path of ``name`` on PATH, or None."""
    return shutil.which(name)


def run_cmd(
    argv: Sequence[str],
    *,
    check: bool = True,
    cwd: str | None = None,
) -> CmdResult:
    """Run a command attached to the parent's terminal.

    - Always logs the command.
    - stdin/stdout/stderr are inherited so tool prompts stay interactive.
    - Blocks until the child exits; there is no timeout.
    """

    argv_list = list(argv)
    logger.info("CMD %s", _fmt_argv(argv_list))

    try:
        p = subprocess.run(argv_list, cwd=cwd)
    except OSError as e:
        raise CommandError(argv_list, None, f"Unable to start {_fmt_argv(argv_list)}: {e}") from e

    if check and p.returncode != 0:
        raise CommandError(
            argv_list,
            p.returncode,
            f"Command failed ({p.returncode}): {_fmt_argv(argv_list)}",
        )

    return CmdResult(argv=argv_list, returncode=p.returncode)
