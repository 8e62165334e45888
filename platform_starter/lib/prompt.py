from __future__ import annotations

from typing import Callable

Confirm = Callable[[str], bool]

_YES = {"y", "yes"}
_NO = {"n", "no"}


def confirm(question: str) -> bool:
    """Ask a yes/no question on the terminal until it gets an answer.

    End of input (e.g. stdin closed) counts as "no".
    """

    while True:
        try:
            answer = input(f"{question} (yes/no) ").strip().lower()
        except EOFError:
            print()
            return False
        if answer in _YES:
            return True
        if answer in _NO:
            return False
