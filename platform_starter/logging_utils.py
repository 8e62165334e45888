from __future__ import annotations

import logging
import os
import tempfile
from pathlib import Path
from typing import Optional


def configure_logging(
    log_path: Optional[str] = None,
    level: int | str = logging.INFO,
    also_console: bool = True,
) -> Optional[str]:
    """Configure logging.

    Console output is the primary channel. A file log is only written when
    ``log_path`` is given; the project directory is never used, since
    anything written there would end up in the initial commit.

    If ``log_path`` cannot be opened we fall back to a file in the temp dir,
    and to the console alone when that fails too.

    Returns the actual file path being used, or None for console only.
    """

    logger = logging.getLogger()
    logger.setLevel(level)

    # Avoid duplicate handlers if configure_logging() is called multiple times.
    if getattr(logger, "_platform_starter_configured", False):
        return getattr(logger, "_platform_starter_log_path", log_path)

    chosen_path: Optional[str] = None
    handlers: list[logging.Handler] = []

    fmt = logging.Formatter(
        fmt="%(asctime)s %(levelname)s %(name)s: %(message)s",
        datefmt="%Y-%m-%dT%H:%M:%S%z",
    )

    if log_path:
        try:
            Path(os.path.dirname(log_path) or ".").mkdir(parents=True, exist_ok=True)
            file_handler: Optional[logging.Handler] = logging.FileHandler(log_path)
            chosen_path = log_path
        except OSError:
            fallback = str(Path(tempfile.gettempdir()) / "platform-starter.log")
            try:
                file_handler = logging.FileHandler(fallback)
                chosen_path = fallback
            except OSError:
                # Console only.
                file_handler = None
        if file_handler is not None:
            file_handler.setFormatter(fmt)
            handlers.append(file_handler)

    if also_console:
        console = logging.StreamHandler()
        console.setFormatter(fmt)
        handlers.append(console)

    for h in handlers:
        logger.addHandler(h)

    setattr(logger, "_platform_starter_configured", True)
    setattr(logger, "_platform_starter_log_path", chosen_path)

    if chosen_path:
        logging.getLogger(__name__).info(
            "Logging initialized (requested=%s, actual=%s)", log_path, chosen_path
        )
    return chosen_path
