"""Logging setup for the CLI and the development server."""

import logging
from typing import Union

from rich.logging import RichHandler


def setup_logging(level: Union[int, str] = logging.WARNING) -> logging.Logger:
    """Attach a RichHandler to the `strongpass` logger (idempotent)."""
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.WARNING
    log = logging.getLogger("strongpass")
    log.setLevel(level)
    if not any(isinstance(h, RichHandler) for h in log.handlers):
        log.addHandler(RichHandler(show_path=False, rich_tracebacks=True))
    log.propagate = False
    return log
