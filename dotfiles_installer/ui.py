"""Console output: colored status markers and banners.

Every message is mirrored to the log file so the log tells the whole story
even though the console handler is off by default.
"""

from __future__ import annotations

import logging
import os
import sys
from typing import Iterable, Optional, TextIO

logger = logging.getLogger(__name__)

RESET = "\033[0m"
RED = "\033[0;31m"
GREEN = "\033[0;32m"
YELLOW = "\033[1;33m"
BLUE = "\033[0;34m"


def supports_color(stream: Optional[TextIO] = None) -> bool:
    """True when stream is a TTY and NO_COLOR is unset."""
    s = stream or sys.stdout
    if os.environ.get("NO_COLOR"):
        return False
    isatty = getattr(s, "isatty", None)
    return bool(isatty and isatty())


def _emit(color: str, marker: str, msg: str, level: int) -> None:
    logger.log(level, "%s", msg)
    text = f"{marker} {msg}" if marker else msg
    if supports_color():
        text = f"{color}{text}{RESET}"
    print(text, flush=True)


def success(msg: str) -> None:
    _emit(GREEN, "✓", msg, logging.INFO)


def error(msg: str) -> None:
    _emit(RED, "✗", msg, logging.ERROR)


def info(msg: str) -> None:
    _emit(BLUE, "ℹ", msg, logging.INFO)


def warning(msg: str) -> None:
    _emit(YELLOW, "⚠", msg, logging.WARNING)


def blank() -> None:
    print(flush=True)


def banner(lines: Iterable[str], *, ok: bool = False, width: int = 40) -> None:
    rows = list(lines)
    show = success if ok else info
    show("╔" + "═" * width + "╗")
    for row in rows:
        show("║  " + row.ljust(width - 2) + "║")
    show("╚" + "═" * width + "╝")
