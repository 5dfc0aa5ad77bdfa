from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional, Tuple

DEFAULT_LOG_PATH = "~/Library/Logs/dotfiles-installer.log"
FALLBACK_LOG_NAME = "dotfiles-installer.log"

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
LOG_DATEFMT = "%Y-%m-%dT%H:%M:%S%z"

# Path of the log file once configure_logging() has run in this process.
_active_log_path: Optional[str] = None


def _open_log_file(requested: Path) -> Tuple[logging.FileHandler, Path]:
    """Open the requested log file, or one in the cwd when that location is unwritable."""

    try:
        requested.parent.mkdir(parents=True, exist_ok=True)
        return logging.FileHandler(requested, encoding="utf-8"), requested
    except OSError:
        fallback = Path.cwd() / FALLBACK_LOG_NAME
        return logging.FileHandler(fallback, encoding="utf-8"), fallback


def configure_logging(
    log_path: str = DEFAULT_LOG_PATH,
    level: int = logging.INFO,
    also_console: bool = False,
) -> str:
    """Route all installer logging to one file.

    The console is reserved for the colored status lines printed by `ui`;
    --verbose adds a stderr handler on top. Calling this again only adjusts
    the level. Returns the log file actually in use.
    """

    global _active_log_path

    root = logging.getLogger()
    root.setLevel(level)
    if _active_log_path is not None:
        return _active_log_path

    requested = Path(log_path).expanduser()
    file_handler, actual = _open_log_file(requested)

    fmt = logging.Formatter(fmt=LOG_FORMAT, datefmt=LOG_DATEFMT)
    file_handler.setFormatter(fmt)
    root.addHandler(file_handler)

    if also_console:
        console = logging.StreamHandler()
        console.setFormatter(fmt)
        root.addHandler(console)

    _active_log_path = str(actual)
    if actual != requested:
        logging.getLogger(__name__).warning("Cannot write %s; logging to %s", requested, actual)
    logging.getLogger(__name__).info("Logging to %s", actual)
    return _active_log_path
