from __future__ import annotations

import logging
import platform
import sys

from ..errors import PlatformError

logger = logging.getLogger(__name__)


def is_macos() -> bool:
    return sys.platform == "darwin"


def require_macos() -> str:
    """Return the macOS version string, or raise PlatformError elsewhere."""

    if not is_macos():
        raise PlatformError("This installer is designed for macOS only.")
    version = platform.mac_ver()[0] or "unknown"
    logger.info("Platform check passed (macOS %s, %s)", version, platform.machine())
    return version
