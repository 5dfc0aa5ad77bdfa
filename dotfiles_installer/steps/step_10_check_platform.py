from __future__ import annotations

import logging
from typing import Any, Dict

from .. import ui
from ..context import InstallCtx
from ..lib.platform_check import require_macos

logger = logging.getLogger(__name__)


class CheckPlatformStep:
    step_id = "10_check_platform"

    def run(self, ctx: InstallCtx, state: Dict[str, Any]) -> Dict[str, Any]:
        version = require_macos()
        state.setdefault("execution", {}).setdefault("decisions", {})["macos_version"] = version
        ui.success("Running on macOS")
        return state
