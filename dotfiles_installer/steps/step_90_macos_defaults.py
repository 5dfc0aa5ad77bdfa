from __future__ import annotations

import logging
from typing import Any, Dict

from .. import ui
from ..context import InstallCtx
from ..lib.command import run_cmd
from ..lib.prompt import confirm

logger = logging.getLogger(__name__)

MACOS_DEFAULTS_SCRIPT = "macos/.macos"


class ApplyMacosDefaultsStep:
    step_id = "90_macos_defaults"

    def run(self, ctx: InstallCtx, state: Dict[str, Any]) -> Dict[str, Any]:
        script = ctx.dotfiles_dir / MACOS_DEFAULTS_SCRIPT
        if not script.is_file():
            return state

        decisions = state.setdefault("execution", {}).setdefault("decisions", {})
        ui.info("Setting macOS defaults...")
        if confirm(
            "Do you want to apply macOS system defaults?",
            assume_yes=ctx.assume_yes,
            input_fn=ctx.input_fn,
        ):
            run_cmd(["bash", str(script)], capture=False, dry_run=ctx.dry_run)
            decisions["macos_defaults"] = "applied"
            ui.success("macOS defaults applied")
        else:
            decisions["macos_defaults"] = "skipped"
            ui.info("Skipped macOS defaults")
        return state
