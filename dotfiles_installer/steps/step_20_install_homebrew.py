from __future__ import annotations

import logging
from typing import Any, Dict

from .. import ui
from ..context import InstallCtx
from ..errors import InstallerError
from ..lib.brew import find_brew, install_homebrew

logger = logging.getLogger(__name__)


class InstallHomebrewStep:
    step_id = "20_install_homebrew"

    def run(self, ctx: InstallCtx, state: Dict[str, Any]) -> Dict[str, Any]:
        brew = find_brew()
        if brew:
            ui.success("Homebrew already installed")
        else:
            ui.info("Installing Homebrew...")
            install_homebrew(ctx.cfg.homebrew_install_url, dry_run=ctx.dry_run)
            brew = find_brew()
            if brew is None:
                if not ctx.dry_run:
                    raise InstallerError("Homebrew install finished but brew was not found")
                brew = "brew"
            ui.success("Homebrew installed")

        ctx.brew = brew
        state.setdefault("execution", {}).setdefault("decisions", {})["brew"] = brew
        return state
