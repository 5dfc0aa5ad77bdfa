from __future__ import annotations

import logging
import shutil
from typing import Any, Dict

from .. import ui
from ..context import InstallCtx
from ..lib.git import git_clone
from ..lib.prompt import confirm

logger = logging.getLogger(__name__)


class CloneDotfilesStep:
    step_id = "30_clone_dotfiles"

    def run(self, ctx: InstallCtx, state: Dict[str, Any]) -> Dict[str, Any]:
        dest = ctx.dotfiles_dir
        decisions = state.setdefault("execution", {}).setdefault("decisions", {})

        if dest.is_dir():
            ui.warning(f"Dotfiles directory already exists at {dest}")
            if not confirm(
                "Do you want to remove it and re-clone?",
                assume_yes=ctx.assume_yes,
                input_fn=ctx.input_fn,
            ):
                ui.info("Using existing dotfiles directory")
                decisions["dotfiles"] = "reused"
                return state
            if ctx.dry_run:
                logger.info("Would remove %s", dest)
            elif dest.is_symlink():
                dest.unlink()
            else:
                shutil.rmtree(dest)
            ui.info("Removed existing dotfiles directory")

        ui.info("Cloning dotfiles repository...")
        git_clone(ctx.cfg.repo_url, str(dest), dry_run=ctx.dry_run)
        decisions["dotfiles"] = "cloned"
        ui.success(f"Dotfiles repository cloned to {dest}")
        return state
