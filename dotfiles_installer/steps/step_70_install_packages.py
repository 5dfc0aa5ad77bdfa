from __future__ import annotations

import logging
from typing import Any, Dict

from .. import ui
from ..context import InstallCtx
from ..lib.brew import brew_bundle, brew_install

logger = logging.getLogger(__name__)


class InstallPackagesStep:
    step_id = "70_install_packages"

    def run(self, ctx: InstallCtx, state: Dict[str, Any]) -> Dict[str, Any]:
        exe = state.setdefault("execution", {})

        if (ctx.dotfiles_dir / "Brewfile").is_file():
            ui.info("Installing packages from Brewfile...")
            brew_bundle(str(ctx.dotfiles_dir), brew=ctx.brew, dry_run=ctx.dry_run)
            ui.success("Packages installed")
        else:
            ui.warning("No Brewfile found, skipping package installation")

        extra = ctx.cfg.extra_formulae
        if extra:
            ui.info(f"Installing additional tools ({', '.join(extra)})...")
            # Best effort: a missing formula must not abort the run.
            r = brew_install(extra, brew=ctx.brew, check=False, dry_run=ctx.dry_run)
            if r is not None and r.returncode != 0:
                logger.warning("brew install %s exited %s", " ".join(extra), r.returncode)
                exe.setdefault("warnings", []).append(
                    {"extra_formulae": extra, "returncode": r.returncode}
                )
        return state
