from __future__ import annotations

import logging
from typing import Any, Dict

from .. import ui
from ..context import InstallCtx
from ._links import link_into_home

logger = logging.getLogger(__name__)


class LinkConfigDirsStep:
    """Link every <dotfiles>/.config/<name> not claimed by a component."""

    step_id = "60_link_config_dirs"

    def run(self, ctx: InstallCtx, state: Dict[str, Any]) -> Dict[str, Any]:
        spec = ctx.manifest.config_dirs
        src_root = ctx.dotfiles_dir / spec.source
        if not src_root.is_dir():
            logger.info("No %s in dotfiles; nothing to link", spec.source)
            return state

        ui.info("Installing additional config directories...")
        excluded = set(spec.exclude)
        for config_dir in sorted(src_root.iterdir()):
            if not config_dir.is_dir():
                continue
            if config_dir.name in excluded:
                logger.info("Skipping %s (handled by its own component)", config_dir.name)
                continue
            link_into_home(ctx, state, config_dir, ctx.home / spec.target / config_dir.name)

        ui.success("Additional config directories installed")
        return state
