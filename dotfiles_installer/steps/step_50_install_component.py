from __future__ import annotations

import logging
from typing import Any, Dict

from .. import ui
from ..context import InstallCtx
from ..lib.brew import brew_install
from ..lib.command import have_command
from ..manifests import Component
from ._links import link_into_home

logger = logging.getLogger(__name__)


class InstallComponentStep:
    """Install one manifest component: optional formula, then its links."""

    def __init__(self, component: Component, prefix: str = "50") -> None:
        self.component = component
        self.step_id = f"{prefix}_{component.name}"

    def run(self, ctx: InstallCtx, state: Dict[str, Any]) -> Dict[str, Any]:
        comp = self.component
        dotfiles = ctx.dotfiles_dir
        home = ctx.home

        if comp.requires and not (dotfiles / comp.requires).exists():
            logger.info("Skipping %s: %s not in dotfiles", comp.name, comp.requires)
            state.setdefault("execution", {}).setdefault("skipped_components", []).append(comp.name)
            return state

        ui.info(f"Installing {comp.title}...")

        if comp.formula and comp.command and not have_command(comp.command):
            ui.info(f"Installing {comp.formula} via Homebrew...")
            brew_install([comp.formula], brew=ctx.brew, dry_run=ctx.dry_run)

        for rel in comp.ensure_dirs:
            d = home / rel
            if ctx.dry_run:
                logger.info("Would create %s", d)
            else:
                d.mkdir(parents=True, exist_ok=True)

        for copy in comp.backup_copies:
            existing = home / copy.path
            if existing.is_file():
                ui.warning(f"Backing up existing {copy.path}")
                dest = ctx.linker.backup_copy(existing, copy.name)
                state.setdefault("execution", {}).setdefault("backups", []).append(str(dest))

        for spec in comp.links:
            source = dotfiles / spec.source
            if not source.exists():
                logger.info("Skipping link %s: source missing", spec.source)
                continue
            link_into_home(ctx, state, source, home / spec.target, mode=spec.mode)

        ui.success(f"{comp.title} installed")
        for note in comp.notes:
            ui.info(note.format(dotfiles=dotfiles, home=home))
        return state
