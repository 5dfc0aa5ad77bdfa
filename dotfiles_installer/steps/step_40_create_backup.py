from __future__ import annotations

import logging
from typing import Any, Dict

from .. import ui
from ..context import InstallCtx

logger = logging.getLogger(__name__)


class CreateBackupStep:
    step_id = "40_create_backup"

    def run(self, ctx: InstallCtx, state: Dict[str, Any]) -> Dict[str, Any]:
        root = ctx.linker.ensure_backup_root()
        state.setdefault("execution", {})["backup_dir"] = str(root)
        if ctx.dry_run:
            ui.info(f"Would create backup directory at {root}")
        else:
            ui.info(f"Backup directory created at {root}")
        return state
