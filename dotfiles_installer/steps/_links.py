from __future__ import annotations

import logging
import os
from dataclasses import asdict
from pathlib import Path
from typing import Any, Dict, Optional

from ..context import InstallCtx
from ..lib.linker import LinkResult
from .. import ui

logger = logging.getLogger(__name__)


def link_into_home(
    ctx: InstallCtx,
    state: Dict[str, Any],
    source: Path,
    target: Path,
    *,
    mode: Optional[int] = None,
) -> LinkResult:
    """Link, record the result in state, and report it on the console."""

    result = ctx.linker.link(source, target)
    exe = state.setdefault("execution", {})
    exe.setdefault("links", []).append(asdict(result))
    if result.backup:
        exe.setdefault("backups", []).append(result.backup)
        ui.warning(f"Backed up existing {target.name}")
    elif result.action == "replaced_symlink":
        ui.info(f"Replaced existing symlink {target.name}")

    if mode is not None:
        if ctx.dry_run:
            logger.info("Would chmod %o %s", mode, target)
        else:
            # Follows the link, so the mode lands on the file in the checkout.
            os.chmod(target, mode)

    ui.success(f"Linked {source.name}")
    return result
