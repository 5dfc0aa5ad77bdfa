from __future__ import annotations

import logging

from .command import run_cmd

logger = logging.getLogger(__name__)


def git_clone(url: str, dest: str, *, dry_run: bool = False) -> None:
    run_cmd(["git", "clone", url, dest], capture=False, dry_run=dry_run)
    logger.info("Cloned %s into %s", url, dest)
