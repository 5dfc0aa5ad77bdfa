from __future__ import annotations

import logging
import shutil
from pathlib import Path
from typing import Optional, Sequence

from .command import CmdResult, run_cmd

logger = logging.getLogger(__name__)

HOMEBREW_INSTALL_URL = "https://raw.githubusercontent.com/Homebrew/install/HEAD/install.sh"

# Apple Silicon installs under /opt/homebrew, Intel under /usr/local.
_BREW_PREFIXES = ("/opt/homebrew/bin/brew", "/usr/local/bin/brew")


def find_brew() -> Optional[str]:
    found = shutil.which("brew")
    if found:
        return found
    for candidate in _BREW_PREFIXES:
        if Path(candidate).exists():
            return candidate
    return None


def install_homebrew(url: str = HOMEBREW_INSTALL_URL, *, dry_run: bool = False) -> None:
    """Download the official installer script and run it interactively."""

    script = run_cmd(["curl", "-fsSL", url], dry_run=dry_run).stdout
    run_cmd(["/bin/bash", "-c", script], capture=False, dry_run=dry_run)


def brew_install(
    packages: Sequence[str],
    *,
    brew: str = "brew",
    check: bool = True,
    dry_run: bool = False,
) -> Optional[CmdResult]:
    if not packages:
        return None
    return run_cmd([brew, "install", *packages], check=check, capture=False, dry_run=dry_run)


def brew_bundle(dotfiles_dir: str, *, brew: str = "brew", dry_run: bool = False) -> None:
    """Install everything listed in <dotfiles_dir>/Brewfile."""

    run_cmd([brew, "bundle", "install"], cwd=dotfiles_dir, capture=False, dry_run=dry_run)
