from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from pathlib import Path
from typing import Callable, Optional

from .config import InstallerConfig
from .lib.linker import Linker, backup_root_for
from .manifests import Manifest


@dataclass
class InstallCtx:
    cfg: InstallerConfig
    manifest: Manifest
    started_at: datetime = field(default_factory=datetime.now)
    dry_run: bool = False
    assume_yes: bool = False
    input_fn: Optional[Callable[[str], str]] = None
    brew: str = "brew"
    linker: Linker = field(init=False)

    def __post_init__(self) -> None:
        self.linker = Linker(backup_root=self.backup_dir, dry_run=self.dry_run)

    @property
    def home(self) -> Path:
        return self.cfg.home

    @property
    def dotfiles_dir(self) -> Path:
        return self.cfg.dotfiles_dir

    @property
    def backup_dir(self) -> Path:
        return backup_root_for(self.home, self.started_at, self.cfg.backup_prefix)
