from __future__ import annotations

import logging
import os
import shutil
from dataclasses import dataclass, field
from datetime import datetime
from pathlib import Path
from typing import Optional, Set

from ..errors import BackupCollisionError, LinkError

logger = logging.getLogger(__name__)

BACKUP_TIMESTAMP_FORMAT = "%Y%m%d_%H%M%S"

ALREADY_LINKED = "already_linked"
BACKED_UP = "backed_up"
REPLACED_SYMLINK = "replaced_symlink"
LINKED = "linked"


def backup_root_for(home: Path, started_at: datetime, prefix: str = ".dotfiles_backup_") -> Path:
    return home / f"{prefix}{started_at.strftime(BACKUP_TIMESTAMP_FORMAT)}"


@dataclass(frozen=True)
class LinkResult:
    source: str
    target: str
    action: str
    backup: Optional[str] = None


@dataclass
class Linker:
    """Symlink dotfiles into place, moving displaced originals into one backup root.

    Backups are keyed by base name only. Two originals that share a base name
    within one run raise BackupCollisionError instead of overwriting each other,
    in dry-run too, since names are reserved as they are claimed.
    """

    backup_root: Path
    dry_run: bool = False
    _reserved: Set[str] = field(default_factory=set, init=False, repr=False)

    def ensure_backup_root(self) -> Path:
        if self.dry_run:
            logger.info("Would create backup directory %s", self.backup_root)
        else:
            self.backup_root.mkdir(parents=True, exist_ok=True)
        return self.backup_root

    def _backup_dest(self, name: str) -> Path:
        dest = self.backup_root / name
        if name in self._reserved or dest.exists() or dest.is_symlink():
            raise BackupCollisionError(f"Backup already exists for {name}: {dest}")
        self._reserved.add(name)
        return dest

    def backup_copy(self, path: Path, name: str) -> Path:
        """Copy a file into the backup root, leaving the original in place."""
        dest = self._backup_dest(name)
        if self.dry_run:
            logger.info("Would copy %s -> %s", path, dest)
            return dest
        self.ensure_backup_root()
        shutil.copy2(str(path), str(dest))
        logger.info("Copied %s -> %s", path, dest)
        return dest

    def link(self, source: Path, target: Path) -> LinkResult:
        # Relative link text would resolve against target's directory, not cwd.
        source = Path(source).absolute()
        target = Path(target).absolute()
        if not (source.exists() or source.is_symlink()):
            raise LinkError(f"Link source does not exist: {source}")

        if self.dry_run:
            logger.info("Would create %s", target.parent)
        else:
            target.parent.mkdir(parents=True, exist_ok=True)

        backup: Optional[Path] = None
        if target.is_symlink():
            if os.readlink(target) == str(source):
                logger.info("Already linked %s -> %s", target, source)
                return LinkResult(source=str(source), target=str(target), action=ALREADY_LINKED)
            action = REPLACED_SYMLINK
            logger.info("Removing existing symlink %s -> %s", target, os.readlink(target))
            if not self.dry_run:
                target.unlink()
        elif target.exists():
            action = BACKED_UP
            backup = self._backup_dest(target.name)
            logger.info("Backing up %s -> %s", target, backup)
            if not self.dry_run:
                self.ensure_backup_root()
                shutil.move(str(target), str(backup))
        else:
            action = LINKED

        logger.info("Linking %s -> %s", target, source)
        if not self.dry_run:
            try:
                target.symlink_to(source)
            except OSError as e:
                raise LinkError(f"Failed to link {target} -> {source}: {e}") from e

        return LinkResult(
            source=str(source),
            target=str(target),
            action=action,
            backup=str(backup) if backup is not None else None,
        )
