from __future__ import annotations

import shlex
from typing import Sequence


class InstallerError(RuntimeError):
    pass


class PlatformError(InstallerError):
    pass


class ConfigError(InstallerError):
    pass


class CommandError(InstallerError):
    def __init__(self, argv: Sequence[str], returncode: int, stderr: str = "") -> None:
        self.argv = list(argv)
        self.returncode = returncode
        self.stderr = stderr
        cmd = " ".join(shlex.quote(a) for a in self.argv)
        msg = f"Command failed ({returncode}): {cmd}"
        if stderr.strip():
            msg += f"\n{stderr.strip()}"
        super().__init__(msg)


class LinkError(InstallerError):
    pass


class BackupCollisionError(LinkError):
    """A backup with the same base name already exists in this run."""
