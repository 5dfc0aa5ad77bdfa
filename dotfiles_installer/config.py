from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, List, Optional

import yaml

from .errors import ConfigError
from .lib.brew import HOMEBREW_INSTALL_URL

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = "~/.config/dotfiles-installer/config.yaml"
DEFAULT_REPO_URL = "https://github.com/ChristianLempa/dotfiles.git"


@dataclass(frozen=True)
class InstallerConfig:
    raw: Dict[str, Any]

    @property
    def repo_url(self) -> str:
        return str(self.raw.get("repo_url") or DEFAULT_REPO_URL)

    @property
    def home(self) -> Path:
        return Path(str(self.raw.get("home") or "~")).expanduser()

    @property
    def dotfiles_dir(self) -> Path:
        return Path(str(self.raw.get("dotfiles_dir") or self.home / ".dotfiles")).expanduser()

    @property
    def backup_prefix(self) -> str:
        return str(self.raw.get("backup_prefix") or ".dotfiles_backup_")

    @property
    def homebrew_install_url(self) -> str:
        return str(self.raw.get("homebrew_install_url") or HOMEBREW_INSTALL_URL)

    @property
    def extra_formulae(self) -> List[str]:
        extra = self.raw.get("extra_formulae")
        if extra is None:
            return ["duf", "dust"]
        if not isinstance(extra, list):
            raise ConfigError("extra_formulae must be a list")
        return [str(f).strip() for f in extra if str(f).strip()]

    @property
    def manifest_path(self) -> Optional[Path]:
        m = self.raw.get("manifest")
        return Path(str(m)).expanduser() if m else None


def load_config(path: Optional[str] = None) -> InstallerConfig:
    """Load YAML config.

    An explicit path must exist. Without one, the default location is used
    when present, otherwise built-in defaults apply.
    """

    if path is None:
        p = Path(DEFAULT_CONFIG_PATH).expanduser()
        if not p.exists():
            logger.info("No config at %s; using defaults", p)
            return InstallerConfig(raw={})
    else:
        p = Path(path).expanduser()
        if not p.exists():
            raise ConfigError(f"Config file not found: {p}")

    if p.suffix.lower() not in {".yaml", ".yml"}:
        raise ConfigError(f"Config must be YAML: {p}")

    try:
        raw = yaml.safe_load(p.read_text(encoding="utf-8")) or {}
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {p}: {e}") from e
    if not isinstance(raw, dict):
        raise ConfigError(f"{p} must contain a mapping/object")

    logger.info("Loaded config from %s", p)
    return InstallerConfig(raw=raw)
