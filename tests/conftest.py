from datetime import datetime

import pytest

from dotfiles_installer.config import InstallerConfig
from dotfiles_installer.context import InstallCtx
from dotfiles_installer.manifests import load_manifest
from dotfiles_installer.pipeline import new_state

STARTED_AT = datetime(2025, 1, 1, 12, 30, 0)


@pytest.fixture
def home(tmp_path):
    h = tmp_path / "home"
    h.mkdir()
    return h


@pytest.fixture
def dotfiles(home):
    d = home / ".dotfiles"
    d.mkdir()
    return d


@pytest.fixture
def make_ctx(home, dotfiles):
    def _make(**kwargs):
        cfg = InstallerConfig(raw={"home": str(home), "dotfiles_dir": str(dotfiles)})
        kwargs.setdefault("manifest", load_manifest())
        kwargs.setdefault("started_at", STARTED_AT)
        return InstallCtx(cfg=cfg, **kwargs)

    return _make


@pytest.fixture
def state():
    return new_state()


@pytest.fixture
def backup_dir(home):
    return home / ".dotfiles_backup_20250101_123000"
