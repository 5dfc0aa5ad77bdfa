from .step_10_check_platform import CheckPlatformStep
from .step_20_install_homebrew import InstallHomebrewStep
from .step_30_clone_dotfiles import CloneDotfilesStep
from .step_40_create_backup import CreateBackupStep
from .step_50_install_component import InstallComponentStep
from .step_60_link_config_dirs import LinkConfigDirsStep
from .step_70_install_packages import InstallPackagesStep
from .step_90_macos_defaults import ApplyMacosDefaultsStep

__all__ = [
    "CheckPlatformStep",
    "InstallHomebrewStep",
    "CloneDotfilesStep",
    "CreateBackupStep",
    "InstallComponentStep",
    "LinkConfigDirsStep",
    "InstallPackagesStep",
    "ApplyMacosDefaultsStep",
]
