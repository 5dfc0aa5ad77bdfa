from __future__ import annotations

import argparse
import logging
from typing import Any, Dict, List, Optional

from . import ui
from .config import InstallerConfig, load_config
from .context import InstallCtx
from .errors import CommandError, InstallerError, PlatformError
from .logging_utils import DEFAULT_LOG_PATH, configure_logging
from .manifests import Manifest, load_manifest
from .pipeline import Step, new_state, run_pipeline
from .steps import (
    ApplyMacosDefaultsStep,
    CheckPlatformStep,
    CloneDotfilesStep,
    CreateBackupStep,
    InstallComponentStep,
    InstallHomebrewStep,
    InstallPackagesStep,
    LinkConfigDirsStep,
)

logger = logging.getLogger(__name__)


def build_steps(manifest: Manifest) -> List[Step]:
    return [
        CheckPlatformStep(),
        InstallHomebrewStep(),
        CloneDotfilesStep(),
        CreateBackupStep(),
        *[InstallComponentStep(c, prefix="50") for c in manifest.by_phase("configure")],
        LinkConfigDirsStep(),
        InstallPackagesStep(),
        *[InstallComponentStep(c, prefix="80") for c in manifest.by_phase("post")],
        ApplyMacosDefaultsStep(),
    ]


def _print_summary(ctx: InstallCtx, state: Dict[str, Any]) -> None:
    exe = state.get("execution") or {}
    ui.blank()
    ui.banner(["    Installation Complete! 🎉"], ok=True)
    ui.blank()
    if ctx.dry_run:
        ui.warning("Dry run: nothing was changed")
    ui.info(f"📁 Backup location: {ctx.backup_dir}")
    ui.info(f"📁 Dotfiles location: {ctx.dotfiles_dir}")
    ui.info(f"🔗 {len(exe.get('links') or [])} links, {len(exe.get('backups') or [])} backups")
    ui.blank()
    ui.warning("⚠️  Next steps:")
    ui.warning("   1. Restart your terminal or run: source ~/.zshrc")
    ui.warning("   2. Import iTerm2 colorscheme manually if using iTerm2")
    ui.warning("   3. Import Apple Terminal theme manually if using Terminal.app")
    ui.blank()


def run(
    *,
    cfg: InstallerConfig,
    manifest: Manifest,
    dry_run: bool = False,
    assume_yes: bool = False,
    start_at: Optional[str] = None,
    stop_after: Optional[str] = None,
) -> Dict[str, Any]:
    """Run the installer top to bottom, stopping at the first failure."""

    ctx = InstallCtx(cfg=cfg, manifest=manifest, dry_run=dry_run, assume_yes=assume_yes)
    state = new_state()
    state["execution"]["started_at"] = ctx.started_at.isoformat(timespec="seconds")
    state["execution"]["dry_run"] = dry_run

    ui.blank()
    ui.banner(["macOS Dotfiles Installation Script", "Christian Lempa's Dotfiles"])
    ui.blank()

    try:
        result = run_pipeline(
            ctx=ctx,
            state=state,
            steps=build_steps(manifest),
            start_at=start_at,
            stop_after=stop_after,
        )
    except Exception:
        logger.exception(
            "Installer failed at step %s", (state.get("execution") or {}).get("current_step")
        )
        raise

    state = result.state
    state["execution"]["ran_steps"] = result.ran_steps
    logger.info("Run summary: %s", state["execution"])
    _print_summary(ctx, state)
    return state


def main(argv: Optional[list[str]] = None) -> int:
    p = argparse.ArgumentParser(
        prog="dotfiles-installer",
        description="Install Homebrew, clone the dotfiles repo and symlink its configs into $HOME.",
    )
    p.add_argument("--config", default=None, help="Path to YAML config")
    p.add_argument("--log", default=DEFAULT_LOG_PATH, help="Path to installer log")
    p.add_argument("--dry-run", action="store_true", help="Log what would happen without changing anything")
    p.add_argument("-y", "--yes", action="store_true", help="Answer yes to every prompt")
    p.add_argument("-v", "--verbose", action="store_true", help="Also log to the console (DEBUG)")
    p.add_argument("--start-at", default=None, help="Start at step_id (e.g. 50_zsh)")
    p.add_argument("--stop-after", default=None, help="Stop after step_id")
    p.add_argument("--list-steps", action="store_true", help="Print step ids and exit")

    args = p.parse_args(argv)

    configure_logging(
        log_path=args.log,
        level=logging.DEBUG if args.verbose else logging.INFO,
        also_console=bool(args.verbose),
    )

    try:
        cfg = load_config(args.config)
        manifest = load_manifest(cfg.manifest_path)

        if args.list_steps:
            for step in build_steps(manifest):
                print(step.step_id)
            return 0

        run(
            cfg=cfg,
            manifest=manifest,
            dry_run=bool(args.dry_run),
            assume_yes=bool(args.yes),
            start_at=args.start_at,
            stop_after=args.stop_after,
        )
    except PlatformError as e:
        ui.error(str(e))
        return 1
    except CommandError as e:
        ui.error(str(e))
        return e.returncode if e.returncode > 0 else 1
    except (InstallerError, OSError, ValueError) as e:
        ui.error(str(e))
        return 1
    except KeyboardInterrupt:
        ui.error("Interrupted")
        return 130
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
