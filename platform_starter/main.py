from __future__ import annotations

import argparse
import logging
from typing import Optional

from . import __version__
from .config import StarterConfig, load_config
from .context import ProvisioningContext
from .errors import StarterError
from .lib.assets import AssetStore, PackagedAssetStore
from .lib.prompt import Confirm, confirm as terminal_confirm
from .logging_utils import configure_logging
from .pipeline import PipelineResult, run_pipeline
from .steps import (
    BootstrapRepoStep,
    DeployConfigStep,
    EnsureGitignoreStep,
    InstallPrecommitHookStep,
    InstallRequirementsStep,
)

logger = logging.getLogger(__name__)


def build_steps(config: StarterConfig, store: AssetStore, confirm: Confirm):
    return [
        InstallRequirementsStep(config),
        EnsureGitignoreStep(store, confirm),
        DeployConfigStep(store, confirm),
        BootstrapRepoStep(config),
        InstallPrecommitHookStep(store, confirm),
    ]


def run(
    ctx: ProvisioningContext,
    *,
    config: Optional[StarterConfig] = None,
    store: Optional[AssetStore] = None,
    confirm: Confirm = terminal_confirm,
) -> PipelineResult:
    """Provision ``ctx.target_dir``. Raises StarterError on any fatal failure."""

    logger.info("Starting platform-starter")
    result = run_pipeline(
        ctx=ctx,
        steps=build_steps(config or StarterConfig(), store or PackagedAssetStore(), confirm),
    )
    logger.info("Everything ready!")
    return result


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="platform-starter",
        description="Initialize platform projects with common configuration.",
    )
    p.add_argument("--dir", default=".", help="directory to initialize")
    p.add_argument(
        "--npm",
        action="store_true",
        help="forces the usage of npm for installing dependencies",
    )
    p.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return p


def main(argv: Optional[list[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    try:
        config = load_config()
    except StarterError as e:
        configure_logging()
        logger.critical("invalid configuration: %s", e)
        return 1

    configure_logging(log_path=config.log_path, level=config.log_level)

    try:
        ctx = ProvisioningContext.from_args(args.dir, npm=bool(args.npm))
        run(ctx, config=config)
    except StarterError as e:
        logger.critical("%s", e)
        return 1
    except OSError as e:
        logger.critical("I/O error: %s", e)
        return 1
    except KeyboardInterrupt:
        return 130
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
