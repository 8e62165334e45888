from __future__ import annotations

import logging

from ..config import StarterConfig
from ..context import ProvisioningContext
from ..lib.git import initialize_repo, is_repo

logger = logging.getLogger(__name__)


class BootstrapRepoStep:
    step_id = "40_bootstrap_repo"

    def __init__(self, config: StarterConfig) -> None:
        self.config = config

    def is_satisfied(self, ctx: ProvisioningContext) -> bool:
        return is_repo(ctx.project_root)

    def run(self, ctx: ProvisioningContext) -> None:
        # Always rooted at the project root, even when --dir points elsewhere.
        logger.warning("Current directory is not a git repository.")
        initialize_repo(
            ctx.project_root,
            git=self.config.git_binary,
            message=self.config.commit_message,
        )
