from __future__ import annotations

import logging

from ..context import ProvisioningContext
from ..errors import DeployError
from ..files import GITIGNORE
from ..lib.assets import AssetStore, deploy_file
from ..lib.prompt import Confirm

logger = logging.getLogger(__name__)


class EnsureGitignoreStep:
    step_id = "20_ensure_gitignore"

    def __init__(self, store: AssetStore, confirm: Confirm) -> None:
        self.store = store
        self.confirm = confirm

    def is_satisfied(self, ctx: ProvisioningContext) -> bool:
        path = GITIGNORE.path(ctx)
        try:
            return path.exists()
        except OSError as e:
            raise DeployError(path, f"unable to stat {path}: {e}") from e

    def run(self, ctx: ProvisioningContext) -> None:
        logger.info("Adding default .gitignore")
        deploy_file(GITIGNORE, ctx, store=self.store, confirm=self.confirm)
