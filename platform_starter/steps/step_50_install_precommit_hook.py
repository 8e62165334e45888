from __future__ import annotations

import logging

from ..context import ProvisioningContext
from ..files import PRECOMMIT_HOOK
from ..lib.assets import AssetStore, deploy_file
from ..lib.prompt import Confirm

logger = logging.getLogger(__name__)


class InstallPrecommitHookStep:
    step_id = "50_install_precommit_hook"

    def __init__(self, store: AssetStore, confirm: Confirm) -> None:
        self.store = store
        self.confirm = confirm

    def is_satisfied(self, ctx: ProvisioningContext) -> bool:
        return False

    def run(self, ctx: ProvisioningContext) -> None:
        logger.info("Installing pre-commit hook...")
        deploy_file(PRECOMMIT_HOOK, ctx, store=self.store, confirm=self.confirm)
