from __future__ import annotations

import logging
from typing import Sequence

from ..context import ProvisioningContext
from ..files import CONFIG_FILES
from ..lib.assets import AssetStore, FileSpec, deploy_file
from ..lib.prompt import Confirm

logger = logging.getLogger(__name__)


class DeployConfigStep:
    step_id = "30_deploy_config"

    def __init__(self, store: AssetStore, confirm: Confirm, files: Sequence[FileSpec] = CONFIG_FILES) -> None:
        self.store = store
        self.confirm = confirm
        self.files = files

    def is_satisfied(self, ctx: ProvisioningContext) -> bool:
        return False

    def run(self, ctx: ProvisioningContext) -> None:
        logger.info("Copying assets...")
        for f in self.files:
            logger.info("Copying %s", f.display)
            deploy_file(f, ctx, store=self.store, confirm=self.confirm)
