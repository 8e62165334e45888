from __future__ import annotations

import logging
from typing import Sequence

from ..config import StarterConfig
from ..context import ProvisioningContext
from ..lib.requirements import REQUIREMENTS, Requirement, ensure_all

logger = logging.getLogger(__name__)


class InstallRequirementsStep:
    step_id = "10_install_requirements"

    def __init__(self, config: StarterConfig, requirements: Sequence[Requirement] = REQUIREMENTS) -> None:
        self.config = config
        self.requirements = requirements

    def is_satisfied(self, ctx: ProvisioningContext) -> bool:
        return False

    def run(self, ctx: ProvisioningContext) -> None:
        logger.info("Installing requirements...")
        ensure_all(
            self.requirements,
            force_fallback=ctx.use_fallback_package_manager,
            primary=self.config.primary_manager,
            fallback=self.config.fallback_manager,
        )
