from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List, Protocol, Sequence

from .context import ProvisioningContext

logger = logging.getLogger(__name__)


class Step(Protocol):
    """A single provisioning stage."""

    step_id: str

    def is_satisfied(self, ctx: ProvisioningContext) -> bool:
        ...

    def run(self, ctx: ProvisioningContext) -> None:
        ...


@dataclass(frozen=True)
class PipelineResult:
    ran_steps: List[str]
    skipped_steps: List[str]


def run_pipeline(*, ctx: ProvisioningContext, steps: Sequence[Step]) -> PipelineResult:
    """Run steps strictly in order; the first failure aborts the run."""

    ran: List[str] = []
    skipped: List[str] = []

    for step in steps:
        if step.is_satisfied(ctx):
            logger.info("Skipping step %s (already satisfied)", step.step_id)
            skipped.append(step.step_id)
            continue

        logger.debug("Running step %s", step.step_id)
        try:
            step.run(ctx)
        except Exception:
            logger.error("Step %s failed", step.step_id)
            raise
        ran.append(step.step_id)

    return PipelineResult(ran_steps=ran, skipped_steps=skipped)
