"""Core provisioner functionality."""

from __future__ import annotations

import logging
from collections.abc import Callable

from config import Config, get_config
from provisioner.errors import PipelineAbortedError
from provisioner.pipeline import Services, build_pipeline
from provisioner.runner import STEP_ERRORS, PipelineRunner
from provisioner.steps import PipelineReport, Step, StepReport

logger = logging.getLogger(__name__)


class Provisioner:
    """Main provisioning orchestrator - handles business logic only."""

    def __init__(
        self: Provisioner,
        config: Config | None = None,
        services: Services | None = None,
    ) -> None:
        self.config = config or get_config()
        self.services = services or Services()

    def steps(self) -> list[Step]:
        """The step list for the current configuration."""
        return build_pipeline(self.config, self.services)

    def status(self) -> list[tuple[Step, bool | None]]:
        """Evaluate every presence check without running any action.

        Steps without a check map to None. A check that errors counts as
        not satisfied.
        """
        states = []
        for step in self.steps():
            if step.is_satisfied is None:
                states.append((step, None))
                continue
            try:
                satisfied = step.is_satisfied()
            except STEP_ERRORS as e:
                logger.warning("Presence check for %s failed: %s", step.name, e)
                satisfied = False
            states.append((step, satisfied))
        return states

    def run(
        self,
        dry_run: bool = False,
        on_report: Callable[[StepReport], None] | None = None,
    ) -> PipelineReport:
        """Run every step in order.

        Raises:
            PipelineAbortedError: a fatal step failed; the partial report is
                attached to the exception.
        """
        runner = PipelineRunner(self.services.environment, on_report=on_report)
        report = runner.run(self.steps(), dry_run=dry_run)

        if report.aborted:
            failed = report.steps[-1]
            raise PipelineAbortedError(failed.name, failed.message, report=report)

        logger.info(
            "Provisioning finished with %d soft failure(s)", len(report.failures)
        )
        return report
