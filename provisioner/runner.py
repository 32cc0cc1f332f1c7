"""Sequential runner for the provisioning step list."""

from __future__ import annotations

import logging
import subprocess  # noqa: S404
from collections.abc import Callable, Iterable

import requests

from provisioner.errors import ProvisioningError
from provisioner.services.environment_service import EnvironmentService
from provisioner.steps import (
    InstallationResult,
    PipelineReport,
    Severity,
    Step,
    StepReport,
    StepStatus,
)

logger = logging.getLogger(__name__)

# Failures an action may raise that mean "this step failed", not "the program is broken"
STEP_ERRORS = (
    ProvisioningError,
    subprocess.CalledProcessError,
    OSError,
    requests.RequestException,
)


class PipelineRunner:
    """Runs steps in order, skipping those whose presence check passes."""

    def __init__(
        self: PipelineRunner,
        environment: EnvironmentService,
        on_report: Callable[[StepReport], None] | None = None,
    ) -> None:
        self.environment = environment
        self.on_report = on_report

    def run(self, steps: Iterable[Step], dry_run: bool = False) -> PipelineReport:
        """Run the pipeline, stopping at the first failed fatal step."""
        report = PipelineReport()

        for step in steps:
            try:
                satisfied = self._is_satisfied(step)
            except STEP_ERRORS as e:
                logger.debug("Presence check for %s raised", step.name, exc_info=True)
                step_report = self._failed(step, f"Presence check failed: {e}")
            else:
                if satisfied:
                    step_report = StepReport(
                        step.name, step.severity, StepStatus.SKIPPED, "Already satisfied"
                    )
                elif dry_run:
                    step_report = StepReport(
                        step.name, step.severity, StepStatus.PLANNED, step.description
                    )
                else:
                    step_report = self._execute(step)

            self._record(report, step_report)

            if step_report.status == StepStatus.FAILED and step.severity == Severity.FATAL:
                logger.error("Fatal step %s failed: %s", step.name, step_report.message)
                report.aborted_at = step.name
                break

        return report

    def _is_satisfied(self, step: Step) -> bool:
        if step.is_satisfied is None:
            return False
        satisfied = step.is_satisfied()
        logger.debug("Presence check for %s: %s", step.name, satisfied)
        return satisfied

    def _execute(self, step: Step) -> StepReport:
        logger.info("Running step %s", step.name)
        try:
            result = step.action()
        except STEP_ERRORS as e:
            logger.debug("Step %s raised", step.name, exc_info=True)
            result = InstallationResult(success=False, message=str(e))

        for change in result.environment:
            self.environment.apply(change)

        if result.success:
            logger.info("Step %s succeeded: %s", step.name, result.message)
            return StepReport(step.name, step.severity, StepStatus.SUCCEEDED, result.message)

        return self._failed(step, result.message)

    def _failed(self, step: Step, message: str) -> StepReport:
        if step.severity == Severity.SOFT:
            logger.warning("Step %s failed, continuing: %s", step.name, message)
        return StepReport(step.name, step.severity, StepStatus.FAILED, message)

    def _record(self, report: PipelineReport, step_report: StepReport) -> None:
        report.steps.append(step_report)
        if self.on_report:
            self.on_report(step_report)
