"""Exception classes for the provisioner."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from provisioner.steps import PipelineReport


class ProvisioningError(Exception):
    """Base exception for all provisioning errors."""


class StepFailedError(ProvisioningError):
    """Raised when a step's action cannot reach its goal."""

    def __init__(self: StepFailedError, step: str, message: str) -> None:
        self.step = step
        self.message = message
        super().__init__(f"{step}: {message}")


class PipelineAbortedError(ProvisioningError):
    """Raised when a fatal step fails and the pipeline stops."""

    def __init__(
        self: PipelineAbortedError,
        step: str,
        message: str,
        report: PipelineReport | None = None,
    ) -> None:
        self.step = step
        self.message = message
        self.report = report
        super().__init__(f"Provisioning aborted at '{step}': {message}")
