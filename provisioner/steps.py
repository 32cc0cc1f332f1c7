"""Declarative description of a provisioning step and its results."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from enum import StrEnum


class Severity(StrEnum):
    """How a failed step affects the rest of the pipeline."""

    FATAL = "fatal"
    SOFT = "soft"


class StepStatus(StrEnum):
    """Outcome of a single step."""

    SKIPPED = "skipped"
    SUCCEEDED = "succeeded"
    FAILED = "failed"
    PLANNED = "planned"


class ChangeMode(StrEnum):
    """How an environment change is applied."""

    SET = "set"
    APPEND_PATH = "append_path"


@dataclass(frozen=True)
class EnvironmentChange:
    """An environment mutation a step asks the runner to apply."""

    variable: str
    value: str
    mode: ChangeMode = ChangeMode.SET
    persist: bool = False

    @classmethod
    def append_path(cls, entry: str, persist: bool = False) -> EnvironmentChange:
        """Append a directory to the command search path."""
        return cls("PATH", entry, ChangeMode.APPEND_PATH, persist)


@dataclass
class InstallationResult:
    """Result of an installation step."""

    success: bool
    message: str
    details: dict | None = None
    environment: list[EnvironmentChange] = field(default_factory=list)


@dataclass(frozen=True)
class Step:
    """A named, idempotent unit of provisioning work.

    ``is_satisfied`` is the presence check. When it returns True the action
    is not run. Steps without a check always run.
    """

    name: str
    description: str
    action: Callable[[], InstallationResult]
    is_satisfied: Callable[[], bool] | None = None
    severity: Severity = Severity.SOFT


@dataclass
class StepReport:
    """What happened to one step during a run."""

    name: str
    severity: Severity
    status: StepStatus
    message: str = ""


@dataclass
class PipelineReport:
    """Ordered step reports for a complete run."""

    steps: list[StepReport] = field(default_factory=list)
    aborted_at: str | None = None

    @property
    def aborted(self) -> bool:
        """Whether a fatal step stopped the run."""
        return self.aborted_at is not None

    @property
    def failures(self) -> list[StepReport]:
        """Steps that failed, fatal or not."""
        return [step for step in self.steps if step.status == StepStatus.FAILED]

    def status_of(self, name: str) -> StepStatus | None:
        """Status of a step by name, or None if it never ran."""
        for step in self.steps:
            if step.name == name:
                return step.status
        return None
