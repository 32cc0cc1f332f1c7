"""Step progress display functions."""

import clicycle

from provisioner.steps import PipelineReport, Severity, Step, StepReport, StepStatus

STATUS_LABELS = {
    StepStatus.SKIPPED: "already done",
    StepStatus.SUCCEEDED: "done",
    StepStatus.FAILED: "failed",
    StepStatus.PLANNED: "would run",
}


def display_step(report: StepReport):
    """Display a step as soon as it finishes."""
    if report.status == StepStatus.SKIPPED:
        clicycle.info(f"{report.name}: already satisfied")
    elif report.status == StepStatus.SUCCEEDED:
        clicycle.success(f"{report.name}: {report.message}")
    elif report.status == StepStatus.PLANNED:
        clicycle.info(f"{report.name}: would run ({report.message})")
    elif report.severity == Severity.FATAL:
        clicycle.error(f"{report.name}: {report.message}")
    else:
        clicycle.warning(f"{report.name}: {report.message}")


def display_summary(report: PipelineReport):
    """Display a table of every step that ran."""
    clicycle.section("Summary")

    table_data = [
        {
            "Step": step.name,
            "Severity": str(step.severity),
            "Result": STATUS_LABELS[step.status],
        }
        for step in report.steps
    ]
    clicycle.table(table_data)

    if report.aborted:
        clicycle.error(f"Stopped at {report.aborted_at}")
    elif report.failures:
        clicycle.warning(
            f"Finished with {len(report.failures)} warning(s); see the log for details"
        )
    else:
        clicycle.success("Provisioning complete!")


def display_status(states: list[tuple[Step, bool | None]]):
    """Display each step with the state of its presence check."""
    clicycle.section("Status")

    table_data = []
    for step, satisfied in states:
        if satisfied is None:
            state = "runs every time"
        else:
            state = "satisfied" if satisfied else "pending"
        table_data.append({"Step": step.name, "Severity": str(step.severity), "State": state})
    clicycle.table(table_data)

    pending = sum(1 for _, satisfied in states if satisfied is False)
    if pending:
        clicycle.info(f"{pending} step(s) would install something")
    else:
        clicycle.success("Nothing left to install")
