"""Session environment component."""

from __future__ import annotations

import logging

from provisioner.steps import EnvironmentChange, InstallationResult

logger = logging.getLogger(__name__)

# PowerShell reads this variable as the process-scope execution policy
EXECUTION_POLICY_VARIABLE = "PSExecutionPolicyPreference"


class SessionEnvironment:
    """Prepare the process environment inherited by every child installer."""

    def __init__(self, execution_policy: str = "Bypass"):
        self.execution_policy = execution_policy

    def prepare(self) -> InstallationResult:
        """Return the process-scope execution policy as an environment change.

        TLS 1.2 cannot be set through the environment; every PowerShell
        command line built by the shell service carries it instead.
        """
        logger.debug("Setting process execution policy to %s", self.execution_policy)
        return InstallationResult(
            success=True,
            message=f"Execution policy {self.execution_policy} for this session, TLS 1.2 enabled",
            environment=[EnvironmentChange(EXECUTION_POLICY_VARIABLE, self.execution_policy)],
        )
