"""Privilege check component."""

from __future__ import annotations

from provisioner.steps import InstallationResult
from provisioner.utils import SystemCheck


class PrivilegeCheck:
    """Requires an elevated process before anything is installed."""

    def __init__(self: PrivilegeCheck, system: SystemCheck) -> None:
        self.system = system

    def check(self) -> InstallationResult:
        """Check that the process is elevated."""
        if not self.system.is_windows():
            return InstallationResult(
                success=False, message="This provisioner only runs on Windows."
            )
        if not self.system.is_elevated():
            return InstallationResult(
                success=False,
                message="Administrator rights required. Re-run from an elevated terminal.",
            )
        return InstallationResult(success=True, message="Running elevated")
