"""PowerShell invocation service."""

from __future__ import annotations

import subprocess  # noqa: S404

from provisioner.utils import ProcessRunner

POWERSHELL = "powershell.exe"

# Older Windows builds default WebClient to TLS 1.0, which the bootstrap hosts refuse
TLS12_PREAMBLE = (
    "[System.Net.ServicePointManager]::SecurityProtocol = "
    "[System.Net.ServicePointManager]::SecurityProtocol -bor 3072"
)


def build_powershell_command(script: str) -> list[str]:
    """Build a non-interactive PowerShell command line for a script."""
    return [
        POWERSHELL,
        "-NoProfile",
        "-NonInteractive",
        "-ExecutionPolicy",
        "Bypass",
        "-Command",
        f"{TLS12_PREAMBLE}; {script}",
    ]


def bootstrap_script(url: str) -> str:
    """Script that downloads and evaluates a remote installer script."""
    return f"iex ((New-Object System.Net.WebClient).DownloadString('{url}'))"


def run_powershell(
    runner: ProcessRunner, script: str, check: bool = True
) -> subprocess.CompletedProcess:
    """Run a PowerShell script through the given process runner."""
    return runner.run(build_powershell_command(script), check=check)
