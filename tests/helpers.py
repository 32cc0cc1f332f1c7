"""Test helpers: fakes for the provisioner's collaborators."""

from __future__ import annotations

import subprocess  # noqa: S404
from collections.abc import Callable
from pathlib import Path

import requests


class FakeSystem:
    """SystemCheck stand-in with a dictionary for PATH."""

    def __init__(self, commands: dict[str, str] | None = None, elevated: bool = True):
        self.commands = dict(commands or {})
        self.elevated = elevated

    def is_windows(self) -> bool:
        return True

    def is_elevated(self) -> bool:
        return self.elevated

    def command_exists(self, command: str) -> bool:
        return command in self.commands

    def get_command_path(self, command: str) -> str | None:
        return self.commands.get(command)


class FakeProcessRunner:
    """ProcessRunner stand-in that records commands and fakes their effects.

    Responses are matched by substring against the joined command line; the
    most recently registered match wins. An effect may return a string, which
    becomes the command's stdout.
    """

    def __init__(self):
        self.calls: list[list[str]] = []
        self.cwds: list[str | None] = []
        self.launched: list[list[str]] = []
        self._responses: list[tuple[str, int, Callable | None]] = []

    def when(self, token: str, returncode: int = 0, effect: Callable | None = None):
        self._responses.insert(0, (token, returncode, effect))
        return self

    def run(self, cmd, cwd=None, capture_output=False, check=True, **kwargs):
        self.calls.append(list(cmd))
        self.cwds.append(cwd)
        line = " ".join(cmd)

        returncode, stdout = 0, ""
        for token, rc, effect in self._responses:
            if token in line:
                if effect is not None:
                    output = effect(cmd, cwd)
                    if isinstance(output, str):
                        stdout = output
                returncode = rc
                break

        if check and returncode != 0:
            raise subprocess.CalledProcessError(returncode, cmd)
        return subprocess.CompletedProcess(cmd, returncode, stdout=stdout, stderr="")

    def launch(self, cmd):
        self.launched.append(list(cmd))

    def count(self, token: str) -> int:
        return sum(1 for cmd in self.calls if token in " ".join(cmd))

    def ran(self, token: str) -> bool:
        return self.count(token) > 0


class FakeDownloader:
    """Downloader stand-in that writes a small file instead of hitting the network."""

    def __init__(self):
        self.downloads: list[str] = []
        self.failing: set[str] = set()

    def download_file(self, url: str, dest: Path) -> Path:
        self.downloads.append(url)
        if any(token in url for token in self.failing):
            raise requests.ConnectionError(f"Cannot reach {url}")
        dest.parent.mkdir(parents=True, exist_ok=True)
        dest.write_bytes(b"payload")
        return dest


class FakeUserEnvironment:
    """UserEnvironmentStore backed by a dictionary."""

    def __init__(self, values: dict[str, str] | None = None):
        self.values = dict(values or {})

    def get(self, name: str) -> str | None:
        return self.values.get(name)

    def set(self, name: str, value: str) -> None:
        self.values[name] = value


def touch(path: Path, content: str = "") -> Path:
    """Create a file and its parents."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content)
    return path
