"""Process and user-level environment variable service."""

from __future__ import annotations

import logging
import os
import sys
from collections.abc import MutableMapping
from typing import Protocol

from provisioner.steps import ChangeMode, EnvironmentChange

logger = logging.getLogger(__name__)

USER_ENVIRONMENT_KEY = "Environment"


class UserEnvironmentStore(Protocol):
    """Persistent per-user environment variables."""

    def get(self, name: str) -> str | None: ...

    def set(self, name: str, value: str) -> None: ...


class WindowsUserEnvironment:
    """User environment stored under HKEY_CURRENT_USER\\Environment."""

    def get(self, name: str) -> str | None:
        """Read a user-level variable from the registry."""
        import winreg

        try:
            with winreg.OpenKey(winreg.HKEY_CURRENT_USER, USER_ENVIRONMENT_KEY) as key:
                value, _ = winreg.QueryValueEx(key, name)
                return value
        except FileNotFoundError:
            return None

    def set(self, name: str, value: str) -> None:
        """Write a user-level variable and tell running programs about it."""
        import winreg

        with winreg.CreateKeyEx(
            winreg.HKEY_CURRENT_USER, USER_ENVIRONMENT_KEY, 0, winreg.KEY_WRITE
        ) as key:
            winreg.SetValueEx(key, name, 0, winreg.REG_EXPAND_SZ, value)
        self._broadcast_change()

    def _broadcast_change(self) -> None:
        import ctypes

        hwnd_broadcast = 0xFFFF
        wm_settingchange = 0x001A
        smto_abortifhung = 0x0002
        result = ctypes.c_ulong()
        ctypes.windll.user32.SendMessageTimeoutW(
            hwnd_broadcast,
            wm_settingchange,
            0,
            USER_ENVIRONMENT_KEY,
            smto_abortifhung,
            5000,
            ctypes.byref(result),
        )


def default_user_environment() -> UserEnvironmentStore | None:
    """The registry-backed store on Windows, nothing elsewhere."""
    if sys.platform == "win32":
        return WindowsUserEnvironment()
    return None


def append_path_entry(path_value: str, entry: str) -> str:
    """Append a directory to a PATH-style value unless it is already there."""
    entries = [part for part in path_value.split(os.pathsep) if part]
    normalized = {os.path.normcase(part.rstrip("\\/")) for part in entries}
    if os.path.normcase(entry.rstrip("\\/")) in normalized:
        return path_value
    return os.pathsep.join([*entries, entry])


class EnvironmentService:
    """Applies environment changes returned by steps."""

    def __init__(
        self: EnvironmentService,
        environ: MutableMapping[str, str] | None = None,
        user_store: UserEnvironmentStore | None = None,
    ) -> None:
        self.environ = os.environ if environ is None else environ
        self.user_store = user_store

    def apply(self, change: EnvironmentChange) -> None:
        """Apply a change in-process and, when asked, to the user environment."""
        current = self.environ.get(change.variable, "")
        self.environ[change.variable] = self._merge(current, change)
        logger.debug("Applied %s=%s (%s) in-process", change.variable, change.value, change.mode)

        if not change.persist:
            return
        if self.user_store is None:
            logger.debug("No user environment store, %s not persisted", change.variable)
            return

        stored = self.user_store.get(change.variable) or ""
        merged = self._merge(stored, change)
        if merged != stored:
            self.user_store.set(change.variable, merged)
            logger.info("Persisted %s to the user environment", change.variable)

    @staticmethod
    def _merge(current: str, change: EnvironmentChange) -> str:
        if change.mode == ChangeMode.APPEND_PATH:
            return append_path_entry(current, change.value)
        return change.value
