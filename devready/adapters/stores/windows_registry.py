"""
Windows registry store — the machine-scope PATH.

Machine-wide environment variables live under
``HKLM\\SYSTEM\\CurrentControlSet\\Control\\Session Manager\\Environment``.
Writing there requires an elevated process. After a successful write we
broadcast ``WM_SETTINGCHANGE`` so newly started shells pick it up.
"""

from __future__ import annotations

import logging
import sys

from devready.adapters.base import PathStore
from devready.core.models.receipt import Receipt

logger = logging.getLogger(__name__)

ENVIRONMENT_KEY = r"SYSTEM\CurrentControlSet\Control\Session Manager\Environment"
VALUE_NAME = "Path"

_HWND_BROADCAST = 0xFFFF
_WM_SETTINGCHANGE = 0x001A
_SMTO_ABORTIFHUNG = 0x0002
_BROADCAST_TIMEOUT_MS = 5000


class WindowsRegistryPathStore(PathStore):
    """Machine-scope PATH stored in the Windows registry."""

    def __init__(self, key: str = ENVIRONMENT_KEY, value_name: str = VALUE_NAME):
        self._key = key
        self._value_name = value_name
        # Remember the value type so REG_EXPAND_SZ entries like
        # %SystemRoot% keep expanding after we rewrite them.
        self._value_type: int | None = None

    @property
    def name(self) -> str:
        return "windows-registry"

    @property
    def delimiter(self) -> str:
        return ";"

    def is_available(self) -> bool:
        return sys.platform == "win32"

    def read(self) -> Receipt:
        try:
            import winreg
        except ImportError:
            return Receipt.failure(
                source=self.name,
                error="Windows registry is not available on this platform",
            )

        try:
            with winreg.OpenKey(winreg.HKEY_LOCAL_MACHINE, self._key) as key:
                value, value_type = winreg.QueryValueEx(key, self._value_name)
        except FileNotFoundError:
            return Receipt.missing(source=self.name)
        except OSError as e:
            return Receipt.failure(
                source=self.name,
                error=f"Cannot read machine PATH from registry: {e}",
            )

        self._value_type = value_type
        return Receipt.success(
            source=self.name,
            value=value or "",
            metadata={"value_type": value_type},
        )

    def write(self, value: str) -> Receipt:
        try:
            import winreg
        except ImportError:
            return Receipt.failure(
                source=self.name,
                error="Windows registry is not available on this platform",
            )

        value_type = self._value_type or winreg.REG_EXPAND_SZ
        try:
            with winreg.OpenKey(
                winreg.HKEY_LOCAL_MACHINE, self._key, 0, winreg.KEY_SET_VALUE,
            ) as key:
                winreg.SetValueEx(key, self._value_name, 0, value_type, value)
        except PermissionError as e:
            return Receipt.failure(
                source=self.name,
                error=f"Access denied writing machine PATH (run as Administrator): {e}",
            )
        except OSError as e:
            return Receipt.failure(
                source=self.name,
                error=f"Cannot write machine PATH to registry: {e}",
            )

        broadcast_environment_change()
        return Receipt.success(
            source=self.name, value=value, metadata={"value_type": value_type},
        )


def broadcast_environment_change() -> bool:
    """Tell running top-level windows that the environment changed.

    Best effort. Returns True if the broadcast was delivered.
    """
    try:
        import ctypes
        from ctypes import wintypes

        result = wintypes.DWORD()
        sent = ctypes.windll.user32.SendMessageTimeoutW(
            _HWND_BROADCAST,
            _WM_SETTINGCHANGE,
            0,
            "Environment",
            _SMTO_ABORTIFHUNG,
            _BROADCAST_TIMEOUT_MS,
            ctypes.byref(result),
        )
    except (AttributeError, ImportError, OSError) as e:
        logger.debug("Environment change broadcast skipped: %s", e)
        return False

    if not sent:
        logger.debug("Environment change broadcast timed out")
    return bool(sent)
