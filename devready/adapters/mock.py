"""
Memory store — in-process test double for the persistent PATH.

Used by the test suite to simulate a machine-scope PATH
without touching the registry or /etc/environment. Configurable to fail
reads or writes.
"""

from __future__ import annotations

from devready.adapters.base import PathStore
from devready.core.models.receipt import Receipt


class MemoryPathStore(PathStore):
    """Persistent PATH kept in memory.

    ``value=None`` simulates an unset variable.
    """

    def __init__(
        self,
        value: str | None = "",
        delimiter: str = ";",
        store_name: str = "memory",
        available: bool = True,
    ):
        self._value = value
        self._delimiter = delimiter
        self._name = store_name
        self._available = available
        self._read_error: str | None = None
        self._write_error: str | None = None
        self._writes: list[str] = []
        self._reads = 0
        self._on_read: list[str | None] = []

    @property
    def name(self) -> str:
        return self._name

    @property
    def delimiter(self) -> str:
        return self._delimiter

    @property
    def value(self) -> str | None:
        """Current stored value (None when unset)."""
        return self._value

    @property
    def writes(self) -> list[str]:
        """Every value successfully written, in order."""
        return self._writes

    @property
    def read_count(self) -> int:
        return self._reads

    def is_available(self) -> bool:
        return self._available

    def set_read_failure(self, error: str = "Mock read failure") -> None:
        """Make subsequent reads fail."""
        self._read_error = error

    def set_write_failure(self, error: str = "Access is denied.") -> None:
        """Make subsequent writes fail."""
        self._write_error = error

    def queue_external_change(self, value: str | None) -> None:
        """Simulate another process rewriting PATH after the next read."""
        self._on_read.append(value)

    def read(self) -> Receipt:
        self._reads += 1
        if self._read_error:
            return Receipt.failure(source=self._name, error=self._read_error)
        current = self._value
        if self._on_read:
            self._value = self._on_read.pop(0)
        if current is None:
            return Receipt.missing(source=self._name)
        return Receipt.success(source=self._name, value=current)

    def write(self, value: str) -> Receipt:
        if self._write_error:
            return Receipt.failure(source=self._name, error=self._write_error)
        self._value = value
        self._writes.append(value)
        return Receipt.success(source=self._name, value=value)

    def reset(self) -> None:
        """Clear recorded writes and configured failures."""
        self._writes.clear()
        self._on_read.clear()
        self._reads = 0
        self._read_error = None
        self._write_error = None
