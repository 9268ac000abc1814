"""
Adapter base — the contract for persistent search-path storage.

The reconciler only talks to the machine-scope PATH through this
protocol, never directly to the registry or to files.

Stores perform external side effects and return receipts.
They NEVER raise exceptions — failures are captured in the Receipt.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from devready.core.models.receipt import Receipt


class PathStore(ABC):
    """Abstract base class for persistent PATH stores.

    To create a new store:
        1. Subclass PathStore
        2. Implement name, delimiter, is_available, read, write
        3. Add it to the store registry
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """The store identifier (e.g., 'windows-registry')."""

    @property
    @abstractmethod
    def delimiter(self) -> str:
        """Separator between PATH entries in this store."""

    @abstractmethod
    def is_available(self) -> bool:
        """Check if the backing store exists on this machine.

        Should be fast and never raise.
        """

    @abstractmethod
    def read(self) -> Receipt:
        """Read the persistent PATH value.

        Returns:
            ``ok`` with the raw value, ``not_found`` when the variable is
            unset, or ``failed`` when the store could not be read.
        """

    @abstractmethod
    def write(self, value: str) -> Receipt:
        """Replace the persistent PATH value wholesale.

        MUST never raise. On failure the stored value is left unchanged.
        """

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__} name={self.name!r}>"
