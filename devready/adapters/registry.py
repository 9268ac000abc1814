"""
Store registry — pick the persistent PATH store for this machine.

The CLI never builds stores directly; it asks the registry by name
(``auto`` resolves to the platform default).
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path

from devready.adapters.base import PathStore
from devready.adapters.stores.environment_file import (
    DEFAULT_ENVIRONMENT_FILE,
    EnvironmentFilePathStore,
)
from devready.adapters.stores.windows_registry import WindowsRegistryPathStore

logger = logging.getLogger(__name__)

STORE_NAMES = ("auto", "windows-registry", "environment-file")


class UnknownStoreError(ValueError):
    """Raised when a store name is not registered."""


def default_store_name(platform: str | None = None) -> str:
    """Return the store used by ``auto`` on the given platform."""
    platform = platform or sys.platform
    return "windows-registry" if platform == "win32" else "environment-file"


def get_store(
    name: str = "auto",
    environment_file: Path | str = DEFAULT_ENVIRONMENT_FILE,
    platform: str | None = None,
) -> PathStore:
    """Build the named store.

    Raises:
        UnknownStoreError: If ``name`` is not one of ``STORE_NAMES``.
    """
    if name not in STORE_NAMES:
        raise UnknownStoreError(
            f"Unknown PATH store '{name}'. Valid: {', '.join(STORE_NAMES)}"
        )
    if name == "auto":
        name = default_store_name(platform)

    store: PathStore
    if name == "windows-registry":
        store = WindowsRegistryPathStore()
    else:
        store = EnvironmentFilePathStore(environment_file)

    logger.debug("Using PATH store: %r", store)
    return store
