"""Adapters — bindings for the machine's PATH and filesystem.

Public re-exports for convenient access.
"""

from devready.adapters.base import PathStore
from devready.adapters.mock import MemoryPathStore
from devready.adapters.registry import get_store

__all__ = [
    "MemoryPathStore",
    "PathStore",
    "get_store",
]
