"""
PATH reconciliation — make an installed tool reachable.

Appends a directory to the persistent machine-scope PATH exactly once,
mirrors the change into the current process, and checks that the tool
now resolves. Every failure is reported as an outcome, never raised.

The persistent value is rewritten wholesale (read-modify-write). Just
before writing, it is read again; if another writer changed it in the
meantime the decision is re-made against the fresh value.
"""

from __future__ import annotations

import logging
import os
from collections.abc import MutableMapping

from devready.adapters.base import PathStore
from devready.adapters.shell.command import CommandResolver
from devready.core.models.outcome import (
    AlreadyPresent,
    AppliedAndVerified,
    AppliedButUnverified,
    Failed,
    ReconciliationOutcome,
)

logger = logging.getLogger(__name__)


# ── Path-list helpers ───────────────────────────────────────────


def split_path(value: str, delimiter: str) -> list[str]:
    """Split a PATH value into its segments, keeping empty ones."""
    if not value:
        return []
    return value.split(delimiter)


def contains_dir(value: str, directory: str, delimiter: str) -> bool:
    """Whether ``directory`` is a segment of ``value``.

    Segments are trimmed and compared case-insensitively.
    """
    wanted = directory.strip().casefold()
    return any(seg.strip().casefold() == wanted for seg in split_path(value, delimiter))


def append_dir(value: str, directory: str, delimiter: str) -> str:
    """Append ``directory``; no delimiter is added to an empty value."""
    if not value:
        return directory
    return f"{value}{delimiter}{directory}"


# ── Reconciler ──────────────────────────────────────────────────


class PathReconciler:
    """Reconcile the persistent PATH with an installed tool.

    Args:
        store: Persistent machine-scope PATH.
        environ: The process environment to mirror the change into.
            Defaults to ``os.environ``.
        resolver: Resolver used for verification. Defaults to one bound
            to ``environ`` so it sees the mirrored change.
    """

    def __init__(
        self,
        store: PathStore,
        environ: MutableMapping[str, str] | None = None,
        resolver: CommandResolver | None = None,
    ):
        self._store = store
        self._environ = environ if environ is not None else os.environ
        self._resolver = resolver or CommandResolver(self._environ)

    @property
    def store(self) -> PathStore:
        return self._store

    def _read(self) -> tuple[str | None, str | None]:
        """Read the store as (value, error). Unset reads as ``""``."""
        receipt = self._store.read()
        if receipt.failed:
            return None, receipt.error or "unknown error"
        return receipt.value if receipt.ok else "", None

    def reconcile(self, directory: str, command: str) -> ReconciliationOutcome:
        """Put ``directory`` on the persistent PATH and verify ``command``.

        Args:
            directory: Directory holding the tool's executable.
            command: Bare command name used to verify reachability.
        """
        delimiter = self._store.delimiter

        current, error = self._read()
        if current is None:
            logger.warning("Cannot read persistent PATH: %s", error)
            return Failed(reason=f"Could not read the system PATH: {error}")

        if contains_dir(current, directory, delimiter):
            logger.info("%s already on persistent PATH", directory)
            return AlreadyPresent()

        fresh, error = self._read()
        if fresh is None:
            logger.warning("Cannot re-read persistent PATH: %s", error)
            return Failed(reason=f"Could not read the system PATH: {error}")
        if fresh != current:
            logger.info("Persistent PATH changed while reconciling; using fresh value")
            if contains_dir(fresh, directory, delimiter):
                return AlreadyPresent()
            current = fresh

        new_value = append_dir(current, directory, delimiter)
        written = self._store.write(new_value)
        if not written.ok:
            logger.warning("Writing persistent PATH failed: %s", written.error)
            return Failed(reason=written.error or "Could not write the system PATH")

        logger.info("Appended %s to persistent PATH (%s)", directory, self._store.name)

        self._environ["PATH"] = append_dir(
            self._environ.get("PATH", ""), directory, os.pathsep,
        )

        lookup = self._resolver.resolve(command)
        if lookup.ok:
            logger.info("%s now resolves to %s", command, lookup.value)
            return AppliedAndVerified(new_path_value=new_value)

        logger.info("%s still does not resolve after PATH update", command)
        return AppliedButUnverified(new_path_value=new_value)
