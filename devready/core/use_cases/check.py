"""
Check use case — probe every tool, reconcile where offered, aggregate.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Iterable, MutableMapping

from devready.adapters.base import PathStore
from devready.adapters.shell.command import CommandResolver
from devready.adapters.shell.filesystem import ExecutableProbe
from devready.core.models.outcome import AppliedAndVerified, ReconciliationOutcome
from devready.core.models.result import RunResult, ToolReport
from devready.core.models.tool import FoundNotOnPath, FoundOnPath, InstallationState, ToolProbe
from devready.core.services.detection import detect
from devready.core.services.path_reconcile import PathReconciler
from devready.core.services.privilege import is_elevated

logger = logging.getLogger(__name__)


def run_check(
    probes: Iterable[ToolProbe],
    store: PathStore,
    environ: MutableMapping[str, str] | None = None,
    filesystem: ExecutableProbe | None = None,
    apply: bool = True,
    elevated: bool | None = None,
) -> RunResult:
    """Run detection (and reconciliation) for each probe in order.

    Args:
        probes: Tools to check, in reporting order.
        store: Persistent PATH store used for reconciliation.
        environ: Process environment (default: ``os.environ``). Updated
            in place when a directory is appended to PATH.
        filesystem: Existence checker for install candidates.
        apply: If False, never write; reconcilable tools are only reported.
        elevated: Override the elevation probe (tests).

    Returns:
        RunResult with one ToolReport per probe. Never raises for
        detection or reconciliation failures.
    """
    env = environ if environ is not None else os.environ
    resolver = CommandResolver(env)
    filesystem = filesystem or ExecutableProbe()
    if elevated is None:
        elevated = is_elevated()

    notes: list[str] = []
    reports: list[ToolReport] = []

    for probe in probes:
        state: InstallationState = detect(probe, resolver=resolver, filesystem=filesystem)
        outcome: ReconciliationOutcome | None = None

        if isinstance(state, FoundNotOnPath) and probe.reconcilable:
            if not apply:
                notes.append(f"Dry run: {state.directory} was not added to PATH.")
            else:
                if not store.is_available():
                    logger.warning("PATH store %s is not available on this machine", store.name)
                    notes.append(
                        f"PATH store '{store.name}' is not available on this machine; "
                        "the PATH update is expected to fail."
                    )
                if not elevated:
                    logger.warning(
                        "Not elevated; updating the system PATH for %s will likely fail",
                        probe.name,
                    )
                reconciler = PathReconciler(store, environ=env, resolver=resolver)
                outcome = reconciler.reconcile(state.directory, probe.path_command)
                if isinstance(outcome, AppliedAndVerified):
                    location = resolver.resolve(probe.path_command)
                    state = FoundOnPath(location=location.value or state.directory)

        reports.append(ToolReport(probe=probe, state=state, reconciliation=outcome))

    return RunResult(
        tools=tuple(reports),
        elevated=elevated,
        dry_run=not apply,
        store=store.name,
        notes=tuple(notes),
    )
