"""
Detection — where is a tool, and can PATH reach it?

Read-only. Resolution is tried first; install directories are only
consulted when the command does not resolve. Collaborator failures
count as "not found" so detection never fails a run.
"""

from __future__ import annotations

import logging

from devready.adapters.shell.command import CommandResolver
from devready.adapters.shell.filesystem import ExecutableProbe
from devready.core.models.tool import (
    FoundNotOnPath,
    FoundOnPath,
    InstallationState,
    NotFound,
    ToolProbe,
)

logger = logging.getLogger(__name__)


def detect(
    probe: ToolProbe,
    resolver: CommandResolver | None = None,
    filesystem: ExecutableProbe | None = None,
) -> InstallationState:
    """Determine the installation state of ``probe``.

    Args:
        probe: The tool to look for.
        resolver: Command resolver (default: against ``os.environ``).
        filesystem: Existence checker for install candidates.

    Returns:
        ``FoundOnPath`` if the command resolves, otherwise
        ``FoundNotOnPath`` for the first candidate directory holding the
        executable, otherwise ``NotFound``.
    """
    resolver = resolver or CommandResolver()
    filesystem = filesystem or ExecutableProbe()

    lookup = resolver.resolve(probe.path_command)
    if lookup.ok:
        logger.info("%s resolves to %s", probe.name, lookup.value)
        return FoundOnPath(location=lookup.value)
    if lookup.failed:
        logger.debug("%s: resolution failed, treating as unresolved: %s", probe.name, lookup.error)

    for directory in probe.known_install_dirs:
        check = filesystem.exists(directory, probe.executable)
        if check.ok:
            logger.info("%s installed in %s but not on PATH", probe.name, directory)
            return FoundNotOnPath(directory=directory)
        if check.failed:
            logger.debug("%s: %s", probe.name, check.error)

    logger.info("%s not found", probe.name)
    return NotFound()
