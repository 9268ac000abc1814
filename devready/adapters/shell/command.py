"""
Command resolver — find a bare command on a search path.

Wraps ``shutil.which`` so lookups always go against an explicit PATH
(the process environment by default) and return receipts.
"""

from __future__ import annotations

import logging
import os
import shutil
from collections.abc import Mapping

from devready.core.models.receipt import Receipt

logger = logging.getLogger(__name__)


class CommandResolver:
    """Resolve commands against the PATH of an environment mapping.

    Args:
        environ: Environment to read ``PATH`` from. Defaults to
            ``os.environ`` so updates made to the process environment
            are seen by later lookups.
    """

    name = "command"

    def __init__(self, environ: Mapping[str, str] | None = None):
        self._environ = environ if environ is not None else os.environ

    @property
    def environ(self) -> Mapping[str, str]:
        return self._environ

    def resolve(self, command: str) -> Receipt:
        """Look up ``command`` on the current search path.

        Returns:
            ``ok`` with the absolute executable path, ``not_found``, or
            ``failed`` if the lookup itself raised.
        """
        search_path = self._environ.get("PATH", "")
        try:
            location = shutil.which(command, path=search_path)
        except Exception as e:
            logger.debug("Resolving %r raised: %s", command, e)
            return Receipt.failure(source=self.name, error=f"Lookup of '{command}' failed: {e}")

        if location is None:
            return Receipt.missing(source=self.name, metadata={"command": command})
        return Receipt.success(source=self.name, value=location, metadata={"command": command})
