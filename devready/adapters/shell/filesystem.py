"""
Executable probe — filesystem existence checks for install candidates.
"""

from __future__ import annotations

import logging
from pathlib import Path

from devready.core.models.receipt import Receipt

logger = logging.getLogger(__name__)


class ExecutableProbe:
    """Check whether an executable file exists inside a directory."""

    name = "filesystem"

    def exists(self, directory: str, executable: str) -> Receipt:
        """Test ``directory/executable``.

        Returns:
            ``ok`` with the file path, ``not_found``, or ``failed`` when
            the filesystem could not be queried (e.g. permission denied).
        """
        if not directory:
            return Receipt.missing(source=self.name)

        target = Path(directory) / executable
        try:
            found = target.is_file()
        except OSError as e:
            return Receipt.failure(source=self.name, error=f"Cannot stat {target}: {e}")

        if found:
            return Receipt.success(source=self.name, value=str(target))
        return Receipt.missing(source=self.name, metadata={"path": str(target)})
