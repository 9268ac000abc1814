"""
Privilege probe — is this process elevated?

Only used to warn the operator up front. The PATH write is always
attempted and allowed to fail.
"""

from __future__ import annotations

import logging
import os
import sys

logger = logging.getLogger(__name__)


def is_elevated(platform: str | None = None) -> bool:
    """Return True when running as Administrator (Windows) or root (POSIX).

    Never raises; an undeterminable status counts as not elevated.
    """
    platform = platform or sys.platform
    try:
        if platform == "win32":
            import ctypes

            return bool(ctypes.windll.shell32.IsUserAnAdmin())
        return os.geteuid() == 0
    except (AttributeError, ImportError, OSError) as e:
        logger.debug("Could not determine elevation status: %s", e)
        return False
