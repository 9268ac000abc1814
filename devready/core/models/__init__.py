"""
Domain models — Pydantic types for the readiness checker.

All models are re-exported here for convenient access:

    from devready.core.models import ToolProbe, FoundOnPath, RunResult
"""

from devready.core.models.outcome import (
    AlreadyPresent,
    AppliedAndVerified,
    AppliedButUnverified,
    Failed,
    ReconciliationOutcome,
)
from devready.core.models.receipt import Receipt
from devready.core.models.result import CATEGORY_LABELS, RunResult, ToolReport
from devready.core.models.tool import (
    FoundNotOnPath,
    FoundOnPath,
    InstallationState,
    NotFound,
    ToolProbe,
)

__all__ = [
    # outcome.py
    "AlreadyPresent",
    "AppliedAndVerified",
    "AppliedButUnverified",
    # result.py
    "CATEGORY_LABELS",
    "Failed",
    # tool.py
    "FoundNotOnPath",
    "FoundOnPath",
    "InstallationState",
    "NotFound",
    # receipt.py
    "Receipt",
    "ReconciliationOutcome",
    "RunResult",
    "ToolProbe",
    "ToolReport",
]
