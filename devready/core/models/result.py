"""
RunResult — everything one invocation found out.

Produced once by the check use case, read-only afterwards, consumed by
the report renderer and the JSON output.
"""

from __future__ import annotations

from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field

from devready.core.models.outcome import ReconciliationOutcome
from devready.core.models.tool import InstallationState, ToolProbe

Category = Literal["reachable", "not_reachable", "not_installed"]

CATEGORY_LABELS: dict[str, str] = {
    "reachable": "installed & reachable",
    "not_reachable": "installed, not reachable",
    "not_installed": "not installed",
}


class ToolReport(BaseModel):
    """Final state of one probed tool."""

    model_config = ConfigDict(frozen=True)

    probe: ToolProbe
    state: InstallationState
    reconciliation: ReconciliationOutcome | None = None

    @property
    def category(self) -> Category:
        if self.state.kind == "found_on_path":
            return "reachable"
        if self.state.kind == "found_not_on_path":
            return "not_reachable"
        return "not_installed"

    @property
    def reachable(self) -> bool:
        return self.state.kind == "found_on_path"


class RunResult(BaseModel):
    """Aggregate of all tool reports for one run."""

    model_config = ConfigDict(frozen=True)

    tools: tuple[ToolReport, ...] = ()
    elevated: bool = False
    dry_run: bool = False
    store: str = ""
    notes: tuple[str, ...] = Field(default_factory=tuple)

    @property
    def ready(self) -> bool:
        """Whether every probed tool is installed and reachable."""
        return all(t.reachable for t in self.tools)

    def get(self, name: str) -> ToolReport | None:
        """Look up a tool report by tool name (case-insensitive)."""
        for report in self.tools:
            if report.probe.name.lower() == name.lower():
                return report
        return None

    def to_dict(self) -> dict[str, Any]:
        """Convert to a JSON-serializable dictionary."""
        return {
            "ready": self.ready,
            "elevated": self.elevated,
            "dry_run": self.dry_run,
            "store": self.store,
            "notes": list(self.notes),
            "tools": [
                {
                    "name": t.probe.name,
                    "command": t.probe.path_command,
                    "category": t.category,
                    "state": t.state.model_dump(),
                    "reconciliation": (
                        t.reconciliation.model_dump() if t.reconciliation else None
                    ),
                }
                for t in self.tools
            ],
        }
