"""
Receipt model — the collaborator result contract.

Every collaborator (command resolution, filesystem probing, persistent
PATH storage) returns a Receipt. Expected absence ("not_found") and
unexpected failure ("failed") are distinct statuses. Never exceptions.
"""

from __future__ import annotations

from typing import Any, Literal

from pydantic import BaseModel, Field


class Receipt(BaseModel):
    """Outcome of a single collaborator call."""

    source: str                     # which collaborator produced this
    status: Literal["ok", "not_found", "failed"] = "ok"
    value: str = ""
    error: str | None = None
    metadata: dict[str, Any] = Field(default_factory=dict)

    @property
    def ok(self) -> bool:
        """Whether the call succeeded."""
        return self.status == "ok"

    @property
    def not_found(self) -> bool:
        """Whether the call reported an expected absence."""
        return self.status == "not_found"

    @property
    def failed(self) -> bool:
        """Whether the call failed unexpectedly."""
        return self.status == "failed"

    @classmethod
    def success(cls, source: str, value: str = "", **kwargs: Any) -> Receipt:
        """Create a success receipt."""
        return cls(source=source, status="ok", value=value, **kwargs)

    @classmethod
    def missing(cls, source: str, **kwargs: Any) -> Receipt:
        """Create a not-found receipt."""
        return cls(source=source, status="not_found", **kwargs)

    @classmethod
    def failure(cls, source: str, error: str, **kwargs: Any) -> Receipt:
        """Create a failure receipt."""
        return cls(source=source, status="failed", error=error, **kwargs)
