"""
Reconciliation outcomes — the result of making a tool reachable.
"""

from __future__ import annotations

from typing import Annotated, Literal, Union

from pydantic import BaseModel, ConfigDict, Field


class AlreadyPresent(BaseModel):
    """The directory was already on the persistent PATH. Nothing written."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["already_present"] = "already_present"


class AppliedAndVerified(BaseModel):
    """Written, and the tool now resolves in this process."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["applied_and_verified"] = "applied_and_verified"
    new_path_value: str


class AppliedButUnverified(BaseModel):
    """Written, but the tool still does not resolve in this process."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["applied_but_unverified"] = "applied_but_unverified"
    new_path_value: str


class Failed(BaseModel):
    """The persistent PATH could not be read or written."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["failed"] = "failed"
    reason: str


ReconciliationOutcome = Annotated[
    Union[AlreadyPresent, AppliedAndVerified, AppliedButUnverified, Failed],
    Field(discriminator="kind"),
]
