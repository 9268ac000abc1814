"""
Tool models — what to probe and what was found.

A ToolProbe describes one tool; detection produces exactly one
InstallationState per probe. States are tagged by ``kind`` so callers
can dispatch on it and pydantic can round-trip them from JSON.
"""

from __future__ import annotations

from typing import Annotated, Literal, Union

from pydantic import BaseModel, ConfigDict, Field


class ToolProbe(BaseModel):
    """Immutable description of a tool to look for."""

    model_config = ConfigDict(frozen=True)

    name: str                                   # human-readable, e.g. "Git"
    path_command: str                           # bare command, e.g. "git"
    executable: str                             # file inside an install dir
    known_install_dirs: tuple[str, ...] = ()    # priority order
    reconcilable: bool = False                  # offer PATH reconciliation
    install_hint: str = ""


class NotFound(BaseModel):
    """The tool is neither reachable nor in any known install dir."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["not_found"] = "not_found"


class FoundNotOnPath(BaseModel):
    """The tool is installed in ``directory`` but PATH does not reach it."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["found_not_on_path"] = "found_not_on_path"
    directory: str


class FoundOnPath(BaseModel):
    """The tool resolves through PATH."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["found_on_path"] = "found_on_path"
    location: str


InstallationState = Annotated[
    Union[NotFound, FoundNotOnPath, FoundOnPath],
    Field(discriminator="kind"),
]
