"""
Shared test fixtures and configuration.
"""

from __future__ import annotations

import os
import stat
from collections.abc import Callable
from pathlib import Path

import pytest

from devready.adapters.mock import MemoryPathStore


def _make_executable(path: Path) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text("#!/bin/sh\nexit 0\n")
    path.chmod(path.stat().st_mode | stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH)
    return path


@pytest.fixture
def make_executable() -> Callable[[Path], Path]:
    """Factory: create an executable file at the given path."""
    return _make_executable


@pytest.fixture
def install_dirs(tmp_path: Path) -> dict[str, Path]:
    """Three empty candidate install directories A, B, C."""
    dirs = {}
    for name in ("A", "B", "C"):
        d = tmp_path / "install" / name
        d.mkdir(parents=True)
        dirs[name] = d
    return dirs


@pytest.fixture
def empty_env(tmp_path: Path) -> dict[str, str]:
    """A process environment whose PATH reaches nothing."""
    empty = tmp_path / "empty-bin"
    empty.mkdir()
    return {"PATH": str(empty)}


@pytest.fixture
def memory_store() -> MemoryPathStore:
    """An empty persistent PATH using the Windows delimiter."""
    return MemoryPathStore(value="", delimiter=";")


@pytest.fixture
def tool_name() -> str:
    """A command name that will not exist on any real PATH."""
    return f"devready-fake-tool-{os.getpid()}"
