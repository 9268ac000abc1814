"""
Tool catalog — the tools a development workstation needs.

Candidate install directories are listed in priority order: the
per-user location first, then machine-wide 64-bit, then machine-wide
32-bit. Environment variables that are unset drop their candidates.
"""

from __future__ import annotations

import ntpath
import os
import posixpath
import sys
from collections.abc import Mapping

from devready.core.models.tool import ToolProbe

GIT_INSTALL_HINT = "Install Git from https://git-scm.com/downloads"
VSCODE_INSTALL_HINT = "Install Visual Studio Code from https://code.visualstudio.com/"


def _windows_dirs(env: Mapping[str, str], *relative: tuple[str, str]) -> tuple[str, ...]:
    dirs = []
    for var, rel in relative:
        base = env.get(var)
        if base:
            dirs.append(ntpath.join(base, rel))
    return tuple(dirs)


def _posix_home(env: Mapping[str, str]) -> str | None:
    return env.get("HOME") or None


def git_probe(platform: str | None = None, environ: Mapping[str, str] | None = None) -> ToolProbe:
    """Probe for the Git version-control client."""
    platform = platform or sys.platform
    env = os.environ if environ is None else environ

    if platform == "win32":
        return ToolProbe(
            name="Git",
            path_command="git",
            executable="git.exe",
            known_install_dirs=_windows_dirs(
                env,
                ("LOCALAPPDATA", r"Programs\Git\cmd"),
                ("ProgramFiles", r"Git\cmd"),
                ("ProgramFiles(x86)", r"Git\cmd"),
            ),
            reconcilable=True,
            install_hint=GIT_INSTALL_HINT,
        )

    home = _posix_home(env)
    dirs = [posixpath.join(home, ".local", "bin")] if home else []
    dirs += ["/usr/local/bin", "/usr/bin", "/opt/homebrew/bin"]
    return ToolProbe(
        name="Git",
        path_command="git",
        executable="git",
        known_install_dirs=tuple(dirs),
        reconcilable=True,
        install_hint=GIT_INSTALL_HINT,
    )


def vscode_probe(platform: str | None = None, environ: Mapping[str, str] | None = None) -> ToolProbe:
    """Probe for the Visual Studio Code editor (``code`` launcher)."""
    platform = platform or sys.platform
    env = os.environ if environ is None else environ

    if platform == "win32":
        return ToolProbe(
            name="VS Code",
            path_command="code",
            executable="code.cmd",
            known_install_dirs=_windows_dirs(
                env,
                ("LOCALAPPDATA", r"Programs\Microsoft VS Code\bin"),
                ("ProgramFiles", r"Microsoft VS Code\bin"),
                ("ProgramFiles(x86)", r"Microsoft VS Code\bin"),
            ),
            install_hint=VSCODE_INSTALL_HINT,
        )

    home = _posix_home(env)
    dirs = [posixpath.join(home, ".local", "bin")] if home else []
    dirs += [
        "/usr/share/code/bin",
        "/snap/bin",
        "/Applications/Visual Studio Code.app/Contents/Resources/app/bin",
    ]
    return ToolProbe(
        name="VS Code",
        path_command="code",
        executable="code",
        known_install_dirs=tuple(dirs),
        install_hint=VSCODE_INSTALL_HINT,
    )


def default_probes(
    platform: str | None = None,
    environ: Mapping[str, str] | None = None,
) -> tuple[ToolProbe, ...]:
    """The version-control client first, then the editor."""
    return (git_probe(platform, environ), vscode_probe(platform, environ))
