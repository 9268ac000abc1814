"""
Summary report — per-tool status and what to do next.

Pure presentation over a RunResult. ``recommendations`` builds the
advice; ``render_summary`` prints everything with click.
"""

from __future__ import annotations

import click

from devready.core.models.outcome import (
    AlreadyPresent,
    AppliedAndVerified,
    AppliedButUnverified,
    Failed,
)
from devready.core.models.result import CATEGORY_LABELS, RunResult, ToolReport
from devready.core.models.tool import FoundNotOnPath, FoundOnPath

_CATEGORY_STYLE = {
    "reachable": ("✅", "green"),
    "not_reachable": ("⚠️ ", "yellow"),
    "not_installed": ("❌", "red"),
}


def _tool_recommendation(report: ToolReport, elevated: bool) -> str | None:
    probe, state, outcome = report.probe, report.state, report.reconciliation

    if report.category == "not_installed":
        return probe.install_hint or f"Install {probe.name}."

    if isinstance(outcome, Failed):
        if not elevated:
            return (
                f"Could not add {probe.name} to the system PATH ({outcome.reason}). "
                "Run devready again from an elevated (Administrator/root) terminal."
            )
        directory = state.directory if isinstance(state, FoundNotOnPath) else ""
        return (
            f"Could not add {probe.name} to the system PATH ({outcome.reason}). "
            f"Add {directory} to PATH manually."
        )
    if isinstance(outcome, (AlreadyPresent, AppliedButUnverified)):
        return f"Open a new terminal session so {probe.name} is picked up from PATH."

    if isinstance(state, FoundNotOnPath):
        if probe.reconcilable:
            return f"Run devready without --dry-run to add {state.directory} to PATH."
        return f"Add {state.directory} to your PATH to use '{probe.path_command}'."

    return None


def recommendations(result: RunResult) -> list[str]:
    """Actionable advice for every tool that is not fully satisfied."""
    advice = []
    for report in result.tools:
        text = _tool_recommendation(report, result.elevated)
        if text:
            advice.append(text)
    return advice


def _detail(report: ToolReport) -> str:
    state, outcome = report.state, report.reconciliation
    if isinstance(outcome, AppliedAndVerified):
        return "added to system PATH"
    if isinstance(state, FoundOnPath):
        return state.location
    if isinstance(state, FoundNotOnPath):
        return state.directory
    return ""


def render_summary(result: RunResult) -> None:
    """Print the readiness summary."""
    click.echo()
    click.secho("🛠  Development environment check", fg="cyan", bold=True)
    click.echo()

    if not result.elevated:
        click.secho(
            "   ℹ️  Not running elevated; system PATH changes may be refused.",
            fg="yellow",
        )
        click.echo()

    width = max((len(t.probe.name) for t in result.tools), default=0)
    for report in result.tools:
        icon, color = _CATEGORY_STYLE[report.category]
        label = CATEGORY_LABELS[report.category]
        click.echo(f"   {icon} {report.probe.name:<{width}}  ", nl=False)
        click.secho(label, fg=color, nl=False)
        detail = _detail(report)
        click.echo(f"  ({detail})" if detail else "")

    for note in result.notes:
        click.echo(f"   ℹ️  {note}")

    click.echo()
    advice = recommendations(result)
    if not advice:
        click.secho("🎉 All tools are installed and reachable.", fg="green", bold=True)
    else:
        click.secho("Next steps:", fg="white", bold=True)
        for line in advice:
            click.echo(f"   • {line}")
    click.echo()
