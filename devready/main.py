"""
devready — CLI entrypoint.

Usage:
    python -m devready.main --help
    python -m devready.main check
    python -m devready.main check --dry-run --json
"""

from __future__ import annotations

import json
import sys

import click

from devready import __version__
from devready.core.config.settings import Settings, SettingsError
from devready.core.observability.logging_config import setup_logging


@click.group()
@click.version_option(version=__version__, prog_name="devready")
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose output.")
@click.option("--quiet", "-q", is_flag=True, help="Suppress non-essential output.")
@click.option("--debug", is_flag=True, help="Enable debug logging (very verbose).")
@click.pass_context
def cli(ctx: click.Context, verbose: bool, quiet: bool, debug: bool) -> None:
    """devready — check that Git and VS Code are installed and on PATH."""
    try:
        settings = Settings.from_env()
    except SettingsError as e:
        click.secho(f"❌ {e}", fg="red", err=True)
        sys.exit(2)

    ctx.ensure_object(dict)
    ctx.obj["settings"] = settings

    # ── Logging setup (once, at process start) ──────────────────
    if debug:
        level = "DEBUG"
    elif verbose:
        level = "INFO"
    elif quiet:
        level = "ERROR"
    else:
        level = settings.log_level

    setup_logging(
        level=level,
        log_file=settings.log_file,
        log_file_level=settings.log_file_level,
    )


@cli.command()
@click.option("--json-output", "--json", "as_json", is_flag=True, help="Output as JSON.")
@click.option("--dry-run", is_flag=True, help="Detect and report only; never change PATH.")
@click.option("--no-pause", is_flag=True, help="Do not wait for a key press at the end.")
@click.option("--strict", is_flag=True, help="Exit with status 1 unless every tool is ready.")
@click.option(
    "--store",
    "store_name",
    default=None,
    help="Persistent PATH store (auto, windows-registry, environment-file).",
)
@click.pass_context
def check(
    ctx: click.Context,
    as_json: bool,
    dry_run: bool,
    no_pause: bool,
    strict: bool,
    store_name: str | None,
) -> None:
    """Check the development tools and fix PATH where possible."""
    from devready.adapters.registry import UnknownStoreError, get_store
    from devready.core.config.tools import default_probes
    from devready.core.use_cases.check import run_check
    from devready.ui.cli.report import render_summary

    settings: Settings = ctx.obj["settings"]
    try:
        store = get_store(
            store_name or settings.path_store,
            environment_file=settings.environment_file,
        )
    except UnknownStoreError as e:
        click.secho(f"❌ {e}", fg="red", err=True)
        sys.exit(2)

    result = run_check(default_probes(), store=store, apply=not dry_run)

    if as_json:
        click.echo(json.dumps(result.to_dict(), indent=2))
    else:
        render_summary(result)
        if not no_pause:
            click.pause("Press any key to exit...")

    if strict and not result.ready:
        sys.exit(1)


def main() -> None:
    """Console-script entry point."""
    cli(obj={})


if __name__ == "__main__":
    main()
