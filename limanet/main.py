"""
limanet — CLI entrypoint.

Usage:
    python -m limanet.main --help
    python -m limanet.main status
    python -m limanet.main network check
"""

from __future__ import annotations

import json
import os
import sys
from pathlib import Path

import click

from limanet import __version__
from limanet.core.config.paths import LimaPaths
from limanet.core.observability.logging_config import (
    ENV_LOG_FILE,
    ENV_LOG_FILE_LEVEL,
    resolve_level,
    setup_logging,
)


@click.group()
@click.version_option(version=__version__, prog_name="limanet")
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose output.")
@click.option("--quiet", "-q", is_flag=True, help="Suppress non-essential output.")
@click.option("--debug", is_flag=True, help="Enable debug logging (very verbose).")
@click.option(
    "--lima-home",
    type=click.Path(file_okay=False),
    default=None,
    help="Lima data directory (default: $LIMANET_LIMA_HOME or ~/.finch/lima/data).",
)
@click.pass_context
def cli(
    ctx: click.Context,
    verbose: bool,
    quiet: bool,
    debug: bool,
    lima_home: str | None,
) -> None:
    """limanet — manage Lima shared networking for Finch."""
    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose
    ctx.obj["quiet"] = quiet
    ctx.obj["paths"] = LimaPaths.from_env(home=Path(lima_home) if lima_home else None)

    setup_logging(
        level=resolve_level(debug=debug, verbose=verbose, quiet=quiet),
        log_file=os.environ.get(ENV_LOG_FILE),
        log_file_level=os.environ.get(ENV_LOG_FILE_LEVEL),
    )


@cli.command()
@click.option("--json-output", "--json", "as_json", is_flag=True, help="Output as JSON.")
@click.pass_context
def status(ctx: click.Context, as_json: bool) -> None:
    """Show which vmnet capabilities are installed."""
    from limanet.core.use_cases.status import get_status

    result = get_status(ctx.obj["paths"])

    if as_json:
        click.echo(json.dumps(result.to_dict(), indent=2))
        return

    if not ctx.obj.get("quiet"):
        click.secho("\n🔌 vmnet shared networking", fg="cyan", bold=True)
        click.echo(f"   Config: {result.config_path}")
        click.echo()

    for cap in result.capabilities:
        if cap.installed:
            click.secho(f"   ✓ {cap.name}", fg="green")
        else:
            root_label = " (requires root)" if cap.requires_root else ""
            click.secho(f"   ✗ {cap.name}{root_label}", fg="red")

    click.echo()


@cli.command()
@click.option("--with-root", "allow_root", is_flag=True, help="Also install pieces that need root.")
@click.option("--json-output", "--json", "as_json", is_flag=True, help="Output as JSON.")
@click.pass_context
def install(ctx: click.Context, allow_root: bool, as_json: bool) -> None:
    """Install vmnet binaries, sudoers policy and network section, in order."""
    from limanet.core.use_cases.install import run_install

    result = run_install(ctx.obj["paths"], allow_root=allow_root)

    if as_json:
        click.echo(json.dumps(result.to_dict(), indent=2))
        sys.exit(0 if result.ok else 1)

    if result.skipped_for_root:
        click.secho("⚠️  Installation requires root. Re-run with --with-root under sudo.", fg="yellow")
        sys.exit(1)

    if result.errors:
        click.secho("❌ Installation failed:", fg="red", bold=True)
        for err in result.errors:
            click.echo(f"   • {err}")
        sys.exit(1)

    if not result.installed:
        click.secho("❌ vmnet shared networking is still not installed", fg="red")
        sys.exit(1)

    click.secho("✅ vmnet shared networking installed", fg="green", bold=True)


# ── Sub-groups ──────────────────────────────────────────────────

from limanet.ui.cli.network import network  # noqa: E402

cli.add_command(network)


if __name__ == "__main__":
    cli()
