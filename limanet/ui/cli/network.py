"""
CLI commands for the shared network section.

Thin wrappers over ``limanet.core.capabilities``.
"""

from __future__ import annotations

import json
import sys

import click

from limanet.core.config.paths import LimaPaths


@click.group()
def network() -> None:
    """Shared network section — check, install."""


@network.command("check")
@click.option("--json-output", "--json", "as_json", is_flag=True, help="Output as JSON.")
@click.pass_context
def check(ctx: click.Context, as_json: bool) -> None:
    """Check whether the shared network section is installed."""
    from limanet.core.capabilities.vmnet import build_vmnet_capabilities

    paths: LimaPaths = ctx.obj["paths"]
    net = build_vmnet_capabilities(paths).network
    installed = net.installed()

    if as_json:
        click.echo(json.dumps({
            "config_path": str(net.config_path),
            "installed": installed,
        }, indent=2))
        sys.exit(0 if installed else 1)

    if installed:
        click.secho(f"✅ Network section installed in {net.config_path}", fg="green")
    else:
        click.secho(f"❌ Network section missing or invalid in {net.config_path}", fg="red")
        sys.exit(1)


@network.command("install")
@click.pass_context
def install(ctx: click.Context) -> None:
    """Append the shared network section if prerequisites are in place."""
    from limanet.core.capabilities.errors import PrerequisitesMissing
    from limanet.core.capabilities.vmnet import build_vmnet_capabilities

    paths: LimaPaths = ctx.obj["paths"]
    net = build_vmnet_capabilities(paths).network

    if net.installed():
        click.secho("✅ Network section already installed", fg="green")
        return

    try:
        net.install()
    except PrerequisitesMissing as e:
        click.secho(f"❌ {e}", fg="red")
        click.echo("   Install the vmnet binaries and sudoers policy first: limanet install --with-root")
        sys.exit(1)
    except OSError as e:
        click.secho(f"❌ Cannot write {net.config_path}: {e}", fg="red")
        sys.exit(1)

    click.secho(f"✅ Network section appended to {net.config_path}", fg="green")
