"""List the plugins in the marketplace registry."""

import json
from pathlib import Path

import click
from rich.console import Console
from rich.table import Table

from marketkit.commands.options import bundle_path_option
from marketkit.context import MarketkitContext, resolve_bundle_root
from marketkit.error_boundary import cli_error_boundary
from marketkit.io.marketplace import load_marketplace
from marketkit.models.marketplace import MarketplaceRegistry
from marketkit.output import machine_output, user_output


def _build_table(registry: MarketplaceRegistry) -> Table:
    table = Table(show_header=True, header_style="bold")
    table.add_column("name", style="cyan", no_wrap=True)
    table.add_column("version", no_wrap=True)
    table.add_column("category", no_wrap=True)
    table.add_column("description")

    for entry in registry.plugins:
        table.add_row(
            entry.name,
            entry.version or "-",
            entry.category or "-",
            entry.description or "",
        )
    return table


@click.command(name="list")
@bundle_path_option
@click.option("--json", "as_json", is_flag=True, help="Output the registry entries as JSON.")
@click.pass_obj
@cli_error_boundary
def list_plugins(ctx: MarketkitContext, path: Path | None, as_json: bool) -> None:
    """List plugins in the marketplace registry."""
    bundle_root = resolve_bundle_root(ctx, path)
    registry = load_marketplace(bundle_root)

    if as_json:
        entries = [
            entry.model_dump(mode="json", exclude_none=True) for entry in registry.plugins
        ]
        machine_output(json.dumps({"name": registry.name, "plugins": entries}, indent=2))
        return

    if not registry.plugins:
        user_output(f"Marketplace '{registry.name}' lists no plugins.")
        return

    user_output(f"Marketplace: {registry.name} (owner: {registry.owner.name})")
    console = Console(stderr=True, width=200)
    console.print(_build_table(registry))
    user_output(f"Total: {len(registry.plugins)} plugin(s)")
