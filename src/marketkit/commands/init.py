"""Write a default marketkit.toml."""

from pathlib import Path

import click

from marketkit.commands.options import bundle_path_option
from marketkit.config import CONFIG_FILE, MarketkitConfig, save_config
from marketkit.context import MarketkitContext, resolve_bundle_root
from marketkit.error_boundary import cli_error_boundary
from marketkit.output import user_output


@click.command()
@bundle_path_option
@click.option("--force", is_flag=True, help="Overwrite an existing marketkit.toml.")
@click.pass_obj
@cli_error_boundary
def init(ctx: MarketkitContext, path: Path | None, force: bool) -> None:
    """Create marketkit.toml with default settings at the bundle root."""
    bundle_root = resolve_bundle_root(ctx, path)
    config_path = bundle_root / CONFIG_FILE

    if config_path.exists() and not force:
        raise FileExistsError(f"{config_path} already exists. Use --force to overwrite.")

    save_config(config_path, MarketkitConfig())
    user_output(click.style(f"✓ Wrote {config_path}", fg="green"))
