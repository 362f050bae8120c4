"""Plugin maintenance commands."""

from pathlib import Path

import click

from marketkit.commands.options import bundle_path_option
from marketkit.context import MarketkitContext, resolve_bundle_root
from marketkit.error_boundary import cli_error_boundary
from marketkit.operations.versioning import bump_plugin_version
from marketkit.output import user_output


@click.group(name="plugin")
def plugin_group() -> None:
    """Maintain plugin metadata."""


@plugin_group.command(name="bump")
@click.argument("name")
@click.option(
    "--part",
    type=click.Choice(["major", "minor", "patch"]),
    default="patch",
    show_default=True,
    help="Version component to bump.",
)
@bundle_path_option
@click.option("--dry-run", is_flag=True, help="Show what would change without writing files.")
@click.pass_obj
@cli_error_boundary
def bump(ctx: MarketkitContext, name: str, part: str, path: Path | None, dry_run: bool) -> None:
    """Bump plugin NAME's version in its manifest and the registry together."""
    bundle_root = resolve_bundle_root(ctx, path)

    if dry_run:
        user_output("[DRY RUN MODE - No changes will be made]\n")

    result = bump_plugin_version(bundle_root, name, part, dry_run=dry_run)  # type: ignore[arg-type]

    user_output(f"Bumping {result.plugin_name}: {result.old_version} → {result.new_version}")
    for changed in result.changed_files:
        user_output(f"  {changed.relative_to(bundle_root).as_posix()}")
