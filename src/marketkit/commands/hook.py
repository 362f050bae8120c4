"""Hook CLI commands."""

from pathlib import Path

import click

from marketkit.commands.options import bundle_path_option
from marketkit.context import MarketkitContext, resolve_bundle_root
from marketkit.error_boundary import cli_error_boundary
from marketkit.hooks.notify_hook import notify_hook
from marketkit.io.hooks import load_hooks_config
from marketkit.io.marketplace import load_marketplace, resolve_plugin_source
from marketkit.output import user_output


@click.group(name="hook")
def hook_group() -> None:
    """Inspect and run plugin hooks."""


@hook_group.command(name="list")
@bundle_path_option
@click.pass_obj
@cli_error_boundary
def list_hooks(ctx: MarketkitContext, path: Path | None) -> None:
    """List hooks declared by every plugin in the bundle."""
    bundle_root = resolve_bundle_root(ctx, path)
    registry = load_marketplace(bundle_root)

    count = 0
    for entry in registry.plugins:
        plugin_dir = resolve_plugin_source(bundle_root, registry, entry)
        if plugin_dir is None or not plugin_dir.is_dir():
            continue
        config = load_hooks_config(plugin_dir)
        if config is None:
            continue
        for event, matcher, command in config.iter_commands():
            matcher_label = matcher or "*"
            user_output(f"{entry.name} [{event} / {matcher_label}]: {command.command}")
            count += 1

    if count == 0:
        user_output("No hooks declared.")
    user_output(f"Total: {count} hook(s)")


hook_group.add_command(notify_hook)
