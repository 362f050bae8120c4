"""Show one plugin: registry entry, manifest, skills and hooks."""

from pathlib import Path

import click

from marketkit.commands.options import bundle_path_option
from marketkit.context import MarketkitContext, resolve_bundle_root
from marketkit.error_boundary import cli_error_boundary
from marketkit.io.hooks import load_hooks_config
from marketkit.io.manifest import load_plugin_manifest
from marketkit.io.marketplace import load_marketplace, resolve_plugin_source
from marketkit.io.skills import discover_skills
from marketkit.output import user_output


@click.command()
@click.argument("name")
@bundle_path_option
@click.pass_obj
@cli_error_boundary
def show(ctx: MarketkitContext, name: str, path: Path | None) -> None:
    """Show details for the plugin NAME."""
    bundle_root = resolve_bundle_root(ctx, path)
    registry = load_marketplace(bundle_root)

    entry = registry.get_plugin(name)
    if entry is None:
        available = ", ".join(registry.plugin_names()) or "none"
        raise ValueError(f"Plugin '{name}' not found. Available: {available}")

    user_output(click.style(f"Plugin: {entry.name}", bold=True))
    user_output(f"Version: {entry.version or '-'}")
    user_output(f"Category: {entry.category or '-'}")
    if entry.description:
        user_output(f"Description: {entry.description}")
    if entry.keywords:
        user_output(f"Keywords: {', '.join(entry.keywords)}")
    if entry.author is not None:
        user_output(f"Author: {entry.author.name}")
    if entry.license:
        user_output(f"License: {entry.license}")
    if entry.homepage:
        user_output(f"Homepage: {entry.homepage}")

    plugin_dir = resolve_plugin_source(bundle_root, registry, entry)
    if plugin_dir is None:
        user_output(f"Source: {entry.source} (remote)")
        return

    user_output(f"Source: {entry.source}")
    if not plugin_dir.is_dir():
        user_output(click.style("Source directory is missing", fg="red"))
        return

    manifest = load_plugin_manifest(plugin_dir)
    if manifest.version != entry.version:
        user_output(f"Manifest version: {manifest.version or '-'}")

    skills = discover_skills(plugin_dir, entry.name)
    if skills:
        user_output()
        user_output("Skills:")
        for skill in skills:
            user_output(f"  {skill.trigger}: {skill.description}")

    hooks_config = load_hooks_config(plugin_dir)
    if hooks_config is not None and hooks_config.hooks:
        user_output()
        user_output("Hooks:")
        for event, matcher, command in hooks_config.iter_commands():
            matcher_label = matcher or "*"
            user_output(f"  {event} [{matcher_label}]: {command.command}")
