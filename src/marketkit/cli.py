from pathlib import Path

import click

from marketkit.context import create_context
from marketkit.error_boundary import cli_error_boundary
from marketkit.logging_config import configure_logging, debug_requested
from marketkit.output import user_output
from marketkit.version import __version__

CONTEXT_SETTINGS = dict(help_option_names=["-h", "--help"])

# Track whether commands are registered
_commands_registered = False


class LazyGroup(click.Group):
    """Click Group that lazily loads commands."""

    def list_commands(self, ctx):
        """List available commands, registering them if needed."""
        if not _commands_registered:
            _register_commands()
        return super().list_commands(ctx)

    def get_command(self, ctx, cmd_name):
        """Get a command by name, registering if needed."""
        if not _commands_registered:
            _register_commands()
        return super().get_command(ctx, cmd_name)


@click.command(cls=LazyGroup, invoke_without_command=True, context_settings=CONTEXT_SETTINGS)
@click.version_option(version=__version__)
@click.option("--debug", is_flag=True, help="Show debug logs and full stack traces for errors")
@click.option(
    "--config",
    "config_path",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Path to marketkit.toml (default: the bundle root's marketkit.toml)",
)
@click.pass_context
@cli_error_boundary
def cli(ctx: click.Context, debug: bool, config_path: Path | None) -> None:
    """Validate and inspect a Claude Code plugin marketplace."""
    configure_logging(debug)

    # Tests inject a ready-made context via CliRunner.invoke(obj=...)
    if ctx.obj is None:
        ctx.obj = create_context(debug=debug_requested(debug), config_path=config_path)

    if ctx.invoked_subcommand is None:
        user_output(ctx.get_help())


def _register_commands() -> None:
    """Register all commands with the CLI group."""
    global _commands_registered

    if _commands_registered:
        return

    from marketkit.commands.check import check
    from marketkit.commands.hook import hook_group
    from marketkit.commands.init import init
    from marketkit.commands.list_cmd import list_plugins
    from marketkit.commands.plugin import plugin_group
    from marketkit.commands.show import show
    from marketkit.commands.skill import skill_group

    cli.add_command(check)
    cli.add_command(init)
    cli.add_command(list_plugins)
    cli.add_command(show)

    # Register command groups
    cli.add_command(hook_group)
    cli.add_command(plugin_group)
    cli.add_command(skill_group)

    _commands_registered = True


def main() -> None:
    """Entry point with error boundary."""
    cli_error_boundary(cli)()


if __name__ == "__main__":
    main()
