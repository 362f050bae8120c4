"""Output helpers for CLI commands with clear intent.

user_output is for people and goes to stderr so it never pollutes piped
output. machine_output is for scripts and goes to stdout.
"""

from typing import Any

import click


def user_output(message: Any = "", nl: bool = True) -> None:
    """Write human-facing text to stderr."""
    click.echo(message, nl=nl, err=True)


def machine_output(message: Any = "", nl: bool = True) -> None:
    """Write machine-readable text to stdout."""
    click.echo(message, nl=nl)
