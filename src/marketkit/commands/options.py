"""Options shared by several commands."""

from pathlib import Path

import click

bundle_path_option = click.option(
    "--path",
    "path",
    type=click.Path(exists=True, file_okay=False, path_type=Path),
    default=None,
    help="Bundle directory (default: discovered from the current directory)",
)
