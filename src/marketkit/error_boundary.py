"""Error boundary handling for CLI commands.

This module provides decorators to catch well-known exceptions at CLI entry points
and display clean error messages without stack traces.
"""

import functools
import logging
from collections.abc import Callable
from typing import Any, TypeVar

import click

from marketkit.context import MarketkitContext
from marketkit.logging_config import debug_requested

logger = logging.getLogger(__name__)

T = TypeVar("T", bound=Callable[..., Any])


def _debug_enabled() -> bool:
    ctx = click.get_current_context(silent=True)
    if ctx is not None:
        obj = ctx.find_object(MarketkitContext)
        if obj is not None and obj.debug:
            return True
    return debug_requested()


def cli_error_boundary(func: T) -> T:
    """Decorator that catches well-known exceptions and displays clean error messages.

    This decorator should be applied to CLI command entry points to provide
    user-friendly error messages without stack traces for predictable error conditions.

    Catches:
        - FileExistsError: File/directory conflicts
        - FileNotFoundError: Missing files/directories
        - ValueError: Invalid input, bundle content or configuration
        - PermissionError: Permission denied errors

    All other exceptions bubble up normally with full stack traces. In debug
    mode the well-known ones do too.

    Example:
        @click.command()
        @cli_error_boundary
        def my_command():
            ...
    """

    @functools.wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        try:
            return func(*args, **kwargs)
        except (FileExistsError, FileNotFoundError, ValueError, PermissionError) as e:
            if _debug_enabled():
                raise
            logger.debug("Caught %s at CLI boundary", type(e).__name__)
            click.echo(f"Error: {e}", err=True)
            raise SystemExit(1) from None

    return wrapper  # type: ignore[return-value]
