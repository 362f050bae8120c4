"""Debug logging setup.

Logging stays silent unless --debug is passed or MARKETKIT_DEBUG is set.
"""

import logging
import os

DEBUG_FORMAT = "[DEBUG %(name)s:%(lineno)d] %(message)s"


def debug_requested(flag: bool = False) -> bool:
    return flag or bool(os.environ.get("MARKETKIT_DEBUG"))


def configure_logging(debug: bool) -> None:
    """Route marketkit debug logs to stderr when debugging is requested."""
    if not debug_requested(debug):
        return
    logging.basicConfig(level=logging.WARNING, format=DEBUG_FORMAT)
    logging.getLogger("marketkit").setLevel(logging.DEBUG)
