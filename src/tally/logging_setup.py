"""Logging configuration for the CLI entry point.

Library modules only create loggers with logging.getLogger(__name__); handlers
and levels are set here, once, by the application.
"""

from __future__ import annotations

import logging

from rich.console import Console
from rich.logging import RichHandler

LOG_FORMAT = "%(name)s: %(message)s"


def configure_logging(verbose: bool = False, console: Console | None = None) -> None:
    """Route log records through Rich on stderr.

    WARNING and above by default, everything from tally at DEBUG when verbose.
    """
    level = logging.DEBUG if verbose else logging.WARNING
    handler = RichHandler(
        console=console or Console(stderr=True),
        show_time=False,
        show_path=verbose,
        markup=False,
    )
    logging.basicConfig(level=logging.WARNING, format=LOG_FORMAT, handlers=[handler], force=True)
    logging.getLogger("tally").setLevel(level)


__all__ = ["configure_logging"]
