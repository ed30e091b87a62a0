"""Logging setup for the procroute CLI."""

import logging
import sys

from rich.console import Console
from rich.logging import RichHandler

from procroute.core.settings import get_settings


def setup_logging(verbose: bool = False) -> None:
    """Configure the procroute logger hierarchy.

    Args:
        verbose: Force DEBUG level regardless of PROCROUTE_LOG_LEVEL
    """
    level = logging.DEBUG if verbose else getattr(logging, get_settings().log_level)

    if sys.stderr.isatty():
        handler: logging.Handler = RichHandler(
            console=Console(stderr=True),
            show_path=False,
            rich_tracebacks=True,
        )
        fmt = "%(message)s"
    else:
        handler = logging.StreamHandler(sys.stderr)
        fmt = "%(asctime)s %(levelname)s %(name)s: %(message)s"

    handler.setFormatter(logging.Formatter(fmt, datefmt="[%X]"))

    logger = logging.getLogger("procroute")
    logger.handlers[:] = [handler]
    logger.setLevel(level)
    logger.propagate = False
