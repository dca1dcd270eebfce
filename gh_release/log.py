"""Logging setup for command-line use."""

import logging

from rich.console import Console
from rich.logging import RichHandler

PACKAGE_LOGGER = "gh_release"


def setup_logging(verbose: bool = False) -> logging.Logger:
    """Route package log records to stderr through rich.

    Args:
        verbose: Emit debug records as well

    Returns:
        The configured package logger
    """
    logger = logging.getLogger(PACKAGE_LOGGER)
    for handler in list(logger.handlers):
        if isinstance(handler, RichHandler):
            logger.removeHandler(handler)

    handler = RichHandler(
        console=Console(stderr=True),
        show_time=False,
        show_path=verbose,
        markup=False,
    )
    handler.setFormatter(logging.Formatter("%(message)s"))
    logger.addHandler(handler)
    logger.setLevel(logging.DEBUG if verbose else logging.INFO)
    return logger
