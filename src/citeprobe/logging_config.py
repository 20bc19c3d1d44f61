"""Logging setup for the CLI.

Library modules only create module loggers; handlers are installed here,
once, when the CLI starts.
"""

import logging

from rich.console import Console
from rich.logging import RichHandler

LOG_FORMAT = "%(message)s"
LOG_DATEFMT = "%H:%M:%S"

_configured = False


def setup_logging(verbose: bool = False) -> None:
    """Route citeprobe logs through Rich; DEBUG when verbose, else WARNING.

    Idempotent: later calls only adjust the level.
    """
    global _configured  # noqa: PLW0603
    level = logging.DEBUG if verbose else logging.WARNING
    logger = logging.getLogger("citeprobe")
    logger.setLevel(level)
    if _configured:
        return
    _configured = True

    handler = RichHandler(console=Console(stderr=True), show_path=False)
    handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=LOG_DATEFMT))
    logger.addHandler(handler)
    logger.propagate = False
