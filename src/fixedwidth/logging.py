"""Logging utilities for fixedwidth.

Stdlib logging under the ``fixedwidth`` logger, with rich output when
writing to a terminal.
"""

from __future__ import annotations

import logging
import sys
from typing import Optional, TextIO

from rich.console import Console
from rich.logging import RichHandler

_LOGGER_NAME = "fixedwidth"

__all__ = [
    "get_logger",
    "configure_logging",
]


def get_logger() -> logging.Logger:
    return logging.getLogger(_LOGGER_NAME)


def configure_logging(
    verbosity: int = 0,
    *,
    use_color: Optional[bool] = None,
    stream: Optional[TextIO] = None,
) -> logging.Handler:
    """Attach a single handler to the package logger.

    ``verbosity`` 0 logs INFO and above, 1 or more adds DEBUG (layout
    resolution, encoder selection, per-call line counts).
    """
    logger = get_logger()
    level = logging.INFO
    if verbosity >= 1:
        level = logging.DEBUG
    logger.setLevel(level)

    for h in list(logger.handlers):
        logger.removeHandler(h)

    stream = stream or sys.stderr
    if use_color is None:
        use_color = getattr(stream, "isatty", lambda: False)()

    handler: logging.Handler
    if use_color:
        handler = RichHandler(
            console=Console(file=stream, highlight=False),
            show_path=False,
        )
        handler.setFormatter(logging.Formatter("%(message)s"))
    else:
        handler = logging.StreamHandler(stream)
        handler.setFormatter(
            logging.Formatter("%(levelname)s: %(name)s: %(message)s")
        )
    logger.addHandler(handler)
    return handler
