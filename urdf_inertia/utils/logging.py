"""Defines the logging configuration used by the command line tools."""

import logging
import sys
from typing import TextIO


def configure_logging(level: int = logging.INFO, stream: TextIO | None = None) -> None:
    """Sends log messages to standard output, one message per line.

    Status lines are interleaved with the emitted URDF fragments, so the
    formatter only prints the message itself.

    Args:
        level: The logging level for the package logger.
        stream: The stream to write to, defaulting to the current stdout.
    """
    root_logger = logging.getLogger("urdf_inertia")
    root_logger.setLevel(level)
    for handler in list(root_logger.handlers):
        root_logger.removeHandler(handler)

    handler = logging.StreamHandler(sys.stdout if stream is None else stream)
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter("%(message)s"))
    root_logger.addHandler(handler)
    root_logger.propagate = False
