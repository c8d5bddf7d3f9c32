"""Loads per-joint translation offsets from plain text files.

Each non-empty line holds up to six space-separated numbers. Only the first
three (the x, y and z translation) are used when offsetting the link frames;
the remaining three are parsed and kept but never consumed.
"""

import logging
from dataclasses import dataclass
from pathlib import Path

import numpy as np

from urdf_inertia.errors import JointFileError, ParseError

logger = logging.getLogger(__name__)

NUM_JOINT_COMPONENTS = 6

# Longer lines are cut to this many characters before parsing.
DEFAULT_MAX_LINE_LENGTH = 31


@dataclass(frozen=True)
class JointOffset:
    values: tuple[float, float, float, float, float, float]

    @property
    def translation(self) -> np.ndarray:
        return np.array(self.values[:3], dtype=np.float64)


def parse_joint_line(line: str, line_number: int, path: str | Path = "<string>") -> JointOffset | None:
    """Parses a single line of a joint file.

    Args:
        line: The line, without the trailing newline.
        line_number: The 1-indexed line number, used in error messages.
        path: The file the line came from, used in error messages.

    Returns:
        The parsed joint offset, or None if the line is empty.

    Raises:
        ParseError: If one of the tokens is not a number.
    """
    tokens = [token for token in line.split(" ") if token.strip()]
    if not tokens:
        return None
    values = [0.0] * NUM_JOINT_COMPONENTS
    for i, token in enumerate(tokens[:NUM_JOINT_COMPONENTS]):
        try:
            values[i] = float(token)
        except ValueError as e:
            raise ParseError(path, line_number, token) from e
    if len(tokens) > NUM_JOINT_COMPONENTS:
        logger.debug("Ignoring extra values on line %d of %s: %s", line_number, path, tokens[NUM_JOINT_COMPONENTS:])
    v0, v1, v2, v3, v4, v5 = values
    return JointOffset((v0, v1, v2, v3, v4, v5))


def load_joint_offsets(
    path: str | Path,
    max_line_length: int = DEFAULT_MAX_LINE_LENGTH,
) -> list[JointOffset]:
    """Reads all joint offsets from a file.

    Lines longer than `max_line_length` characters are truncated before being
    parsed; a value of zero disables the limit.

    Args:
        path: The path to the joint file.
        max_line_length: The maximum number of characters kept per line.

    Returns:
        The joint offsets, in file order.

    Raises:
        JointFileError: If the file cannot be opened.
    """
    try:
        f = open(path, "r", encoding="utf-8", errors="replace")
    except OSError as e:
        raise JointFileError(path) from e

    joints: list[JointOffset] = []
    with f:
        for line_number, raw_line in enumerate(f, start=1):
            line = raw_line.rstrip("\r\n")
            if max_line_length > 0 and len(line) > max_line_length:
                logger.debug("Truncating line %d of %s to %d characters", line_number, path, max_line_length)
                line = line[:max_line_length]
            logger.debug("Joint line %d: %s", line_number, line)
            if (joint := parse_joint_line(line, line_number, path)) is not None:
                joints.append(joint)
    return joints
