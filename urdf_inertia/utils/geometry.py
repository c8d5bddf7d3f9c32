"""Defines geometric utility functions."""

import logging

import numpy as np
from numpy.typing import NDArray

logger = logging.getLogger(__name__)

DEFAULT_EPSILON = 1e-12  # kg m^2


def matrix_to_moments(matrix: NDArray) -> dict[str, float]:
    return {
        "ixx": float(matrix[0, 0]),
        "ixy": float(matrix[0, 1]),
        "ixz": float(matrix[0, 2]),
        "iyy": float(matrix[1, 1]),
        "iyz": float(matrix[1, 2]),
        "izz": float(matrix[2, 2]),
    }


def cumulative_translation(offsets: list[NDArray], index: int) -> NDArray:
    """Gets the frame translation of the link at `index`.

    The link is moved by the negated sum of the first `index + 1` joint
    offsets. Links past the last offset keep the full sum.

    Args:
        offsets: The (3,) joint translations, in order.
        index: The 0-indexed link position.

    Returns:
        The (3,) translation of the link frame.
    """
    translation = np.zeros(3)
    for offset in offsets[: index + 1]:
        translation -= offset
    return translation


def is_positive_definite(inertia: NDArray, epsilon: float = DEFAULT_EPSILON) -> bool:
    eigvals = np.linalg.eigvalsh(inertia)
    return bool(np.all(eigvals >= epsilon))


def check_inertia(name: str, inertia: NDArray, epsilon: float = DEFAULT_EPSILON, strict: bool = False) -> bool:
    """Checks that an inertia tensor is positive definite, above epsilon.

    Args:
        name: The name of the link, used in messages.
        inertia: The (3, 3) inertia tensor.
        epsilon: The minimum allowed eigenvalue.
        strict: If set, raise instead of logging a warning.

    Returns:
        Whether the tensor passed the check.

    Raises:
        ValueError: If `strict` is set and the check fails.
    """
    eigvals = np.linalg.eigvalsh(inertia)
    if np.all(eigvals >= epsilon):
        return True
    if strict:
        raise ValueError(f"Inertia matrix for {name} is not positive definite: {eigvals}")
    logger.warning("Inertia matrix for %s is not positive definite: %s", name, eigvals)
    return False
