"""Classifies positional command line tokens.

Each token is exactly one of a total mass, a joint offset file or a mesh
file. The checks are applied in that order, so a token which parses as a
positive number is never treated as a path.
"""

import logging
import math
from dataclasses import dataclass
from pathlib import Path
from typing import Literal, Sequence

from urdf_inertia.errors import UsageError

logger = logging.getLogger(__name__)

JOINT_FILE_SUFFIX = ".txt"
COLLADA_SUFFIX = ".dae"

MeshLoader = Literal["collada", "generic"]


@dataclass(frozen=True)
class MassArgument:
    value: float


@dataclass(frozen=True)
class JointFileArgument:
    path: str


@dataclass(frozen=True)
class MeshFileArgument:
    path: str

    @property
    def loader(self) -> MeshLoader:
        return get_mesh_loader(self.path)


Argument = MassArgument | JointFileArgument | MeshFileArgument


def get_mesh_loader(path: str | Path) -> MeshLoader:
    return "collada" if str(path).lower().endswith(COLLADA_SUFFIX) else "generic"


def parse_mass(token: str) -> float | None:
    try:
        value = float(token)
    except ValueError:
        return None
    if not math.isfinite(value) or value <= 0:
        return None
    return value


def classify_argument(token: str) -> Argument:
    if not token:
        raise UsageError("Empty command line argument")
    if (mass := parse_mass(token)) is not None:
        return MassArgument(mass)
    if token.endswith(JOINT_FILE_SUFFIX):
        return JointFileArgument(token)
    return MeshFileArgument(token)


def classify_arguments(tokens: Sequence[str]) -> list[Argument]:
    arguments = [classify_argument(token) for token in tokens]
    logger.debug(
        "Classified %d arguments: %d masses, %d joint files, %d meshes",
        len(arguments),
        sum(isinstance(a, MassArgument) for a in arguments),
        sum(isinstance(a, JointFileArgument) for a in arguments),
        sum(isinstance(a, MeshFileArgument) for a in arguments),
    )
    return arguments
