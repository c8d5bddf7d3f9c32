"""Extracts the mass properties of each link mesh.

The volume, center of mass and inertia tensor come from trimesh's surface
integral over the closed triangulated boundary, evaluated at unit density.
All quantities stay in the mesh's native units until the URDF emitter
rescales them to the requested total mass.
"""

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Sequence

import numpy as np
import trimesh
from numpy.typing import NDArray

from urdf_inertia.args import MeshLoader
from urdf_inertia.joints import JointOffset
from urdf_inertia.utils.mesh import load_mesh

logger = logging.getLogger(__name__)

DEFAULT_MASS = 1.0  # kg


@dataclass(frozen=True)
class LinkInertia:
    """Defines the unit-density mass properties of a single link.

    Attributes:
        path: The mesh file path, exactly as given on the command line.
        volume: The absolute enclosed volume of the mesh.
        center_of_mass: The volume-weighted centroid, a (3,) array.
        inertia: The inertia tensor about the center of mass at unit
            density, a symmetric (3, 3) array.
    """

    path: str
    volume: float
    center_of_mass: NDArray
    inertia: NDArray


@dataclass
class InertiaAccumulator:
    """Collects the links and joint offsets for a single run."""

    mass: float = DEFAULT_MASS
    links: list[LinkInertia] = field(default_factory=list)
    joints: list[JointOffset] = field(default_factory=list)
    total_volume: float = 0.0

    def __post_init__(self) -> None:
        if self.mass <= 0:
            raise ValueError(f"Mass {self.mass} should be greater than 0.")

    def set_mass(self, mass: float) -> None:
        if mass <= 0:
            raise ValueError(f"Mass {mass} should be greater than 0.")
        self.mass = mass
        logger.info("Overall mass is: %f kg", mass)

    def replace_joints(self, joints: Sequence[JointOffset]) -> None:
        if self.joints:
            logger.debug("Discarding %d previously loaded joint offsets", len(self.joints))
        self.joints = list(joints)

    def add_link(self, link: LinkInertia) -> None:
        previous_volume = self.total_volume
        self.total_volume += link.volume
        self.links.append(link)
        logger.info("Volume: %14.11f + %14.11f = %14.11f", previous_volume, link.volume, self.total_volume)


def compute_link_inertia(path: str | Path, mesh: trimesh.Trimesh) -> LinkInertia:
    if not mesh.is_watertight:
        logger.warning("Mesh %s is not watertight; its mass properties may be inaccurate", path)

    with np.errstate(divide="ignore", invalid="ignore"):
        props = mesh.mass_properties

    volume = abs(float(props.volume))

    # A surface enclosing no volume has no well-defined centroid, so fall back
    # to the area-weighted surface centroid with no rotational inertia.
    if volume < trimesh.tol.zero:
        logger.warning("Mesh %s encloses no volume", path)
        return LinkInertia(
            path=str(path),
            volume=0.0,
            center_of_mass=np.array(mesh.centroid, dtype=np.float64),
            inertia=np.zeros((3, 3)),
        )

    return LinkInertia(
        path=str(path),
        volume=volume,
        center_of_mass=np.array(props.center_mass, dtype=np.float64),
        inertia=np.array(props.inertia, dtype=np.float64),
    )


def extract_link_inertia(path: str | Path, loader: MeshLoader | None = None) -> LinkInertia:
    """Loads a mesh file and computes its unit-density mass properties.

    Args:
        path: The path to the mesh file.
        loader: Which importer to use; inferred from the extension if None.

    Returns:
        The link inertia.
    """
    mesh = load_mesh(path, loader)
    return compute_link_inertia(path, mesh)
