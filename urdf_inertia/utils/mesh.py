"""Defines utility functions for loading mesh files."""

import logging
from pathlib import Path
from typing import Union

import trimesh

from urdf_inertia.args import MeshLoader, get_mesh_loader
from urdf_inertia.errors import MeshLoadError

logger = logging.getLogger(__name__)


def _load_collada_scene(file_path: Union[str, Path]) -> trimesh.Scene:
    try:
        import collada  # noqa: F401
    except ImportError:
        raise MeshLoadError(
            file_path,
            "pycollada is required to load .dae files. Install it with `pip install 'urdf-inertia[collada]'`",
        )

    scene = trimesh.load_scene(file_path, file_type="dae")

    # The COLLADA importer also reports scene metadata (units, up axis,
    # authoring tool) which has no bearing on the mass properties.
    if scene.metadata:
        logger.debug("Ignoring scene metadata for %s: %s", file_path, sorted(scene.metadata))
    return scene


def load_mesh(file_path: Union[str, Path], loader: MeshLoader | None = None) -> trimesh.Trimesh:
    """Loads a mesh file as a single triangulated surface.

    Scenes with multiple geometries are flattened into one mesh, with the
    scene graph transforms applied.

    Args:
        file_path: The path to the mesh file.
        loader: Which importer to use; inferred from the file extension
            when not provided.

    Returns:
        The loaded mesh.

    Raises:
        MeshLoadError: If the file could not be opened or parsed, or it
            contains no triangles.
    """
    if loader is None:
        loader = get_mesh_loader(file_path)
    if not Path(file_path).is_file():
        raise MeshLoadError(file_path, "no such file")

    try:
        match loader:
            case "collada":
                scene = _load_collada_scene(file_path)
            case "generic":
                scene = trimesh.load_scene(file_path)
            case _:
                raise ValueError(f"Unknown mesh loader: {loader}")
        mesh = scene.to_mesh()
    except MeshLoadError:
        raise
    except Exception as e:
        raise MeshLoadError(file_path, str(e)) from e

    if not isinstance(mesh, trimesh.Trimesh) or len(mesh.faces) == 0:
        raise MeshLoadError(file_path, "no triangles found")

    logger.debug("Loaded %s with %d vertices and %d faces", file_path, len(mesh.vertices), len(mesh.faces))
    return mesh
