"""Defines shared fixtures for the tests."""

import logging
from pathlib import Path
from typing import Callable, Iterator

import numpy as np
import pytest
import trimesh

BoxFactory = Callable[..., Path]


@pytest.fixture
def make_box(tmpdir: Path) -> BoxFactory:
    def make(
        name: str,
        extents: tuple[float, float, float] = (1.0, 1.0, 1.0),
        center: tuple[float, float, float] = (0.0, 0.0, 0.0),
    ) -> Path:
        transform = np.eye(4)
        transform[:3, 3] = center
        path = Path(tmpdir / name)
        trimesh.creation.box(extents=extents, transform=transform).export(path)
        return path

    return make


@pytest.fixture
def cube_path(make_box: BoxFactory) -> Path:
    return make_box("cube.stl")


@pytest.fixture
def flat_path(tmpdir: Path) -> Path:
    path = Path(tmpdir / "flat.stl")
    mesh = trimesh.Trimesh(vertices=[[0, 0, 0], [1, 0, 0], [0, 1, 0]], faces=[[0, 1, 2]])
    mesh.export(path)
    return path


@pytest.fixture(autouse=True)
def reset_logging() -> Iterator[None]:
    yield
    logger = logging.getLogger("urdf_inertia")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    logger.propagate = True
