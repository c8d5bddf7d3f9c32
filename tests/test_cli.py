"""Runs the command line tool end to end on generated meshes."""

import re
import sys
from pathlib import Path
from typing import Callable

import numpy as np
import pytest

from urdf_inertia.scripts.cli import main

NUMBER = r"(-?\d+\.\d+)"


def parse_vectors(output: str, pattern: str) -> list[list[float]]:
    return [[float(v) for v in match] for match in re.findall(pattern, output)]


def inertial_origins(output: str) -> list[list[float]]:
    return parse_vectors(output, rf'<mass value="[^"]+" />\s*<origin rpy="0 0 0" xyz="{NUMBER} {NUMBER} {NUMBER}"')


def visual_origins(output: str) -> list[list[float]]:
    return parse_vectors(output, rf'<visual>\s*<origin rpy="0 0 0" xyz="{NUMBER} {NUMBER} {NUMBER}"')


def masses(output: str) -> list[float]:
    return [float(v) for v in re.findall(rf'<mass value="{NUMBER}" />', output)]


def test_no_arguments(capsys: pytest.CaptureFixture[str]) -> None:
    assert main([]) == -1
    assert "No mesh file provided!" in capsys.readouterr().out


def test_unit_cube(cube_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["1", str(cube_path)]) == 0
    output = capsys.readouterr().out

    assert "Overall mass is: 1.000000 kg" in output
    assert "URDF data for 1 links with overall mass of 1.000 kg:" in output
    assert f"{cube_path}:\n" in output
    assert f'<mesh filename="model://{cube_path}" />' in output
    assert masses(output) == pytest.approx([1.0])
    assert np.allclose(inertial_origins(output), [[0.0, 0.0, 0.0]])

    moments = {k: float(v) for k, v in re.findall(rf'(i[xyz]{{2}})="{NUMBER}"', output)}
    assert moments["ixx"] == pytest.approx(1 / 6)
    assert moments["iyy"] == pytest.approx(1 / 6)
    assert moments["izz"] == pytest.approx(1 / 6)
    assert moments["ixy"] == pytest.approx(0.0, abs=1e-9)
    assert moments["ixz"] == pytest.approx(0.0, abs=1e-9)
    assert moments["iyz"] == pytest.approx(0.0, abs=1e-9)


def test_last_mass_wins(cube_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["2", str(cube_path), "3"]) == 0
    output = capsys.readouterr().out
    assert "overall mass of 3.000 kg" in output
    assert masses(output) == pytest.approx([3.0])


def test_mass_split_by_volume(make_box: Callable[..., Path], capsys: pytest.CaptureFixture[str]) -> None:
    small = make_box("small.stl", extents=(1.0, 1.0, 1.0))
    large = make_box("large.stl", extents=(1.0, 1.0, 3.0))
    assert main([str(small), str(large), "8"]) == 0
    output = capsys.readouterr().out
    assert masses(output) == pytest.approx([2.0, 6.0])
    assert sum(masses(output)) == pytest.approx(8.0)


def test_output_is_deterministic(cube_path: Path, tmpdir: Path, capsys: pytest.CaptureFixture[str]) -> None:
    joints_path = Path(tmpdir / "joints.txt")
    joints_path.write_text("0.1 0.2 0.3\n")
    args = ["1.5", str(cube_path), str(joints_path), str(cube_path)]

    assert main(args) == 0
    first = capsys.readouterr().out
    assert main(args) == 0
    second = capsys.readouterr().out
    assert first == second


def test_joint_offsets(make_box: Callable[..., Path], tmpdir: Path, capsys: pytest.CaptureFixture[str]) -> None:
    first = make_box("first.stl")
    second = make_box("second.stl", center=(0.0, 0.0, 1.0))
    joints_path = Path(tmpdir / "joints.txt")
    joints_path.write_text("1 0 0\n0 1 0\n")

    assert main([str(first), str(second), str(joints_path)]) == 0
    output = capsys.readouterr().out
    assert f"Read file '{joints_path}' as joint transformation info." in output
    assert np.allclose(visual_origins(output), [[-1, 0, 0], [-1, -1, 0]])
    assert np.allclose(inertial_origins(output), [[-1, 0, 0], [-1, -1, 1]])


def test_second_joint_file_replaces_first(
    cube_path: Path,
    tmpdir: Path,
    capsys: pytest.CaptureFixture[str],
) -> None:
    old_joints = Path(tmpdir / "old.txt")
    old_joints.write_text("5 5 5\n5 5 5\n")
    new_joints = Path(tmpdir / "new.txt")
    new_joints.write_text("0 0 2\n")

    assert main([str(old_joints), str(cube_path), str(new_joints), str(cube_path)]) == 0
    output = capsys.readouterr().out
    assert np.allclose(visual_origins(output), [[0, 0, -2], [0, 0, -2]])


def test_zero_volume_link(cube_path: Path, flat_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["2", str(cube_path), str(flat_path)]) == 0
    output = capsys.readouterr().out
    assert masses(output) == pytest.approx([2.0, 0.0])


def test_only_zero_volume(flat_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    assert main([str(flat_path)]) == -1
    output = capsys.readouterr().out
    assert "no geometry to normalize" in output
    assert "<inertial>" not in output


def test_only_mass(capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["2"]) == -1
    assert "no geometry to normalize" in capsys.readouterr().out


def test_missing_mesh(cube_path: Path, tmpdir: Path, capsys: pytest.CaptureFixture[str]) -> None:
    missing = Path(tmpdir / "missing.stl")
    assert main([str(cube_path), str(missing), str(cube_path)]) == -1
    output = capsys.readouterr().out
    assert f"Could not open file '{missing}'" in output
    assert "URDF data" not in output


def test_missing_joint_file(cube_path: Path, tmpdir: Path, capsys: pytest.CaptureFixture[str]) -> None:
    missing = Path(tmpdir / "missing.txt")
    assert main([str(cube_path), str(missing)]) == -1
    assert str(missing) in capsys.readouterr().out


def test_malformed_joint_file(cube_path: Path, tmpdir: Path, capsys: pytest.CaptureFixture[str]) -> None:
    joints_path = Path(tmpdir / "joints.txt")
    joints_path.write_text("1 0 zero\n")
    assert main([str(cube_path), str(joints_path)]) == -1
    assert "Could not parse 'zero'" in capsys.readouterr().out


def test_write_urdf(cube_path: Path, tmpdir: Path, capsys: pytest.CaptureFixture[str]) -> None:
    urdf_path = Path(tmpdir / "robot.urdf")
    assert main([str(cube_path), f"urdf_path={urdf_path}", "robot_name=cube_bot"]) == 0
    assert urdf_path.exists()
    contents = urdf_path.read_text()
    assert 'name="cube_bot"' in contents
    assert '<link name="cube">' in contents


def test_invalid_override(cube_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    assert main([str(cube_path), "mass=heavy"]) == -1
    assert "Invalid config override" in capsys.readouterr().out


def test_mesh_path_with_equals_sign(make_box: Callable[..., Path], capsys: pytest.CaptureFixture[str]) -> None:
    path = make_box("link=1.stl")
    assert main(["2", str(path)]) == 0
    output = capsys.readouterr().out
    assert f"{path}:\n" in output
    assert masses(output) == pytest.approx([2.0])


def test_missing_config_file(cube_path: Path, tmpdir: Path, capsys: pytest.CaptureFixture[str]) -> None:
    config_path = Path(tmpdir / "missing.yaml")
    assert main([str(cube_path), "-f", str(config_path)]) == -1
    output = capsys.readouterr().out
    assert f"Could not read config file '{config_path}'" in output
    assert "<inertial>" not in output


def test_collada_without_pycollada(
    tmpdir: Path,
    monkeypatch: pytest.MonkeyPatch,
    capsys: pytest.CaptureFixture[str],
) -> None:
    monkeypatch.setitem(sys.modules, "collada", None)
    path = Path(tmpdir / "arm.dae")
    path.write_text("<COLLADA />")
    assert main([str(path)]) == -1
    output = capsys.readouterr().out
    assert f"Could not open file '{path}'" in output
    assert "urdf-inertia[collada]" in output
