"""Renders the link mass properties as URDF.

The default output is one `<inertial>` and `<visual>` fragment per link,
meant to be pasted into a hand-written robot description. A complete
`<robot>` document with one `<link>` per mesh can be written as well.
"""

import logging
import xml.etree.ElementTree as ET
from dataclasses import dataclass
from pathlib import Path
from typing import TextIO

import numpy as np
from numpy.typing import NDArray

from urdf_inertia.errors import DegenerateVolumeError
from urdf_inertia.formats.common import format_float, format_vector, save_xml
from urdf_inertia.inertia import InertiaAccumulator, LinkInertia
from urdf_inertia.utils.geometry import DEFAULT_EPSILON, check_inertia, cumulative_translation, matrix_to_moments

logger = logging.getLogger(__name__)

DEFAULT_URI_PREFIX = "model://"
FIELD_WIDTH = 14

# Column alignment of the continuation lines of the <inertia> element.
IYY_INDENT = " " * 42
IZZ_INDENT = " " * 63


@dataclass(frozen=True)
class LinkProperties:
    """Defines the normalized mass properties of a link.

    Attributes:
        link: The raw unit-density properties the values were derived from.
        mass: The share of the total mass assigned to this link.
        center_of_mass: The center of mass, offset by `translation`.
        inertia: The inertia tensor scaled to the total mass.
        translation: The cumulative, negated joint offset of the link frame.
    """

    link: LinkInertia
    mass: float
    center_of_mass: NDArray
    inertia: NDArray
    translation: NDArray

    @property
    def path(self) -> str:
        return self.link.path


def compute_link_properties(accumulator: InertiaAccumulator) -> list[LinkProperties]:
    """Distributes the total mass over the links in proportion to volume.

    Args:
        accumulator: The links, joint offsets and total mass of the run.

    Returns:
        The normalized properties of each link, in input order.

    Raises:
        DegenerateVolumeError: If no links were loaded or their total
            volume is zero.
    """
    total_volume = accumulator.total_volume
    if not accumulator.links or total_volume <= 0:
        raise DegenerateVolumeError(len(accumulator.links))

    scale = accumulator.mass / total_volume
    offsets = [joint.translation for joint in accumulator.joints]

    properties = []
    for i, link in enumerate(accumulator.links):
        translation = cumulative_translation(offsets, i)
        properties.append(
            LinkProperties(
                link=link,
                mass=accumulator.mass * link.volume / total_volume,
                center_of_mass=link.center_of_mass + translation,
                inertia=link.inertia * scale,
                translation=translation,
            )
        )
    return properties


def check_link_inertias(
    properties: list[LinkProperties],
    epsilon: float = DEFAULT_EPSILON,
    strict: bool = False,
) -> None:
    for props in properties:
        # Links without volume carry no mass and no rotational inertia.
        if props.mass > 0:
            check_inertia(props.path, props.inertia, epsilon=epsilon, strict=strict)


def format_link(props: LinkProperties, uri_prefix: str = DEFAULT_URI_PREFIX) -> str:
    moments = {k: format_float(v, FIELD_WIDTH) for k, v in matrix_to_moments(props.inertia).items()}
    com = format_vector(props.center_of_mass.tolist(), FIELD_WIDTH)
    trans = format_vector(props.translation.tolist(), FIELD_WIDTH)
    lines = [
        f"{props.path}:",
        "        <inertial>",
        f'            <mass value="{format_float(props.mass)}" />',
        f'            <origin rpy="0 0 0" xyz="{com}" />',
        f'            <inertia ixx="{moments["ixx"]}" ixy="{moments["ixy"]}" ixz="{moments["ixz"]}"',
        f'{IYY_INDENT}iyy="{moments["iyy"]}" iyz="{moments["iyz"]}"',
        f'{IZZ_INDENT}izz="{moments["izz"]}" />',
        "        </inertial>",
        "        <visual>",
        f'            <origin rpy="0 0 0" xyz="{trans}" />',
        "            <geometry>",
        f'                <mesh filename="{uri_prefix}{props.path}" />',
        "            </geometry>",
        "        </visual>",
    ]
    return "\n".join(lines) + "\n"


def emit_fragments(
    properties: list[LinkProperties],
    mass: float,
    stream: TextIO,
    uri_prefix: str = DEFAULT_URI_PREFIX,
) -> None:
    stream.write(f"URDF data for {len(properties)} links with overall mass of {mass:.3f} kg:\n")
    for props in properties:
        stream.write(format_link(props, uri_prefix=uri_prefix))


def get_link_names(properties: list[LinkProperties]) -> list[str]:
    names: list[str] = []
    for props in properties:
        name = Path(props.path).stem or "link"
        if name in names:
            suffix = 2
            while f"{name}_{suffix}" in names:
                suffix += 1
            name = f"{name}_{suffix}"
        names.append(name)
    return names


def build_robot(
    properties: list[LinkProperties],
    name: str = "robot",
    uri_prefix: str = DEFAULT_URI_PREFIX,
) -> ET.Element:
    robot = ET.Element("robot", name=name)
    for link_name, props in zip(get_link_names(properties), properties):
        link = ET.SubElement(robot, "link", name=link_name)

        inertial = ET.SubElement(link, "inertial")
        ET.SubElement(inertial, "mass", value=format_float(props.mass))
        ET.SubElement(inertial, "origin", rpy="0 0 0", xyz=format_vector(props.center_of_mass.tolist()))
        moments = {k: format_float(v) for k, v in matrix_to_moments(props.inertia).items()}
        ET.SubElement(inertial, "inertia", **moments)

        visual = ET.SubElement(link, "visual")
        ET.SubElement(visual, "origin", rpy="0 0 0", xyz=format_vector(props.translation.tolist()))
        geometry = ET.SubElement(visual, "geometry")
        ET.SubElement(geometry, "mesh", filename=f"{uri_prefix}{props.path}")
    return robot


def save_robot(
    properties: list[LinkProperties],
    urdf_path: str | Path,
    name: str = "robot",
    uri_prefix: str = DEFAULT_URI_PREFIX,
) -> None:
    robot = build_robot(properties, name=name, uri_prefix=uri_prefix)
    save_xml(urdf_path, robot)
    logger.info("Wrote URDF for %d links to %s", len(properties), urdf_path)


def total_mass(properties: list[LinkProperties]) -> float:
    return float(np.sum([props.mass for props in properties]))
