"""Defines the top-level command line interface.

Usage:
    urdf-inertia [mass] [mesh ...] [joints.txt ...] [key=value ...]

Positional arguments may appear in any order. A positive number sets the
total mass, a `.txt` file replaces the joint offsets, and anything else is
loaded as a link mesh.
"""

import logging
import sys
from typing import Sequence, TextIO

from urdf_inertia.args import JointFileArgument, MassArgument, MeshFileArgument, classify_arguments
from urdf_inertia.config import InertiaConfig
from urdf_inertia.errors import InertiaError, UsageError
from urdf_inertia.formats.urdf import (
    LinkProperties,
    check_link_inertias,
    compute_link_properties,
    emit_fragments,
    save_robot,
    total_mass,
)
from urdf_inertia.inertia import InertiaAccumulator, extract_link_inertia
from urdf_inertia.joints import load_joint_offsets
from urdf_inertia.utils.logging import configure_logging

logger = logging.getLogger(__name__)


def run(config: InertiaConfig, tokens: Sequence[str], stream: TextIO) -> list[LinkProperties]:
    """Computes the link properties and writes the URDF fragments.

    Args:
        config: The run configuration.
        tokens: The positional command line arguments.
        stream: Where to write the URDF fragments.

    Returns:
        The normalized properties of each link.

    Raises:
        UsageError: If no positional arguments were given.
    """
    if not tokens:
        raise UsageError("No mesh file provided!")

    accumulator = InertiaAccumulator(mass=config.mass)
    for argument in classify_arguments(tokens):
        match argument:
            case MassArgument(value=mass):
                accumulator.set_mass(mass)
            case JointFileArgument(path=path):
                logger.info("Read file '%s' as joint transformation info.", path)
                accumulator.replace_joints(load_joint_offsets(path, max_line_length=config.max_line_length))
            case MeshFileArgument(path=path):
                accumulator.add_link(extract_link_inertia(path, argument.loader))

    properties = compute_link_properties(accumulator)
    logger.debug("Distributed %f kg over %d links", total_mass(properties), len(properties))
    check_link_inertias(properties, epsilon=config.min_inertia_eigval, strict=config.strict_inertia)

    emit_fragments(properties, accumulator.mass, stream, uri_prefix=config.uri_prefix)
    if config.urdf_path is not None:
        save_robot(properties, config.urdf_path, name=config.robot_name, uri_prefix=config.uri_prefix)
    return properties


def main(args: Sequence[str] | None = None) -> int:
    if args is None:
        args = sys.argv[1:]
    configure_logging()

    try:
        config, tokens = InertiaConfig.from_cli_args(args)
    except ValueError as e:
        logger.error("%s", e)
        return -1

    if config.debug:
        configure_logging(level=logging.DEBUG)

    try:
        run(config, tokens, sys.stdout)
    except (InertiaError, ValueError) as e:
        logger.error("%s", e)
        return -1
    return 0


def sync_main() -> None:
    sys.exit(main())


if __name__ == "__main__":
    # python -m urdf_inertia.scripts.cli
    sync_main()
