"""Defines the config class."""

import argparse
from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Self, Sequence, cast

import yaml
from omegaconf import OmegaConf
from omegaconf.errors import OmegaConfBaseException

from urdf_inertia.formats.urdf import DEFAULT_URI_PREFIX
from urdf_inertia.inertia import DEFAULT_MASS
from urdf_inertia.joints import DEFAULT_MAX_LINE_LENGTH
from urdf_inertia.utils.geometry import DEFAULT_EPSILON


@dataclass
class InertiaConfig:
    mass: float = field(
        default=DEFAULT_MASS,
        metadata={"help": "The total mass of all links, in kg. Positional numbers override this."},
    )
    max_line_length: int = field(
        default=DEFAULT_MAX_LINE_LENGTH,
        metadata={"help": "Joint file lines are truncated to this many characters; 0 disables the limit."},
    )
    uri_prefix: str = field(
        default=DEFAULT_URI_PREFIX,
        metadata={"help": "The prefix of the visual mesh filename."},
    )
    urdf_path: str | None = field(
        default=None,
        metadata={"help": "If set, also writes a complete URDF document to this path."},
    )
    robot_name: str = field(
        default="robot",
        metadata={"help": "The name of the robot in the complete URDF document."},
    )
    min_inertia_eigval: float = field(
        default=DEFAULT_EPSILON,
        metadata={"help": "The minimum eigenvalue of a valid inertia matrix."},
    )
    strict_inertia: bool = field(
        default=False,
        metadata={"help": "Fails instead of warning when an inertia matrix is not positive definite."},
    )
    debug: bool = field(
        default=False,
        metadata={"help": "Enables debug mode."},
    )

    @classmethod
    def from_cli_args(cls, args: Sequence[str]) -> tuple[Self, list[str]]:
        """Parses the config from command line arguments.

        Arguments of the form `key=value` whose key names a config field
        override that field; all other positional arguments, including mesh
        paths which happen to contain `=`, are returned for classification.

        Args:
            args: The command line arguments, without the program name.

        Returns:
            The config, and the remaining positional arguments.

        Raises:
            ValueError: If the config file cannot be read or does not match
                the config fields.
        """
        parser = argparse.ArgumentParser(
            description="Computes URDF inertial properties of triangulated meshes.",
            usage="%(prog)s [mass] [mesh ...] [joints.txt ...] [key=value ...]",
        )
        parser.add_argument("-f", "--config-path", type=Path, default=None, help="The path to the config file.")
        parser.add_argument("--debug", action="store_true", help="Enables debug logging.")
        parsed_args, remaining_args = parser.parse_known_args(args)
        config_path: Path | None = parsed_args.config_path

        field_names = {f.name for f in fields(cls)}
        overrides = [arg for arg in remaining_args if arg.split("=", 1)[0] in field_names and "=" in arg]
        tokens = [arg for arg in remaining_args if arg not in overrides]

        cfg = cast(Self, OmegaConf.structured(cls))
        if config_path is not None:
            try:
                with config_path.open("r") as f:
                    file_cfg = OmegaConf.load(f)
                cfg = cast(Self, OmegaConf.merge(cfg, file_cfg))
            except (OSError, yaml.YAMLError, OmegaConfBaseException) as e:
                raise ValueError(f"Could not read config file '{config_path}': {e}") from e
        try:
            cli_cfg = OmegaConf.from_cli(overrides)
            cfg = cast(Self, OmegaConf.merge(cfg, cli_cfg))
        except OmegaConfBaseException as e:
            raise ValueError(f"Invalid config override in {overrides}: {e}") from e
        if parsed_args.debug:
            cfg.debug = True
        return cfg, tokens
