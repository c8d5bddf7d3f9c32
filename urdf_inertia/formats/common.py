"""Utility functions common to the output formats."""

import io
import re
import xml.etree.ElementTree as ET
from pathlib import Path
from xml.dom import minidom


def format_float(value: float, width: int = 0) -> str:
    """Formats a number as fixed-point with 11 decimal places.

    Args:
        value: The number to format.
        width: The minimum field width; shorter values are zero-padded.

    Returns:
        The formatted number.
    """
    return f"{value:0{width}.11f}" if width > 0 else f"{value:.11f}"


def format_vector(values: tuple[float, ...] | list[float], width: int = 0) -> str:
    return " ".join(format_float(float(v), width) for v in values)


def save_xml(
    path: str | Path | io.StringIO,
    tree: ET.ElementTree | ET.Element,
) -> None:
    if isinstance(tree, ET.ElementTree):
        root = tree.getroot()
        if root is None:
            raise ValueError("ElementTree has no root element")
        tree = root
    xmlstr = minidom.parseString(ET.tostring(tree)).toprettyxml(indent="  ")
    xmlstr = re.sub(r"\n\s*\n", "\n", xmlstr)
    if isinstance(path, io.StringIO):
        path.write(xmlstr)
    else:
        with open(path, "w") as f:
            f.write(xmlstr)
