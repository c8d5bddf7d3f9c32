"""Computes URDF inertial properties from triangulated meshes."""

__version__ = "0.1.0"
