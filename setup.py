# mypy: disable-error-code="import-untyped, import-not-found"
#!/usr/bin/env python
"""Setup script for the project."""

import re

from setuptools import setup

with open("README.md", "r", encoding="utf-8") as f:
    long_description: str = f.read()


with open("urdf_inertia/requirements.txt", "r", encoding="utf-8") as f:
    requirements: list[str] = f.read().splitlines()


with open("urdf_inertia/requirements-dev.txt", "r", encoding="utf-8") as f:
    requirements_dev: list[str] = f.read().splitlines()


requirements_collada = ["pycollada"]
requirements_all = requirements_dev + requirements_collada


with open("urdf_inertia/__init__.py", "r", encoding="utf-8") as fh:
    version_re = re.search(r"^__version__ = \"([^\"]*)\"", fh.read(), re.MULTILINE)
assert version_re is not None, "Could not find version in urdf_inertia/__init__.py"
version: str = version_re.group(1)


setup(
    name="urdf-inertia",
    version=version,
    description="Computes URDF inertial properties of triangulated meshes",
    long_description=long_description,
    long_description_content_type="text/markdown",
    python_requires=">=3.11",
    install_requires=requirements,
    tests_require=requirements_dev,
    extras_require={
        "dev": requirements_dev,
        "collada": requirements_collada,
        "all": requirements_all,
    },
    packages=["urdf_inertia", "urdf_inertia.formats", "urdf_inertia.scripts", "urdf_inertia.utils"],
    package_data={
        "urdf_inertia": [
            "py.typed",
            "requirements*.txt",
        ],
    },
    entry_points={
        "console_scripts": [
            "urdf-inertia=urdf_inertia.scripts.cli:sync_main",
        ],
    },
)
