"""Defines the errors raised while computing link inertias."""

from pathlib import Path


class InertiaError(Exception):
    """Base class for errors which abort the whole run."""


class UsageError(InertiaError):
    pass


class JointFileError(InertiaError):
    def __init__(self, path: str | Path) -> None:
        super().__init__(f"Could not open joint file '{path}'")
        self.path = Path(path)


class ParseError(InertiaError, ValueError):
    def __init__(self, path: str | Path, line_number: int, token: str) -> None:
        super().__init__(f"Could not parse '{token}' as a number on line {line_number} of '{path}'")
        self.path = Path(path)
        self.line_number = line_number
        self.token = token


class MeshLoadError(InertiaError):
    def __init__(self, path: str | Path, reason: str | None = None) -> None:
        message = f"Could not open file '{path}'"
        if reason is not None:
            message = f"{message}: {reason}"
        super().__init__(message)
        self.path = Path(path)


class DegenerateVolumeError(InertiaError):
    def __init__(self, num_links: int) -> None:
        if num_links == 0:
            super().__init__("No mesh files were loaded, so there is no geometry to normalize")
        else:
            super().__init__(f"Total volume of {num_links} links is zero, so there is no geometry to normalize")
        self.num_links = num_links
