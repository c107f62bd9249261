"""
Version record for colrcv.

Versions are of the form MAJOR.MINOR.PATCH; the string form is vX.Y.Z.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

__version__ = "0.1.0"


@dataclass(frozen=True)
class Version:
    """A parsed library version."""

    major: int
    minor: int
    patch: int

    @property
    def string(self) -> str:
        """String form of the version (vX.Y.Z)."""
        return f"v{self.major}.{self.minor}.{self.patch}"

    def as_tuple(self) -> tuple[int, int, int]:
        return (self.major, self.minor, self.patch)


def parse_version(version_str: str) -> Version:
    """
    Parse a version string into a Version.

    Handles formats like "0.1.0", "v0.1.0", "1.2.3-beta".

    Raises:
        ValueError: If fewer than three numeric parts are present
    """
    # Strip 'v' prefix and any suffix after hyphen
    clean = version_str.strip().lstrip("v").split("-")[0]
    parts = re.findall(r"\d+", clean)
    if len(parts) < 3:
        raise ValueError(f"Not a MAJOR.MINOR.PATCH version: {version_str!r}")
    major, minor, patch = (int(p) for p in parts[:3])
    return Version(major, minor, patch)


VERSION = parse_version(__version__)
