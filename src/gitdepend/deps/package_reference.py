"""Package file name parsing."""

import re
from dataclasses import dataclass
from typing import Optional


# <id>.<major>.<minor>[.<patch>][-<prerelease>], id is the shortest prefix that fits
PACKAGE_NAME_PATTERN = re.compile(
    r'^(?P<id>.*?)\.(?P<version>\d+\.\d+(?:\.\d+)?(?:-.+)?)$',
    re.ASCII,
)


@dataclass(frozen=True)
class PackageReference:
    """Identifies one built package by id and version."""
    id: str
    version: str

    def __str__(self) -> str:
        return f"{self.id}.{self.version}"


def parse_package_file_name(name: str) -> Optional[PackageReference]:
    """Extract the package id and version from a package file name.

    Args:
        name: File name without extension, e.g. "MyLib.1.2.3-beta1"

    Returns:
        PackageReference: Parsed reference, or None if the name has no version suffix
    """
    if not name:
        return None

    match = PACKAGE_NAME_PATTERN.match(name)
    if not match or not match.group('id'):
        return None

    return PackageReference(id=match.group('id'), version=match.group('version'))
