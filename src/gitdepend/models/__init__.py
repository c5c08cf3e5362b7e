"""Models for GitDepend configuration and outcomes."""

from .return_code import ReturnCode
from .gitdepend_file import (
    GitDependFile,
    Dependency,
    BuildSettings,
    PackageSettings,
    CONFIG_FILE_NAMES,
)

__all__ = [
    'ReturnCode',
    'GitDependFile',
    'Dependency',
    'BuildSettings',
    'PackageSettings',
    'CONFIG_FILE_NAMES',
]
