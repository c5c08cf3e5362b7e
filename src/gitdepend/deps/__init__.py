"""Dependency graph loading and traversal for GitDepend."""

from .artifact_cache import ArtifactCache
from .config_loader import ConfigLoader, find_repository_root
from .package_reference import PackageReference, parse_package_file_name
from .traversal import DependencyVisitorAlgorithm

__all__ = [
    'ArtifactCache',
    'ConfigLoader',
    'find_repository_root',
    'PackageReference',
    'parse_package_file_name',
    'DependencyVisitorAlgorithm',
]
