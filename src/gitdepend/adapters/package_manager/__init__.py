"""Package manager adapters."""

from .base import PackageManagerAdapter
from .nuget import NugetPackageManager

__all__ = ['PackageManagerAdapter', 'NugetPackageManager']
