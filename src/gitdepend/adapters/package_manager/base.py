"""Base adapter interface for package managers."""

from abc import ABC, abstractmethod
from typing import Optional, Tuple

from ...models.return_code import ReturnCode


class PackageManagerAdapter(ABC):
    """Base adapter for package managers that consume built artifacts."""

    # Build descriptors whose package references get restored and updated
    solution_pattern: str = "*.sln"
    # Package artifacts produced by a build
    package_pattern: str = "*.nupkg"
    # Files that change when package references are updated
    tracked_files: Tuple[str, ...] = ()

    def __init__(self, working_directory: Optional[str] = None):
        self.working_directory = working_directory

    @abstractmethod
    def restore(self, solution: str) -> ReturnCode:
        """Restore the package references of a solution."""
        pass

    @abstractmethod
    def update(self, solution: str, package_id: str, version: str, source_directory: str) -> ReturnCode:
        """Pin a solution to a package version found in a source directory."""
        pass
