"""Factory classes for creating adapters and the collaborators of a command."""

from dataclasses import dataclass, field

from .adapters.git.base import GitAdapter
from .adapters.git.gitpython_client import GitPythonClient
from .adapters.package_manager.base import PackageManagerAdapter
from .adapters.package_manager.nuget import NugetPackageManager
from .config import get_cache_dir_override, get_package_manager_type
from .core.process import ProcessRunner
from .deps.artifact_cache import ArtifactCache
from .deps.config_loader import ConfigLoader
from .deps.traversal import DependencyVisitorAlgorithm


class PackageManagerFactory:
    """Factory for creating package manager adapters."""

    @staticmethod
    def create_package_manager(manager_type="nuget"):
        """Create a package manager adapter based on the specified type.

        Args:
            manager_type (str, optional): Type of package manager adapter to create.
                Defaults to "nuget".

        Returns:
            PackageManagerAdapter: An instance of the specified package manager adapter.

        Raises:
            ValueError: If the package manager type is not supported.
        """
        managers = {
            "nuget": NugetPackageManager,
        }

        if manager_type.lower() not in managers:
            raise ValueError(f"Unsupported package manager type: {manager_type}")

        return managers[manager_type.lower()]()


@dataclass
class Services:
    """The collaborators one command works with."""
    loader: ConfigLoader = field(default_factory=ConfigLoader)
    git: GitAdapter = field(default_factory=GitPythonClient)
    package_manager: PackageManagerAdapter = field(default_factory=NugetPackageManager)
    process_runner: ProcessRunner = field(default_factory=ProcessRunner)
    cache: ArtifactCache = field(default_factory=ArtifactCache)

    def create_algorithm(self) -> DependencyVisitorAlgorithm:
        """Create a traversal algorithm with a fresh visited set."""
        return DependencyVisitorAlgorithm(self.loader)


def create_services():
    """Create the collaborators configured by the user settings.

    Returns:
        Services: Collaborators for one command.
    """
    return Services(
        package_manager=PackageManagerFactory.create_package_manager(get_package_manager_type()),
        cache=ArtifactCache(get_cache_dir_override()),
    )
