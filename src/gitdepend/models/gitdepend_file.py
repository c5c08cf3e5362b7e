"""GitDepend project configuration models and parsing logic."""

import os
import yaml
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional, Tuple, Dict, Any

from ..utils.helpers import find_repository_root, normalize_path


# Looked up in this order inside a repository root
CONFIG_FILE_NAMES = ("GitDepend.yml", "GitDepend.yaml", "GitDepend.json")

DEFAULT_BUILD_SCRIPT = "make.bat" if os.name == "nt" else "make.sh"
DEFAULT_PACKAGES_DIRECTORY = "artifacts/NuGet/Debug"


@dataclass(frozen=True)
class BuildSettings:
    """How a project builds its package artifacts."""
    script: str = DEFAULT_BUILD_SCRIPT
    arguments: str = ""


@dataclass(frozen=True)
class PackageSettings:
    """Where a project writes its package artifacts."""
    directory: str = DEFAULT_PACKAGES_DIRECTORY


@dataclass
class Dependency:
    """Represents a reference from one project to another project's checkout."""
    directory: str  # relative to the owning project, e.g. "../Lib1"
    branch: Optional[str] = None
    url: Optional[str] = None
    base_directory: Optional[str] = field(default=None, compare=False)
    _configuration: Optional["GitDependFile"] = field(default=None, init=False, repr=False, compare=False)

    def resolve_directory(self, owner_directory: Optional[str] = None) -> str:
        """Get the normalized absolute directory of this dependency.

        Args:
            owner_directory: Directory of the project declaring the dependency.
                Defaults to the directory the dependency was loaded from.

        Returns:
            str: Normalized absolute path, used as the dependency identity.
        """
        owner = owner_directory or self.base_directory or os.getcwd()
        return normalize_path(os.path.join(owner, self.directory))

    @property
    def configuration(self) -> Optional["GitDependFile"]:
        """The dependency's own configuration, loaded on first access.

        Read from the root of the repository holding the dependency
        directory. None when the directory is not inside a repository or
        holds an invalid configuration.
        """
        if self._configuration is None and self.base_directory:
            root = find_repository_root(self.resolve_directory())
            if root is None:
                return None
            try:
                self._configuration = GitDependFile.from_directory(Path(root))
            except ValueError:
                return None
        return self._configuration

    def attach_configuration(self, config: Optional["GitDependFile"]) -> "Dependency":
        """Use an already loaded configuration instead of reading it from disk."""
        self._configuration = config
        return self

    @classmethod
    def from_dict(cls, data: Dict[str, Any], base_directory: Optional[str] = None) -> "Dependency":
        """Build a dependency from a configuration entry."""
        if not isinstance(data, dict):
            raise ValueError(f"Dependency entries must be objects, got {type(data).__name__}")

        directory = data.get('directory', data.get('dir'))
        if not directory or not isinstance(directory, str):
            raise ValueError("Missing required field 'directory' in dependency entry")

        return cls(
            directory=directory,
            branch=data.get('branch'),
            url=data.get('url'),
            base_directory=base_directory,
        )

    def to_dict(self) -> Dict[str, Any]:
        result = {'directory': self.directory}
        if self.branch:
            result['branch'] = self.branch
        if self.url:
            result['url'] = self.url
        return result

    def __str__(self) -> str:
        if self.branch:
            return f"{self.directory}#{self.branch}"
        return self.directory


@dataclass(frozen=True)
class GitDependFile:
    """Represents the GitDepend configuration of one project."""
    name: str
    dependencies: Tuple[Dependency, ...] = ()
    build: BuildSettings = field(default_factory=BuildSettings)
    packages: PackageSettings = field(default_factory=PackageSettings)

    @classmethod
    def find_config_file(cls, directory: Path) -> Optional[Path]:
        """Get the configuration file inside a directory, if there is one."""
        for file_name in CONFIG_FILE_NAMES:
            candidate = directory / file_name
            if candidate.is_file():
                return candidate
        return None

    @classmethod
    def from_directory(cls, directory: Path) -> Optional["GitDependFile"]:
        """Load the configuration stored in a project directory.

        A directory without a configuration file gets the default
        configuration, named after the directory.

        Returns:
            GitDependFile: Loaded configuration, or None if the directory is missing

        Raises:
            ValueError: If the configuration file is invalid
        """
        if not directory.is_dir():
            return None

        config_file = cls.find_config_file(directory)
        if config_file is None:
            return cls.default(directory)
        return cls.from_file(config_file)

    @classmethod
    def default(cls, directory: Path) -> "GitDependFile":
        return cls(name=directory.resolve().name)

    @classmethod
    def from_file(cls, config_path: Path) -> "GitDependFile":
        """Load a configuration from a GitDepend.yml (or legacy GitDepend.json) file.

        Args:
            config_path: Path to the configuration file

        Returns:
            GitDependFile: Loaded configuration

        Raises:
            ValueError: If the file is invalid or has malformed fields
            FileNotFoundError: If the file doesn't exist
        """
        if not config_path.exists():
            raise FileNotFoundError(f"GitDepend configuration not found: {config_path}")

        try:
            with open(config_path, 'r', encoding='utf-8-sig') as f:
                data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ValueError(f"Invalid format in {config_path}: {e}")

        # An empty file is a project with default settings
        if data is None:
            data = {}
        if not isinstance(data, dict):
            raise ValueError(f"{config_path.name} must contain an object, got {type(data).__name__}")

        return cls.from_dict(data, config_path.parent)

    @classmethod
    def from_dict(cls, data: Dict[str, Any], directory: Path) -> "GitDependFile":
        base_directory = normalize_path(str(directory))

        name = data.get('name') or directory.resolve().name
        if not isinstance(name, str):
            raise ValueError(f"Field 'name' must be a string, got {type(name).__name__}")

        build_data = data.get('build') or {}
        if not isinstance(build_data, dict):
            raise ValueError("Field 'build' must be an object")
        build = BuildSettings(
            script=build_data.get('script') or DEFAULT_BUILD_SCRIPT,
            arguments=build_data.get('arguments') or "",
        )

        packages_data = data.get('packages') or {}
        if not isinstance(packages_data, dict):
            raise ValueError("Field 'packages' must be an object")
        packages = PackageSettings(
            directory=packages_data.get('directory', packages_data.get('dir')) or DEFAULT_PACKAGES_DIRECTORY
        )

        dependency_list = data.get('dependencies') or []
        if not isinstance(dependency_list, list):
            raise ValueError("Field 'dependencies' must be a list")
        dependencies = tuple(Dependency.from_dict(entry, base_directory) for entry in dependency_list)

        return cls(name=name, dependencies=dependencies, build=build, packages=packages)

    def to_dict(self) -> Dict[str, Any]:
        """Get the serializable form written by `gitdepend init`."""
        result: Dict[str, Any] = {
            'name': self.name,
            'build': {'script': self.build.script},
            'packages': {'directory': self.packages.directory},
        }
        if self.build.arguments:
            result['build']['arguments'] = self.build.arguments
        if self.dependencies:
            result['dependencies'] = [dep.to_dict() for dep in self.dependencies]
        return result

    def to_yaml(self) -> str:
        return yaml.safe_dump(self.to_dict(), sort_keys=False, default_flow_style=False)
