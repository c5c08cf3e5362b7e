"""Shared pytest fixtures for GitDepend tests."""

from pathlib import Path
from unittest.mock import MagicMock

import pytest
import yaml

from gitdepend.adapters.git.base import GitAdapter
from gitdepend.adapters.package_manager.base import PackageManagerAdapter
from gitdepend.models.gitdepend_file import Dependency, GitDependFile, PackageSettings
from gitdepend.models.return_code import ReturnCode
from gitdepend.utils.helpers import normalize_path
from gitdepend.visitors.base import Visitor


class FakeLoader:
    """In-memory config loader keyed by normalized directory."""

    def __init__(self, graph=None):
        self.graph = {}
        self.roots = {}
        self.loaded = []
        for directory, config in (graph or {}).items():
            self.add(directory, config)

    def add(self, directory, config, root=None):
        """Register a directory; root is the checkout it resolves to, itself by default."""
        key = normalize_path(directory)
        self.graph[key] = config
        if root:
            self.roots[key] = normalize_path(root)

    def load_from_directory(self, directory):
        key = normalize_path(directory)
        self.loaded.append(key)
        if key not in self.graph:
            return None, None, ReturnCode.DIRECTORY_DOES_NOT_EXIST
        return self.graph[key], self.roots.get(key, key), ReturnCode.SUCCESS


class RecordingVisitor(Visitor):
    """Records every hook call and can fail on chosen directories."""

    def __init__(self, fail_dependency=None, fail_project=None):
        super().__init__()
        self.calls = []
        self.fail_dependency = set(fail_dependency or [])
        self.fail_project = set(fail_project or [])

    def visit_dependency(self, directory, dependency):
        path = dependency.resolve_directory(directory)
        self.calls.append(("dependency", path))
        if path in self.fail_dependency:
            self.return_code = ReturnCode.FAILED_TO_RUN_GIT_COMMAND
        else:
            self.return_code = ReturnCode.SUCCESS
        return self.return_code

    def visit_project(self, directory, config):
        self.calls.append(("project", directory))
        if directory in self.fail_project:
            self.return_code = ReturnCode.FAILED_TO_RUN_NUGET_COMMAND
        else:
            self.return_code = ReturnCode.SUCCESS
        return self.return_code

    def paths(self, kind):
        return [path for call_kind, path in self.calls if call_kind == kind]


def make_config(name, *directories, packages_dir=None):
    """Build a configuration whose dependencies point at the given directories."""
    dependencies = tuple(Dependency(directory=d) for d in directories)
    if packages_dir:
        return GitDependFile(name=name, dependencies=dependencies, packages=PackageSettings(directory=packages_dir))
    return GitDependFile(name=name, dependencies=dependencies)


def make_repo(path: Path, config=None) -> Path:
    """Create a directory that looks like a git checkout, with an optional GitDepend.yml."""
    path.mkdir(parents=True, exist_ok=True)
    (path / ".git").mkdir(exist_ok=True)
    if config is not None:
        (path / "GitDepend.yml").write_text(yaml.safe_dump(config), encoding="utf-8")
    return path


@pytest.fixture
def graph_root(tmp_path):
    """Absolute base directory for in-memory graphs."""
    return normalize_path(str(tmp_path / "graph"))


@pytest.fixture
def mock_git():
    git = MagicMock(spec=GitAdapter)
    for method in ("checkout", "create_branch", "clone", "add", "status", "clean",
                   "delete_branch", "list_all_branches", "list_merged_branches", "commit"):
        getattr(git, method).return_value = ReturnCode.SUCCESS
    git.current_branch.return_value = "main"
    return git


@pytest.fixture
def mock_package_manager():
    manager = MagicMock(spec=PackageManagerAdapter)
    manager.solution_pattern = "*.sln"
    manager.package_pattern = "*.nupkg"
    manager.tracked_files = ("*.csproj", "*/packages.config")
    manager.restore.return_value = ReturnCode.SUCCESS
    manager.update.return_value = ReturnCode.SUCCESS
    return manager


@pytest.fixture(autouse=True)
def isolated_settings(tmp_path, monkeypatch):
    """Keep user settings and the package cache out of the real home directory."""
    monkeypatch.setenv("GITDEPEND_CONFIG_DIR", str(tmp_path / "settings"))
    monkeypatch.setenv("APPDATA", str(tmp_path / "appdata"))
