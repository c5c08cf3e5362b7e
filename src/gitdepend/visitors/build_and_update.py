"""Visitor that rebuilds dependencies and updates projects to consume their artifacts."""

import os
from pathlib import Path
from typing import Iterable, List, Optional, Set

from .base import Visitor
from ..adapters.git.base import GitAdapter
from ..adapters.package_manager.base import PackageManagerAdapter
from ..core.process import ProcessRunner
from ..deps.artifact_cache import ArtifactCache
from ..deps.config_loader import ConfigLoader
from ..deps.package_reference import parse_package_file_name
from ..models.gitdepend_file import Dependency, GitDependFile
from ..models.return_code import ReturnCode
from ..utils.console import (
    _rich_banner, _rich_echo, _rich_error, _rich_info, _rich_warning
)


COMMIT_MESSAGE_HEADER = "GitDepend: updating dependencies"


def _contains_name(names: List[str], name: Optional[str]) -> bool:
    return bool(name) and name.casefold() in names


class BuildAndUpdateDependenciesVisitor(Visitor):
    """Builds dependencies and points their dependents at the fresh packages.

    Before descending into a dependency the visitor optionally runs its
    build script, then copies its package artifacts into the local cache.
    After a project's dependencies are handled, the project's solutions are
    restored, updated to the cached package versions and committed.
    """

    def __init__(self, dependencies_to_build: Iterable[str], projects_to_update: Iterable[str],
                 loader: ConfigLoader, git: GitAdapter, package_manager: PackageManagerAdapter,
                 process_runner: ProcessRunner, cache: ArtifactCache):
        super().__init__()
        self.dependencies_to_build = [name.casefold() for name in dependencies_to_build if name]
        self.projects_to_update = [name.casefold() for name in projects_to_update if name]
        self.loader = loader
        self.git = git
        self.package_manager = package_manager
        self.process_runner = process_runner
        self.cache = cache
        self.updated_packages: Set[str] = set()

    def visit_dependency(self, directory: str, dependency: Dependency) -> ReturnCode:
        config, dependency_dir, code = self.loader.load_from_directory(dependency.resolve_directory(directory))
        if code != ReturnCode.SUCCESS:
            self.return_code = code
            return code

        cache_dir = self.cache.get_cache_directory()
        if not cache_dir:
            self.return_code = ReturnCode.COULD_NOT_CREATE_CACHE_DIRECTORY
            return self.return_code

        exit_code = 0
        if _contains_name(self.dependencies_to_build, config.name):
            exit_code = self._run_build(config, dependency_dir)

        artifacts_dir = os.path.normpath(os.path.join(dependency_dir, config.packages.directory))
        if not os.path.isdir(artifacts_dir):
            _rich_error(f"Artifacts directory not found: {artifacts_dir}", symbol="error")
            self.return_code = ReturnCode.FAILED_TO_LOCATE_ARTIFACTS_DIR
            return self.return_code

        for package_file in sorted(Path(artifacts_dir).glob(self.package_manager.package_pattern)):
            if package_file.is_file():
                self.cache.store(str(package_file), cache_dir)

        self.return_code = ReturnCode.SUCCESS if exit_code == 0 else ReturnCode.FAILED_TO_RUN_BUILD_SCRIPT
        return self.return_code

    def _run_build(self, config: GitDependFile, dependency_dir: str) -> int:
        """Run a dependency's build script and get its exit code."""
        script = os.path.join(dependency_dir, config.build.script)
        _rich_info(f"Building {config.name}: {script} {config.build.arguments}".rstrip(), symbol="running")
        try:
            exit_code = self.process_runner.run(script, config.build.arguments, dependency_dir)
        except OSError as e:
            _rich_error(f"Could not start build script {script}: {e}", symbol="error")
            return -1

        if exit_code != 0:
            _rich_error(f"Build script for {config.name} exited with code {exit_code}", symbol="error")
        return exit_code

    def visit_project(self, directory: str, config: Optional[GitDependFile]) -> ReturnCode:
        if config is None or not _contains_name(self.projects_to_update, config.name):
            self.return_code = ReturnCode.SUCCESS
            return self.return_code

        if not directory or not os.path.isdir(directory):
            _rich_error(f"Directory not found: {directory}", symbol="error")
            self.return_code = ReturnCode.DIRECTORY_DOES_NOT_EXIST
            return self.return_code

        solutions = sorted(str(path) for path in Path(directory).rglob(self.package_manager.solution_pattern))
        self.package_manager.working_directory = directory

        for solution in solutions:
            code = self.package_manager.restore(solution)
            if code != ReturnCode.SUCCESS:
                self.return_code = code
                return code

        cache_dir = self.cache.get_cache_directory()
        if not cache_dir:
            self.return_code = ReturnCode.COULD_NOT_CREATE_CACHE_DIRECTORY
            return self.return_code

        commit_message = [COMMIT_MESSAGE_HEADER, ""]
        for solution in solutions:
            commit_message.append(os.path.relpath(solution, directory))

            for dependency in config.dependencies:
                code = self._update_solution(solution, directory, dependency, cache_dir, commit_message)
                if code != ReturnCode.SUCCESS:
                    self.return_code = code
                    return code

        self._commit(directory, "\n".join(commit_message) + "\n")
        self.return_code = ReturnCode.SUCCESS
        return self.return_code

    def _update_solution(self, solution: str, directory: str, dependency: Dependency,
                         cache_dir: str, commit_message: List[str]) -> ReturnCode:
        """Pin a solution to every package a dependency produced."""
        dependency_config, dependency_dir, code = self.loader.load_from_directory(
            dependency.resolve_directory(directory))
        if code != ReturnCode.SUCCESS or dependency_config is None:
            _rich_warning(f"Skipping {dependency}: no configuration found", symbol="warning")
            return ReturnCode.SUCCESS

        artifacts_dir = os.path.normpath(os.path.join(dependency_dir, dependency_config.packages.directory))
        if not os.path.isdir(artifacts_dir):
            return ReturnCode.SUCCESS

        for package_file in sorted(Path(artifacts_dir).glob(self.package_manager.package_pattern)):
            reference = parse_package_file_name(package_file.stem)
            if reference is None:
                continue

            commit_message.append(f"* {reference}")
            code = self.package_manager.update(solution, reference.id, reference.version, cache_dir)
            if code != ReturnCode.SUCCESS:
                return code
            self.updated_packages.add(str(reference))

        return ReturnCode.SUCCESS

    def _commit(self, directory: str, message: str) -> None:
        _rich_banner()
        _rich_echo(f"Making update commit on {directory}", bold=True)
        self.git.working_directory = directory
        if self.git.add(*self.package_manager.tracked_files) != ReturnCode.SUCCESS:
            _rich_warning(f"Could not stage updated package references in {directory}", symbol="warning")
        _rich_banner()
        self.git.status()

        if self.git.commit(message) != ReturnCode.SUCCESS:
            _rich_warning(f"Could not commit updated package references in {directory}", symbol="warning")
