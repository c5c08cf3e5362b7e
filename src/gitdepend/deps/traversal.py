"""Depth-first dependency graph traversal driving a visitor."""

from typing import Optional, Set

from ..models.gitdepend_file import GitDependFile
from ..models.return_code import ReturnCode
from ..utils.console import _rich_error
from ..utils.helpers import normalize_path
from ..visitors.base import Visitor
from .config_loader import ConfigLoader


class DependencyVisitorAlgorithm:
    """Walks a project's dependency graph depth-first, calling a visitor at each node.

    Each directory is visited at most once per pass, which makes cyclic and
    diamond shaped graphs safe. The visited set survives between calls to
    ``traverse_dependencies``: callers running more than one pass with the
    same instance must call ``reset()`` in between, otherwise the next pass
    sees the whole graph as visited and does nothing.
    """

    def __init__(self, loader: Optional[ConfigLoader] = None):
        self.loader = loader or ConfigLoader()
        self._visited: Set[str] = set()

    @property
    def visited(self) -> Set[str]:
        """Directories visited since the last reset."""
        return set(self._visited)

    def reset(self) -> None:
        """Forget every directory visited so far."""
        self._visited.clear()

    def traverse_dependencies(self, visitor: Visitor, directory: str) -> ReturnCode:
        """Walk the dependency graph rooted at a directory.

        Args:
            visitor: Visitor invoked at every dependency and project
            directory: Root project directory

        Returns:
            ReturnCode: The visitor's terminal status; the first failure aborts the pass
        """
        config, root, code = self.loader.load_from_directory(directory)
        if code != ReturnCode.SUCCESS:
            visitor.return_code = code
            return code

        root = normalize_path(root)
        if root in self._visited:
            return ReturnCode.SUCCESS
        self._visited.add(root)

        return self._traverse(visitor, root, config)

    def _traverse(self, visitor: Visitor, directory: str, config: Optional[GitDependFile]) -> ReturnCode:
        for dependency in (config.dependencies if config else ()):
            dependency_dir = dependency.resolve_directory(directory)
            if dependency_dir in self._visited:
                continue
            self._visited.add(dependency_dir)

            code = visitor.visit_dependency(directory, dependency)
            if code != ReturnCode.SUCCESS:
                return self._abort(visitor, code)

            dependency_config, resolved_dir, code = self.loader.load_from_directory(dependency_dir)
            if code != ReturnCode.SUCCESS:
                return self._abort(visitor, code)
            # A dependency must be a checkout of its own, not a folder inside another one
            if normalize_path(resolved_dir) != dependency_dir:
                _rich_error(f"Dependency {dependency_dir} is not the root of a git repository "
                            f"(found {resolved_dir})", symbol="error")
                return self._abort(visitor, ReturnCode.GIT_REPOSITORY_NOT_FOUND)
            dependency.attach_configuration(dependency_config)

            code = self._traverse(visitor, dependency_dir, dependency_config)
            if code != ReturnCode.SUCCESS:
                return code

        if config is None:
            return ReturnCode.SUCCESS

        code = visitor.visit_project(directory, config)
        if code != ReturnCode.SUCCESS:
            return self._abort(visitor, code)
        return code

    @staticmethod
    def _abort(visitor: Visitor, code: ReturnCode) -> ReturnCode:
        visitor.return_code = code
        return code
