"""Visitor that puts every dependency checkout on its declared branch."""

import os
from typing import Optional

from .base import Visitor
from ..adapters.git.base import GitAdapter
from ..models.gitdepend_file import Dependency, GitDependFile
from ..models.return_code import ReturnCode
from ..utils.console import _rich_error, _rich_info
from ..utils.helpers import find_repository_root


class CheckOutBranchVisitor(Visitor):
    """Clones missing dependencies and checks out their declared branch."""

    def __init__(self, git: GitAdapter, create: bool = False):
        """Initialize the visitor.

        Args:
            git: Git client used for clone and checkout
            create: Create the declared branch instead of switching to an existing one
        """
        super().__init__()
        self.git = git
        self.create = create

    def visit_dependency(self, directory: str, dependency: Dependency) -> ReturnCode:
        dependency_dir = dependency.resolve_directory(directory)

        if not os.path.isdir(dependency_dir):
            if not dependency.url:
                _rich_error(f"Dependency directory not found: {dependency_dir}", symbol="error")
                self.return_code = ReturnCode.DIRECTORY_DOES_NOT_EXIST
                return self.return_code

            _rich_info(f"Cloning {dependency.url} into {dependency_dir}", symbol="running")
            self.return_code = self.git.clone(dependency.url, dependency_dir, dependency.branch)
            if self.return_code != ReturnCode.SUCCESS:
                return self.return_code

        if find_repository_root(dependency_dir) != dependency_dir:
            _rich_error(f"Dependency {dependency_dir} is not the root of a git repository", symbol="error")
            self.return_code = ReturnCode.GIT_REPOSITORY_NOT_FOUND
            return self.return_code

        if not dependency.branch:
            self.return_code = ReturnCode.SUCCESS
            return self.return_code

        self.git.working_directory = dependency_dir
        if self.git.current_branch() == dependency.branch:
            self.return_code = ReturnCode.SUCCESS
            return self.return_code

        _rich_info(f"Checking out {dependency.branch} in {dependency_dir}", symbol="branch")
        self.return_code = self.git.checkout(dependency.branch, self.create)
        return self.return_code

    def visit_project(self, directory: str, config: Optional[GitDependFile]) -> ReturnCode:
        self.return_code = ReturnCode.SUCCESS
        return self.return_code
