"""Visitors that manage branches across every dependency."""

from typing import Iterable, Optional

from .base import NamedDependenciesVisitor
from ..adapters.git.base import GitAdapter
from ..models.gitdepend_file import Dependency
from ..models.return_code import ReturnCode
from ..utils.console import _rich_echo, _rich_info


class CreateBranchVisitor(NamedDependenciesVisitor):
    """Creates a branch in each whitelisted dependency."""

    def __init__(self, git: GitAdapter, branch: str, whitelist: Optional[Iterable[str]] = None):
        super().__init__(whitelist)
        self.git = git
        self.branch = branch

    def on_visit_dependency(self, directory: str, dependency: Dependency) -> ReturnCode:
        path = dependency.resolve_directory(directory)
        _rich_info(f"Creating branch {self.branch} in {path}", symbol="branch")
        self.git.working_directory = path
        return self.git.create_branch(self.branch)


class DeleteBranchVisitor(NamedDependenciesVisitor):
    """Deletes a branch from each whitelisted dependency."""

    def __init__(self, git: GitAdapter, branch: str, force: bool = False,
                 whitelist: Optional[Iterable[str]] = None):
        super().__init__(whitelist)
        self.git = git
        self.branch = branch
        self.force = force

    def on_visit_dependency(self, directory: str, dependency: Dependency) -> ReturnCode:
        path = dependency.resolve_directory(directory)
        _rich_info(f"Deleting branch {self.branch} in {path}", symbol="branch")
        self.git.working_directory = path
        return self.git.delete_branch(self.branch, self.force)


class ListBranchesVisitor(NamedDependenciesVisitor):
    """Lists the branches (or only the merged ones) of each whitelisted dependency."""

    def __init__(self, git: GitAdapter, merged: bool = False, whitelist: Optional[Iterable[str]] = None):
        super().__init__(whitelist)
        self.git = git
        self.merged = merged

    def on_visit_dependency(self, directory: str, dependency: Dependency) -> ReturnCode:
        path = dependency.resolve_directory(directory)
        _rich_echo(path, bold=True)
        self.git.working_directory = path
        if self.merged:
            return self.git.list_merged_branches()
        return self.git.list_all_branches()
