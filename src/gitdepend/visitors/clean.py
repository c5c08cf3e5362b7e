"""Visitor that cleans untracked files from every dependency."""

from typing import Iterable, Optional, Sequence

from .base import NamedDependenciesVisitor
from ..adapters.git.base import GitAdapter
from ..models.gitdepend_file import Dependency
from ..models.return_code import ReturnCode
from ..utils.console import _rich_info


class CleanVisitor(NamedDependenciesVisitor):
    """Runs ``git clean`` with the given arguments in each whitelisted dependency."""

    def __init__(self, git: GitAdapter, arguments: Sequence[str] = (), whitelist: Optional[Iterable[str]] = None):
        super().__init__(whitelist)
        self.git = git
        self.arguments = tuple(arguments)

    def on_visit_dependency(self, directory: str, dependency: Dependency) -> ReturnCode:
        path = dependency.resolve_directory(directory)
        _rich_info(f"Cleaning {path}", symbol="gear")
        self.git.working_directory = path
        return self.git.clean(*self.arguments)
