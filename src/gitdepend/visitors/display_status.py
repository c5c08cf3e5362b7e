"""Visitor that displays the git status of every dependency."""

from typing import Iterable, Optional

from .base import NamedDependenciesVisitor
from ..adapters.git.base import GitAdapter
from ..models.gitdepend_file import Dependency
from ..models.return_code import ReturnCode
from ..utils.console import _rich_banner, _rich_echo


class DisplayStatusVisitor(NamedDependenciesVisitor):
    """Runs ``git status`` in each whitelisted dependency."""

    def __init__(self, git: GitAdapter, whitelist: Optional[Iterable[str]] = None):
        super().__init__(whitelist)
        self.git = git

    def on_visit_dependency(self, directory: str, dependency: Dependency) -> ReturnCode:
        path = dependency.resolve_directory(directory)
        _rich_banner()
        _rich_echo(f"Status of {path}", bold=True)
        self.git.working_directory = path
        return self.git.status()
