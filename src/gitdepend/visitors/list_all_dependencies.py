"""Visitor that collects every dependency in the graph."""

import os
from typing import Iterable, List, Optional, Tuple

from .base import NamedDependenciesVisitor
from ..models.gitdepend_file import Dependency
from ..models.return_code import ReturnCode


class ListAllDependenciesVisitor(NamedDependenciesVisitor):
    """Records the name and directory of each dependency in visit order."""

    def __init__(self, whitelist: Optional[Iterable[str]] = None):
        super().__init__(whitelist)
        self.dependencies: List[Tuple[str, str]] = []

    @property
    def names(self) -> List[str]:
        return [name for name, _ in self.dependencies]

    def on_visit_dependency(self, directory: str, dependency: Dependency) -> ReturnCode:
        path = dependency.resolve_directory(directory)
        config = dependency.configuration
        name = config.name if config else os.path.basename(path)
        self.dependencies.append((name, path))
        return ReturnCode.SUCCESS
