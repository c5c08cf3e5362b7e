"""Base visitor interfaces invoked by the dependency traversal."""

from abc import ABC, abstractmethod
from typing import Iterable, Optional

from ..models.gitdepend_file import Dependency, GitDependFile
from ..models.return_code import ReturnCode


class Visitor(ABC):
    """Behavior run at each node of a dependency graph walk.

    ``visit_dependency`` runs before the traversal descends into a
    dependency, ``visit_project`` after every dependency of a project has
    been handled. ``return_code`` holds the most recent status.
    """

    def __init__(self):
        self.return_code = ReturnCode.SUCCESS

    @abstractmethod
    def visit_dependency(self, directory: str, dependency: Dependency) -> ReturnCode:
        """Visit a project dependency.

        Args:
            directory: Directory of the project declaring the dependency
            dependency: The dependency to visit

        Returns:
            ReturnCode: SUCCESS to keep walking, anything else aborts the pass
        """
        pass

    @abstractmethod
    def visit_project(self, directory: str, config: Optional[GitDependFile]) -> ReturnCode:
        """Visit a project after all of its dependencies.

        Args:
            directory: Directory of the project
            config: The project configuration, may be None

        Returns:
            ReturnCode: SUCCESS to keep walking, anything else aborts the pass
        """
        pass


class NamedDependenciesVisitor(Visitor):
    """Visitor that only handles dependencies named in a whitelist.

    An empty or missing whitelist lets every dependency through.
    """

    def __init__(self, whitelist: Optional[Iterable[str]] = None):
        super().__init__()
        self.whitelist = [name.casefold() for name in (whitelist or []) if name]

    def is_whitelisted(self, name: Optional[str]) -> bool:
        if not self.whitelist:
            return True
        return bool(name) and name.casefold() in self.whitelist

    def visit_dependency(self, directory: str, dependency: Dependency) -> ReturnCode:
        config = dependency.configuration
        if not self.is_whitelisted(config.name if config else None):
            return ReturnCode.SUCCESS

        self.return_code = self.on_visit_dependency(directory, dependency)
        return self.return_code

    def visit_project(self, directory: str, config: Optional[GitDependFile]) -> ReturnCode:
        self.return_code = self.on_visit_project(directory, config)
        return self.return_code

    @abstractmethod
    def on_visit_dependency(self, directory: str, dependency: Dependency) -> ReturnCode:
        """Handle a whitelisted dependency."""
        pass

    def on_visit_project(self, directory: str, config: Optional[GitDependFile]) -> ReturnCode:
        return ReturnCode.SUCCESS
