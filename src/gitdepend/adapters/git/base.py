"""Base adapter interface for version control clients."""

from abc import ABC, abstractmethod
from typing import Optional

from ...models.return_code import ReturnCode


class GitAdapter(ABC):
    """Base adapter for the version control commands GitDepend runs.

    Every command runs in ``working_directory``.
    """

    def __init__(self, working_directory: Optional[str] = None):
        self.working_directory = working_directory

    @abstractmethod
    def checkout(self, branch: str, create: bool = False) -> ReturnCode:
        """Switch to a branch, creating it first if requested."""
        pass

    @abstractmethod
    def create_branch(self, branch: str) -> ReturnCode:
        """Create a branch without switching to it."""
        pass

    @abstractmethod
    def clone(self, url: str, directory: str, branch: Optional[str] = None) -> ReturnCode:
        """Clone a repository into a directory."""
        pass

    @abstractmethod
    def add(self, *paths: str) -> ReturnCode:
        """Stage files matching the given paths."""
        pass

    @abstractmethod
    def status(self) -> ReturnCode:
        """Display the working tree status."""
        pass

    @abstractmethod
    def clean(self, *arguments: str) -> ReturnCode:
        """Remove untracked files."""
        pass

    @abstractmethod
    def delete_branch(self, branch: str, force: bool = False) -> ReturnCode:
        """Delete a branch."""
        pass

    @abstractmethod
    def list_all_branches(self) -> ReturnCode:
        """Display every local branch."""
        pass

    @abstractmethod
    def list_merged_branches(self) -> ReturnCode:
        """Display the branches merged into the current one."""
        pass

    @abstractmethod
    def current_branch(self) -> Optional[str]:
        """Get the checked out branch name, None on a detached head."""
        pass

    @abstractmethod
    def commit(self, message: str) -> ReturnCode:
        """Commit the staged changes with a message."""
        pass
