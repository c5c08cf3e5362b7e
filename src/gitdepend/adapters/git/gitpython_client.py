"""Git client built on GitPython."""

import os
import re
import tempfile
from typing import Optional

from git import Git, Repo
from git.exc import GitError

from .base import GitAdapter
from ...models.return_code import ReturnCode
from ...utils.console import _rich_echo, _rich_error


class GitPythonClient(GitAdapter):
    """Runs git commands in the working directory and echoes their output."""

    def __init__(self, working_directory: Optional[str] = None):
        super().__init__(working_directory)
        self.git_env = self._setup_git_environment()

    def _setup_git_environment(self):
        """Set up the environment for git commands.

        Returns:
            Dict containing environment variables for Git operations
        """
        env = dict(os.environ)
        # Prevent interactive credential prompts from hanging a traversal
        env['GIT_TERMINAL_PROMPT'] = '0'
        return env

    def _sanitize_git_error(self, error_message: str) -> str:
        """Remove credentials embedded in repository URLs from an error message."""
        return re.sub(r'://[^@\s/]+@', '://***@', error_message)

    def _run(self, *args: str) -> ReturnCode:
        """Run a git command in the working directory.

        Returns:
            ReturnCode: SUCCESS, or FAILED_TO_RUN_GIT_COMMAND if git failed
        """
        try:
            output = Git(self.working_directory).execute(["git", *args], env=self.git_env)
        except GitError as e:
            _rich_error(self._sanitize_git_error(str(e)), symbol="error")
            return ReturnCode.FAILED_TO_RUN_GIT_COMMAND

        if output:
            _rich_echo(output)
        return ReturnCode.SUCCESS

    def checkout(self, branch: str, create: bool = False) -> ReturnCode:
        if create:
            return self._run("checkout", "-b", branch)
        return self._run("checkout", branch)

    def create_branch(self, branch: str) -> ReturnCode:
        return self._run("branch", branch)

    def clone(self, url: str, directory: str, branch: Optional[str] = None) -> ReturnCode:
        clone_kwargs = {'branch': branch} if branch else {}
        try:
            Repo.clone_from(url, directory, env=self.git_env, **clone_kwargs)
        except GitError as e:
            _rich_error(f"Failed to clone {url}: {self._sanitize_git_error(str(e))}", symbol="error")
            return ReturnCode.FAILED_TO_RUN_GIT_COMMAND
        return ReturnCode.SUCCESS

    def add(self, *paths: str) -> ReturnCode:
        return self._run("add", "--", *paths)

    def status(self) -> ReturnCode:
        return self._run("status")

    def clean(self, *arguments: str) -> ReturnCode:
        return self._run("clean", *arguments)

    def delete_branch(self, branch: str, force: bool = False) -> ReturnCode:
        return self._run("branch", "-D" if force else "-d", branch)

    def list_all_branches(self) -> ReturnCode:
        return self._run("branch")

    def list_merged_branches(self) -> ReturnCode:
        return self._run("branch", "--merged")

    def current_branch(self) -> Optional[str]:
        try:
            return Repo(self.working_directory).active_branch.name
        except TypeError:
            # Detached HEAD
            return None
        except GitError as e:
            _rich_error(str(e), symbol="error")
            return None

    def commit(self, message: str) -> ReturnCode:
        """Commit the staged changes.

        The message goes through a temporary file so multi-line messages
        survive intact. The file is removed whether the commit succeeds or not.
        """
        fd, message_file = tempfile.mkstemp(prefix="gitdepend-commit-", suffix=".txt")
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                f.write(message)
            return self._run("commit", "-F", message_file)
        finally:
            if os.path.exists(message_file):
                os.remove(message_file)
