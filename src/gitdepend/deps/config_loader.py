"""Loads GitDepend configuration for a checkout directory."""

import os
from pathlib import Path
from typing import Optional, Tuple

from ..models.gitdepend_file import GitDependFile
from ..models.return_code import ReturnCode
from ..utils.console import _rich_error
from ..utils.helpers import find_repository_root, normalize_path


LoadResult = Tuple[Optional[GitDependFile], Optional[str], ReturnCode]


class ConfigLoader:
    """Finds the repository of a directory and parses its GitDepend configuration."""

    def load_from_directory(self, directory: str) -> LoadResult:
        """Load the configuration of the repository containing a directory.

        Args:
            directory: Directory inside a project checkout

        Returns:
            Tuple of (configuration, resolved repository root, return code).
            The configuration and root are None unless the code is SUCCESS.
        """
        if not directory or not os.path.isdir(directory):
            _rich_error(f"Directory not found: {directory}", symbol="error")
            return None, None, ReturnCode.DIRECTORY_DOES_NOT_EXIST

        root = find_repository_root(directory)
        if root is None:
            _rich_error(f"{normalize_path(directory)} is not a git repository", symbol="error")
            return None, None, ReturnCode.GIT_REPOSITORY_NOT_FOUND

        try:
            config = GitDependFile.from_directory(Path(root))
        except (ValueError, OSError) as e:
            _rich_error(f"Failed to load GitDepend configuration in {root}: {e}", symbol="error")
            return None, root, ReturnCode.INVALID_CONFIGURATION

        return config, root, ReturnCode.SUCCESS
