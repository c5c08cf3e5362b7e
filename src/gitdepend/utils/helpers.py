"""Helper utility functions for GitDepend."""

import os
import shutil
from pathlib import Path


def is_tool_available(tool_name):
    """Check if a command-line tool is available.

    Args:
        tool_name (str): Name of the tool to check.

    Returns:
        bool: True if the tool is available, False otherwise.
    """
    return shutil.which(tool_name) is not None


def get_app_data_dir():
    """Get the per-user application data folder.

    Uses APPDATA on Windows, then XDG_DATA_HOME, then ~/.local/share.

    Returns:
        str: Absolute path of the application data folder.
    """
    app_data = os.environ.get("APPDATA") or os.environ.get("XDG_DATA_HOME")
    if app_data:
        return os.path.abspath(app_data)
    return os.path.join(os.path.expanduser("~"), ".local", "share")


def normalize_path(path):
    """Get the normalized absolute form of a path, used as its identity."""
    return os.path.normpath(os.path.abspath(path))


def find_repository_root(directory):
    """Find the working tree root of the git repository containing a directory.

    Args:
        directory (str): Any directory inside the working tree.

    Returns:
        str: Normalized working tree root, or None if the directory is not in a repository.
    """
    current = Path(normalize_path(directory))
    for candidate in (current, *current.parents):
        # .git is a directory in clones and a file in worktrees and submodules
        if (candidate / ".git").exists():
            return str(candidate)
    return None
