"""Local package cache acting as an offline package feed."""

import os
import shutil
from pathlib import Path
from typing import List, Optional

from ..utils.console import _rich_error
from ..utils.helpers import get_app_data_dir


APP_DIR_NAME = "GitDepend"
CACHE_DIR_NAME = "cache"


class ArtifactCache:
    """Resolves the per-user cache directory and stores package artifacts in it."""

    def __init__(self, root: Optional[str] = None):
        """Initialize the cache.

        Args:
            root: Folder holding the cache directory. Defaults to the
                GitDepend folder in the user's application data.
        """
        self.root = root

    def get_cache_directory(self) -> Optional[str]:
        """Get the cache directory, creating it if needed.

        Returns:
            str: Path of the cache directory, or None if it could not be created
        """
        root = self.root or os.path.join(get_app_data_dir(), APP_DIR_NAME)
        cache_dir = os.path.join(root, CACHE_DIR_NAME)
        if os.path.isdir(cache_dir):
            return cache_dir

        try:
            os.makedirs(cache_dir, exist_ok=True)
        except OSError as e:
            _rich_error(f"Could not create the package cache {cache_dir}: {e}", symbol="error")
            return None

        return cache_dir

    def store(self, package_file: str, cache_dir: str) -> str:
        """Copy a package file into the cache, replacing any file with the same name."""
        destination = os.path.join(cache_dir, os.path.basename(package_file))
        shutil.copyfile(package_file, destination)
        return destination

    def list_packages(self, pattern: str = "*.nupkg") -> List[str]:
        """List the package files currently in the cache."""
        cache_dir = self.get_cache_directory()
        if not cache_dir:
            return []
        return sorted(path.name for path in Path(cache_dir).glob(pattern) if path.is_file())
