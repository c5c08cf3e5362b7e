"""Version lookup for GitDepend."""

import re
from importlib import metadata
from pathlib import Path
from typing import Optional

# Set when building a release binary
__BUILD_VERSION__ = None

_PYPROJECT = Path(__file__).resolve().parents[2] / "pyproject.toml"
_VERSION_LINE = re.compile(r'^version\s*=\s*["\']([^"\']+)["\']', re.MULTILINE)


def _read_pyproject_version(pyproject: Path) -> Optional[str]:
    """Get the project version declared in a pyproject.toml, if any."""
    try:
        content = pyproject.read_text(encoding='utf-8')
    except OSError:
        return None

    match = _VERSION_LINE.search(content)
    return match.group(1) if match else None


def get_version() -> str:
    """Get the GitDepend version.

    Tries the build constant, then the installed distribution, then the
    pyproject.toml of a source checkout.

    Returns:
        str: Version string, "unknown" if none could be found
    """
    if __BUILD_VERSION__:
        return __BUILD_VERSION__

    try:
        return metadata.version("gitdepend")
    except metadata.PackageNotFoundError:
        pass

    return _read_pyproject_version(_PYPROJECT) or "unknown"


__version__ = get_version()
