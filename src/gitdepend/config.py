"""User settings management for GitDepend."""

import os
import json


DEFAULT_SETTINGS = {
    "package_manager": "nuget",
    "cache_dir": None,
}


def get_config_dir():
    """Get the settings directory, honoring GITDEPEND_CONFIG_DIR."""
    return os.environ.get("GITDEPEND_CONFIG_DIR") or os.path.expanduser("~/.gitdepend")


def get_config_file():
    return os.path.join(get_config_dir(), "config.json")


def ensure_config_exists():
    """Ensure the settings directory and file exist."""
    config_dir = get_config_dir()
    if not os.path.exists(config_dir):
        os.makedirs(config_dir)

    config_file = get_config_file()
    if not os.path.exists(config_file):
        with open(config_file, "w") as f:
            json.dump(DEFAULT_SETTINGS, f, indent=2)


def get_config():
    """Get the current settings.

    Returns:
        dict: Current settings, with defaults for missing keys.
    """
    ensure_config_exists()
    with open(get_config_file(), "r") as f:
        config = json.load(f)

    return {**DEFAULT_SETTINGS, **config}


def update_config(updates):
    """Update the settings with new values.

    Args:
        updates (dict): Dictionary of settings to update.
    """
    config = get_config()
    config.update(updates)

    with open(get_config_file(), "w") as f:
        json.dump(config, f, indent=2)


def get_cache_dir_override():
    """Get the artifact cache root configured by the user.

    Returns:
        str: Configured cache root, or None to use the application data folder.
    """
    value = get_config().get("cache_dir")
    return os.path.expanduser(value) if value else None


def get_package_manager_type():
    """Get the package manager used to restore and update solutions.

    Returns:
        str: Package manager type.
    """
    return get_config().get("package_manager") or "nuget"
