"""Tests for user settings and service creation."""

import json
import os

import pytest

from gitdepend.config import (
    DEFAULT_SETTINGS, get_cache_dir_override, get_config, get_config_file,
    get_package_manager_type, update_config
)
from gitdepend.adapters.package_manager.nuget import NugetPackageManager
from gitdepend.factory import create_services


def test_defaults_are_written_on_first_use(tmp_path):
    assert get_config() == DEFAULT_SETTINGS
    assert get_config_file() == os.path.join(str(tmp_path / "settings"), "config.json")
    assert os.path.isfile(get_config_file())


def test_update_persists(tmp_path):
    update_config({"cache_dir": "~/packages"})

    with open(get_config_file()) as f:
        assert json.load(f)["cache_dir"] == "~/packages"
    assert get_cache_dir_override() == os.path.expanduser("~/packages")


def test_missing_keys_fall_back_to_defaults():
    os.makedirs(os.path.dirname(get_config_file()), exist_ok=True)
    with open(get_config_file(), "w") as f:
        json.dump({"cache_dir": "/var/cache"}, f)

    assert get_package_manager_type() == "nuget"
    assert get_cache_dir_override() == "/var/cache"


def test_services_follow_settings(tmp_path):
    update_config({"cache_dir": str(tmp_path / "custom")})

    services = create_services()

    assert isinstance(services.package_manager, NugetPackageManager)
    assert services.cache.root == str(tmp_path / "custom")


def test_unknown_package_manager_is_rejected():
    update_config({"package_manager": "npm"})

    with pytest.raises(ValueError):
        create_services()
