"""Tests for the local package cache."""

import os

from gitdepend.deps.artifact_cache import APP_DIR_NAME, CACHE_DIR_NAME, ArtifactCache


def test_cache_directory_is_created_once(tmp_path):
    cache = ArtifactCache(str(tmp_path / "root"))

    first = cache.get_cache_directory()
    second = cache.get_cache_directory()

    assert first == second == os.path.join(str(tmp_path / "root"), CACHE_DIR_NAME)
    assert os.path.isdir(first)


def test_default_root_is_in_application_data(tmp_path):
    cache_dir = ArtifactCache().get_cache_directory()

    assert cache_dir == os.path.join(str(tmp_path / "appdata"), APP_DIR_NAME, CACHE_DIR_NAME)


def test_uncreatable_cache_directory_returns_none(tmp_path):
    blocker = tmp_path / "root"
    blocker.write_text("not a directory", encoding="utf-8")

    assert ArtifactCache(str(blocker)).get_cache_directory() is None


def test_store_replaces_existing_package(tmp_path):
    cache = ArtifactCache(str(tmp_path / "root"))
    cache_dir = cache.get_cache_directory()
    package = tmp_path / "MyLib.1.0.0.nupkg"
    package.write_bytes(b"v1")
    cache.store(str(package), cache_dir)
    package.write_bytes(b"v2")

    destination = cache.store(str(package), cache_dir)

    with open(destination, "rb") as f:
        assert f.read() == b"v2"


def test_list_packages(tmp_path):
    cache = ArtifactCache(str(tmp_path / "root"))
    cache_dir = cache.get_cache_directory()
    for name in ("B.1.0.0.nupkg", "A.2.0.0.nupkg", "notes.txt"):
        with open(os.path.join(cache_dir, name), "w") as f:
            f.write("x")

    assert cache.list_packages() == ["A.2.0.0.nupkg", "B.1.0.0.nupkg"]
