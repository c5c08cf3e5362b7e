"""Tests for package file name parsing."""

import pytest

from gitdepend.deps.package_reference import PackageReference, parse_package_file_name


@pytest.mark.parametrize("name,expected", [
    ("MyLib.1.2.3", PackageReference("MyLib", "1.2.3")),
    ("MyLib.1.2.3-beta1", PackageReference("MyLib", "1.2.3-beta1")),
    ("MyLib.1.2", PackageReference("MyLib", "1.2")),
    ("Company.Core.10.0.25", PackageReference("Company.Core", "10.0.25")),
])
def test_parses_id_and_version(name, expected):
    assert parse_package_file_name(name) == expected


@pytest.mark.parametrize("name", ["MyLib", "", "MyLib.1", ".1.2.3", "MyLib.latest"])
def test_names_without_a_version_are_rejected(name):
    assert parse_package_file_name(name) is None


def test_string_form_matches_file_stem():
    assert str(PackageReference("MyLib", "1.2.3-beta1")) == "MyLib.1.2.3-beta1"
