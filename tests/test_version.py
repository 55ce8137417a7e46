"""Tests for the ipwatch version information."""

from datetime import datetime

import ipwatch
from ipwatch.version.ipwatch_version import IPWATCH_VERSION, Version


def test_version_methods():
    """Test Version class methods."""
    v = Version(major=1, minor=2, patch=3, date=datetime(2023, 1, 1))

    assert str(v) == "1.2.3"
    assert v.semver() == (1, 2, 3)
    assert v.date_string("%Y") == "2023"
    assert v.full_version() == "1.2.3 (released 2023-01-01)"


def test_package_version_matches_constant():
    """The package exposes the module-level version."""
    assert isinstance(IPWATCH_VERSION, Version)
    assert ipwatch.__version__ == str(IPWATCH_VERSION)
