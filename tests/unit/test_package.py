"""Tests for the root package metadata."""

import pytest

import src
from src._package import PACKAGE_NAME


@pytest.mark.unit
class TestPackageMetadata:
    """Test cases for the root package."""

    def test_docstring_includes_usage(self):
        assert src.__doc__.startswith("Creational Patterns Kit")
        assert "Usage:" in src.__doc__
        assert "Application().initialize()" in src.__doc__

    def test_metadata(self):
        assert src.__package_name__ == PACKAGE_NAME
        assert src.__version__
