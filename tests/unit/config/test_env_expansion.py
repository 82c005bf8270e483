"""Tests for environment variable expansion utilities."""

import os
from unittest.mock import patch

from src.config.utils.env_expansion import expand_env_vars


class TestEnvironmentVariableExpansion:
    """Test environment variable expansion functionality."""

    def test_expand_simple_env_var(self):
        with patch.dict(os.environ, {"TEST_VAR": "/test/path"}):
            assert expand_env_vars("$TEST_VAR") == "/test/path"

    def test_expand_braced_env_var_with_subpath(self):
        with patch.dict(os.environ, {"TEST_VAR": "/test/path"}):
            assert expand_env_vars("${TEST_VAR}/subdir") == "/test/path/subdir"

    def test_default_used_when_unset(self):
        with patch.dict(os.environ, {}, clear=True):
            assert expand_env_vars("${LEVEL:INFO}") == "INFO"
            assert expand_env_vars("${EMPTY:}") == ""

    def test_default_ignored_when_set(self):
        with patch.dict(os.environ, {"LEVEL": "DEBUG"}):
            assert expand_env_vars("${LEVEL:INFO}") == "DEBUG"

    def test_expand_nonexistent_env_var(self):
        with patch.dict(os.environ, {}, clear=True):
            assert expand_env_vars("$NONEXISTENT_VAR") == "$NONEXISTENT_VAR"

    def test_expand_nested_values(self):
        with patch.dict(os.environ, {"TEST_VAR": "/test/path"}):
            config = {
                "logging": {"file_path": "$TEST_VAR/app.log"},
                "steps": ["${TEST_VAR}", 3],
                "enabled": True,
            }
            assert expand_env_vars(config) == {
                "logging": {"file_path": "/test/path/app.log"},
                "steps": ["/test/path", 3],
                "enabled": True,
            }
