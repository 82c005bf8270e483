"""Tests for configuration loading."""

import json
import os
from unittest.mock import patch

import pytest

from src.config import AppConfig, ConfigurationManager
from src.config.schemas.logging_schema import LogDestination, LogLevel
from src.domain.burger.value_objects import BurgerType
from src.domain.core.exceptions import ConfigurationError
from src.domain.printer.value_objects import PrinterMode


@pytest.mark.unit
class TestAppConfig:
    """Test configuration schema defaults and validation."""

    def test_defaults(self, default_config):
        assert default_config.logging.level == LogLevel.INFO
        assert default_config.logging.destination == LogDestination.STDOUT
        assert default_config.printer.default_mode == PrinterMode.GRAYSCALE
        assert default_config.catalog.enabled_burgers is None
        assert default_config.catalog.recipes == {}

    def test_values_are_normalized(self):
        config = AppConfig.from_dict(
            {
                "logging": {"level": "debug"},
                "printer": {"default_mode": "COLOR"},
                "catalog": {"enabled_burgers": ["vegan", "Cheese"]},
            }
        )

        assert config.logging.level == LogLevel.DEBUG
        assert config.printer.default_mode == PrinterMode.COLOR
        assert config.catalog.enabled_burgers == [BurgerType.VEGAN, BurgerType.CHEESE]

    def test_empty_recipe_rejected(self):
        with pytest.raises(ValueError):
            AppConfig.from_dict({"catalog": {"recipes": {"nothing": []}}})


@pytest.mark.unit
class TestConfigurationManager:
    """Test the configuration manager."""

    def test_loads_defaults_without_file(self):
        with patch.dict(os.environ, {}, clear=True):
            manager = ConfigurationManager()
            assert manager.app_config == AppConfig()

    def test_loads_file_and_expands_env(self, tmp_path):
        config_file = tmp_path / "config.json"
        config_file.write_text(
            json.dumps(
                {
                    "environment": "${DEPLOY_ENV:staging}",
                    "logging": {"file_path": "${LOG_ROOT}/cpk.log", "destination": "both"},
                    "catalog": {"recipes": {"main_only": ["main", "drink"]}},
                }
            )
        )

        with patch.dict(os.environ, {"LOG_ROOT": "/var/log"}, clear=True):
            manager = ConfigurationManager(str(config_file))
            config = manager.app_config

        assert config.environment == "staging"
        assert config.logging.file_path == "/var/log/cpk.log"
        assert manager.logging.writes_to_file
        assert manager.catalog.recipes == {"main_only": ["main", "drink"]}

    def test_config_file_from_environment(self, tmp_path):
        config_file = tmp_path / "config.json"
        config_file.write_text(json.dumps({"printer": {"default_mode": "draft"}}))

        with patch.dict(os.environ, {"CPK_CONFIG_FILE": str(config_file)}, clear=True):
            assert ConfigurationManager().printer.default_mode == PrinterMode.DRAFT

    def test_environment_overrides_file(self, tmp_path):
        config_file = tmp_path / "config.json"
        config_file.write_text(json.dumps({"printer": {"default_mode": "draft"}}))

        with patch.dict(os.environ, {"CPK_PRINTER_MODE": "color", "CPK_LOG_LEVEL": "warning"}, clear=True):
            manager = ConfigurationManager(str(config_file))
            assert manager.printer.default_mode == PrinterMode.COLOR
            assert manager.logging.level == LogLevel.WARNING

    def test_code_overrides_win(self):
        with patch.dict(os.environ, {"CPK_PRINTER_MODE": "color"}, clear=True):
            manager = ConfigurationManager(overrides={"printer": {"default_mode": "draft"}})
            assert manager.printer.default_mode == PrinterMode.DRAFT

    def test_missing_file(self, tmp_path):
        with pytest.raises(ConfigurationError, match="not found"):
            ConfigurationManager(str(tmp_path / "missing.json")).app_config

    def test_invalid_json(self, tmp_path):
        config_file = tmp_path / "config.json"
        config_file.write_text("{not json")

        with pytest.raises(ConfigurationError, match="Invalid JSON"):
            ConfigurationManager(str(config_file)).app_config

    def test_invalid_values(self):
        with patch.dict(os.environ, {}, clear=True):
            manager = ConfigurationManager(overrides={"printer": {"default_mode": "sepia"}})

            with pytest.raises(ConfigurationError) as exc:
                manager.app_config

        assert "printer.default_mode" in exc.value.missing_fields

    def test_reload(self):
        with patch.dict(os.environ, {}, clear=True):
            manager = ConfigurationManager()
            first = manager.app_config
            manager.reload()
            assert manager.app_config is not first
