"""Unified configuration management for the application."""
from __future__ import annotations

import logging
import threading
from typing import Any, Dict, Optional

from pydantic import ValidationError as PydanticValidationError

from src.config.loader import ConfigurationLoader
from src.config.schemas import AppConfig, CatalogConfig, LoggingConfig, PrinterConfig
from src.domain.core.exceptions import ConfigurationError

logger = logging.getLogger(__name__)


class ConfigurationManager:
    """
    Configuration manager that serves as the single source of truth.

    Configuration is loaded lazily on first access from, in order of
    precedence: environment overrides, the configuration file, schema
    defaults. ``overrides`` passed in code win over everything.
    """

    def __init__(self, config_file: Optional[str] = None, overrides: Optional[Dict[str, Any]] = None):
        """Initialize configuration manager with lazy loading."""
        self._config_file = config_file
        self._overrides = overrides or {}
        self._lock = threading.RLock()
        self._app_config: Optional[AppConfig] = None
        self._loader = ConfigurationLoader()

    @property
    def app_config(self) -> AppConfig:
        """Lazy load application configuration."""
        if self._app_config is None:
            with self._lock:
                if self._app_config is None:
                    self._app_config = self._load_app_config()
        return self._app_config

    def _load_app_config(self) -> AppConfig:
        config_data = self._loader.load_configuration(self._config_file)
        config_data = self._loader.apply_environment_overrides(config_data)
        config_data = _merge(config_data, self._overrides)

        try:
            app_config = AppConfig.from_dict(config_data)
        except PydanticValidationError as e:
            fields = [".".join(str(part) for part in err["loc"]) for err in e.errors()]
            raise ConfigurationError(f"Invalid configuration: {e}", fields) from e

        logger.debug("Configuration loaded for environment %s", app_config.environment)
        return app_config

    @property
    def logging(self) -> LoggingConfig:
        return self.app_config.logging

    @property
    def printer(self) -> PrinterConfig:
        return self.app_config.printer

    @property
    def catalog(self) -> CatalogConfig:
        return self.app_config.catalog

    def reload(self) -> None:
        """Reload configuration from sources."""
        with self._lock:
            self._app_config = None


def _merge(base: Dict[str, Any], updates: Dict[str, Any]) -> Dict[str, Any]:
    result = dict(base)
    for key, value in updates.items():
        if isinstance(result.get(key), dict) and isinstance(value, dict):
            result[key] = _merge(result[key], value)
        else:
            result[key] = value
    return result
