"""Configuration loading from JSON files and environment variables."""
import json
import logging
import os
from copy import deepcopy
from typing import Any, Dict, Optional

from src._package import ENV_PREFIX
from src.config.utils.env_expansion import expand_env_vars
from src.domain.core.exceptions import ConfigurationError

logger = logging.getLogger(__name__)

# Environment variable -> (section, key)
ENV_OVERRIDES = {
    f"{ENV_PREFIX}LOG_LEVEL": ("logging", "level"),
    f"{ENV_PREFIX}LOG_DESTINATION": ("logging", "destination"),
    f"{ENV_PREFIX}LOG_FILE": ("logging", "file_path"),
    f"{ENV_PREFIX}PRINTER_MODE": ("printer", "default_mode"),
    f"{ENV_PREFIX}ENVIRONMENT": (None, "environment"),
}


class ConfigurationLoader:
    """Loads raw configuration data; validation is left to the schemas."""

    CONFIG_FILE_ENV = f"{ENV_PREFIX}CONFIG_FILE"

    def load_from_file(self, path: str) -> Dict[str, Any]:
        """
        Load a JSON configuration file and expand environment references.

        Raises:
            ConfigurationError: If the file cannot be read or parsed
        """
        try:
            with open(path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except FileNotFoundError as e:
            raise ConfigurationError(f"Configuration file not found: {path}") from e
        except json.JSONDecodeError as e:
            raise ConfigurationError(f"Invalid JSON in configuration file {path}: {e}") from e

        if not isinstance(data, dict):
            raise ConfigurationError(f"Configuration file {path} must contain a JSON object")

        logger.debug("Loaded configuration from %s", path)
        return expand_env_vars(data)

    def load_configuration(self, config_file: Optional[str] = None) -> Dict[str, Any]:
        """Load from ``config_file``, else from the file named by the environment, else defaults."""
        path = config_file or os.environ.get(self.CONFIG_FILE_ENV)
        if path:
            return self.load_from_file(path)
        return {}

    def apply_environment_overrides(self, config_data: Dict[str, Any]) -> Dict[str, Any]:
        """Return a copy of ``config_data`` with environment overrides applied."""
        result = deepcopy(config_data)
        for env_var, (section, key) in ENV_OVERRIDES.items():
            value = os.environ.get(env_var)
            if value is None:
                continue
            if section is None:
                result[key] = value
            else:
                target = result.setdefault(section, {})
                if not isinstance(target, dict):
                    raise ConfigurationError(f"Configuration section '{section}' must be an object")
                target[key] = value
            logger.debug("Applied environment override %s", env_var)
        return result
