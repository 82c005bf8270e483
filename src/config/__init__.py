"""Configuration package with clean public API."""

# Main configuration classes
from .schemas import (
    AppConfig, validate_config,
    CatalogConfig, PrinterConfig,
    LoggingConfig, LogLevel, LogDestination,
)

# Configuration management
from .manager import ConfigurationManager
from .loader import ConfigurationLoader

__all__ = [
    # Main configuration
    'AppConfig',
    'validate_config',

    # Specific configurations
    'CatalogConfig',
    'PrinterConfig',
    'LoggingConfig',
    'LogLevel',
    'LogDestination',

    # Management
    'ConfigurationManager',
    'ConfigurationLoader',
]
