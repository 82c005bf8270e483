"""Configuration schemas package."""

from .app_schema import AppConfig, validate_config
from .catalog_schema import CatalogConfig, PrinterConfig
from .logging_schema import LogDestination, LoggingConfig, LogLevel

__all__ = [
    # Main configuration
    "AppConfig",
    "validate_config",
    # Sections
    "CatalogConfig",
    "PrinterConfig",
    "LoggingConfig",
    "LogLevel",
    "LogDestination",
]
