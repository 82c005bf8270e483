"""Main application configuration schema."""

from typing import Any, Dict

from pydantic import BaseModel, Field

from .catalog_schema import CatalogConfig, PrinterConfig
from .logging_schema import LoggingConfig


class AppConfig(BaseModel):
    """Application configuration."""

    version: str = Field("1.0.0", description="Configuration version")
    environment: str = Field("development", description="Environment")
    logging: LoggingConfig = Field(default_factory=lambda: LoggingConfig())
    printer: PrinterConfig = Field(default_factory=lambda: PrinterConfig())
    catalog: CatalogConfig = Field(default_factory=lambda: CatalogConfig())

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "AppConfig":
        return cls.model_validate(data)


def validate_config(data: Dict[str, Any]) -> AppConfig:
    """Validate raw configuration data."""
    return AppConfig.from_dict(data)
