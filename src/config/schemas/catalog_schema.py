"""Catalog configuration schemas: recipes, burgers and the shared printer."""
from typing import Any, Dict, List, Optional, Union

from pydantic import BaseModel, Field, field_validator

from src.domain.burger.value_objects import BurgerType
from src.domain.printer.value_objects import PrinterMode


class PrinterConfig(BaseModel):
    """Shared printer configuration."""

    default_mode: PrinterMode = Field(PrinterMode.GRAYSCALE, description="Mode of the printer at creation")

    @field_validator("default_mode", mode="before")
    @classmethod
    def normalize_mode(cls, v):
        if isinstance(v, str):
            return v.strip().lower()
        return v


class CatalogConfig(BaseModel):
    """What gets registered at startup."""

    recipes: Dict[str, List[Union[str, Dict[str, Any]]]] = Field(
        default_factory=dict, description="Extra named build recipes"
    )
    enabled_burgers: Optional[List[BurgerType]] = Field(
        None, description="Burger tags to register; None registers the whole menu"
    )
    register_default_recipes: bool = Field(True, description="Register the built-in meal recipes")
    register_default_prototypes: bool = Field(True, description="Register the built-in document prototypes")

    @field_validator("enabled_burgers", mode="before")
    @classmethod
    def normalize_burgers(cls, v):
        if isinstance(v, list):
            return [item.strip().upper() if isinstance(item, str) else item for item in v]
        return v

    @field_validator("recipes")
    @classmethod
    def validate_recipes(cls, v: Dict[str, List[Any]]) -> Dict[str, List[Any]]:
        for name, steps in v.items():
            if not steps:
                raise ValueError(f"Recipe '{name}' must have at least one step")
        return v
