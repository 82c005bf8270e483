"""Startup registration of product constructors, recipes and prototypes."""

from src.infrastructure.factories.burger_registration import create_burger_factory, register_burger_types
from src.infrastructure.factories.document_registration import register_document_prototypes
from src.infrastructure.factories.meal_registration import DEFAULT_RECIPES, register_meal_recipes

__all__ = [
    "create_burger_factory",
    "register_burger_types",
    "register_document_prototypes",
    "register_meal_recipes",
    "DEFAULT_RECIPES",
]
