"""Infrastructure registry patterns."""

from .base_registry import BaseRegistration, BaseRegistry
from .product_factory import ProductFactory, ProductRegistration
from .prototype_registry import PrototypeRegistry
from .recipe_registry import RecipeRegistry

__all__ = [
    'BaseRegistration',
    'BaseRegistry',
    'ProductFactory',
    'ProductRegistration',
    'PrototypeRegistry',
    'RecipeRegistry',
]
