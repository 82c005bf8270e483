# src/domain/burger/value_objects.py
from enum import Enum


class BurgerType(str, Enum):
    """Burger tags the factory dispatches on."""
    VEGAN = "VEGAN"
    CHEESE = "CHEESE"
    DELUXE = "DELUXE"
