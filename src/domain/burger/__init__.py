"""Burger bounded context - products created by tag through a factory."""

from src.domain.burger.aggregate import Burger
from src.domain.burger.menu import MENU, create_cheese_burger, create_deluxe_burger, create_vegan_burger
from src.domain.burger.value_objects import BurgerType

__all__ = [
    "Burger",
    "BurgerType",
    "MENU",
    "create_vegan_burger",
    "create_cheese_burger",
    "create_deluxe_burger",
]
