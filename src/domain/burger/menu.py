"""Burger constructors, one per burger tag.

Each constructor accepts keyword overrides for any burger field, so callers
can ask the factory for e.g. extra toppings without a new tag.
"""
from typing import Any, Callable, Dict

from src.domain.burger.aggregate import Burger
from src.domain.burger.value_objects import BurgerType


def _make(burger_type: BurgerType, defaults: Dict[str, Any], overrides: Dict[str, Any]) -> Burger:
    fields = {**defaults, **overrides, "burger_type": burger_type}
    return Burger(**fields)


def create_vegan_burger(**overrides: Any) -> Burger:
    return _make(
        BurgerType.VEGAN,
        {
            "name": "Vegan Burger",
            "bun": "whole wheat bun",
            "patty": "plant-based patty",
            "toppings": ["lettuce", "tomato", "vegan mayo"],
        },
        overrides,
    )


def create_cheese_burger(**overrides: Any) -> Burger:
    return _make(
        BurgerType.CHEESE,
        {
            "name": "Cheese Burger",
            "bun": "sesame bun",
            "patty": "beef patty",
            "toppings": ["cheddar", "pickles", "ketchup"],
        },
        overrides,
    )


def create_deluxe_burger(**overrides: Any) -> Burger:
    return _make(
        BurgerType.DELUXE,
        {
            "name": "Deluxe Cheese Burger",
            "bun": "brioche bun",
            "patty": "double beef patty",
            "toppings": ["cheddar", "bacon", "lettuce", "tomato", "onion", "special sauce"],
        },
        overrides,
    )


MENU: Dict[BurgerType, Callable[..., Burger]] = {
    BurgerType.VEGAN: create_vegan_burger,
    BurgerType.CHEESE: create_cheese_burger,
    BurgerType.DELUXE: create_deluxe_burger,
}
