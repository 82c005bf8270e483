"""Burger application services."""

from src.application.burger.service import BurgerRestaurant

__all__ = ["BurgerRestaurant"]
