"""Meal bounded context - products assembled step by step by meal builders."""

from src.domain.meal.aggregate import Meal
from src.domain.meal.builders import (
    ClassicMealBuilder,
    KidsMealBuilder,
    MealBuilder,
    VeganMealBuilder,
)
from src.domain.meal.value_objects import MealStep, MealType

__all__ = [
    "Meal",
    "MealBuilder",
    "VeganMealBuilder",
    "ClassicMealBuilder",
    "KidsMealBuilder",
    "MealStep",
    "MealType",
]
