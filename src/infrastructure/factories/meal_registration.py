"""Meal Registration Module.

Built-in meal recipes and the function that loads them, plus configured
recipes, into a recipe registry.
"""
from typing import Any, Dict, List, Mapping, Optional

from src.domain.meal.value_objects import MealStep
from src.infrastructure.logging.logger import get_logger
from src.infrastructure.registry.recipe_registry import RecipeRegistry

DEFAULT_RECIPES: Dict[str, List[str]] = {
    "full_course": [MealStep.STARTER.value, MealStep.MAIN.value, MealStep.DESSERT.value, MealStep.DRINK.value],
    "light": [MealStep.MAIN.value, MealStep.DRINK.value],
    "no_dessert": [MealStep.STARTER.value, MealStep.MAIN.value, MealStep.DRINK.value],
}


def register_meal_recipes(
    registry: RecipeRegistry,
    extra_recipes: Optional[Mapping[str, List[Any]]] = None,
    include_defaults: bool = True,
) -> None:
    """
    Register meal recipes.

    Args:
        registry: Recipe registry to populate
        extra_recipes: Additional recipes, usually from configuration
        include_defaults: Whether to register the built-in recipes first
    """
    logger = get_logger(__name__)
    recipes: Dict[str, List[Any]] = dict(DEFAULT_RECIPES) if include_defaults else {}
    recipes.update(extra_recipes or {})

    for name, steps in recipes.items():
        registry.register(name, steps)

    logger.info("Registered %d meal recipes", len(recipes))
