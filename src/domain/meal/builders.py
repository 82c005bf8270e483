"""Meal builders.

Concrete builders differ only in the value each step assigns when the
step is played without an explicit value.
"""
from types import MappingProxyType
from typing import Any, Callable, Dict, Mapping, Optional, Tuple

from src.domain.base.builder import Builder
from src.domain.core.exceptions import UnknownBuildStepError, ValidationError
from src.domain.meal.aggregate import Meal
from src.domain.meal.value_objects import MealStep, MealType


class MealBuilder(Builder[Meal]):
    """
    Builder for meals.

    Steps: ``starter``, ``main``, ``dessert``, ``drink``. Setters chain::

        meal = MealBuilder().set_main("Stir Fry").set_drink("Shake").build()

    The base builder has no house values: every step needs an explicit
    value. Subclasses provide ``step_defaults``.
    """

    product_type = Meal
    required_fields = (MealStep.MAIN.value, MealStep.DRINK.value)
    meal_type: MealType = MealType.CUSTOM
    step_defaults: Mapping[str, str] = MappingProxyType({})

    def __init__(self) -> None:
        super().__init__()
        self._handlers: Dict[str, Callable[[str], "MealBuilder"]] = {
            MealStep.STARTER.value: self.set_starter,
            MealStep.MAIN.value: self.set_main,
            MealStep.DESSERT.value: self.set_dessert,
            MealStep.DRINK.value: self.set_drink,
        }

    def supported_steps(self) -> Tuple[str, ...]:
        return tuple(step.value for step in MealStep)

    def apply_step(self, step: str, value: Optional[Any] = None) -> "MealBuilder":
        handler = self._handlers.get(step)
        if handler is None:
            raise UnknownBuildStepError(step, self.supported_steps())
        if value is None:
            value = self.step_defaults.get(step)
            if value is None:
                raise ValidationError(
                    f"{self.__class__.__name__} has no value for step '{step}'",
                    {"step": step},
                )
        return handler(value)

    def _set(self, field: str, value: str) -> "MealBuilder":
        if not isinstance(value, str) or not value.strip():
            raise ValidationError(f"Invalid value for {field}: {value!r}")
        self._draft[field] = value
        return self

    def set_starter(self, starter: str) -> "MealBuilder":
        return self._set(MealStep.STARTER.value, starter)

    def set_main(self, main: str) -> "MealBuilder":
        return self._set(MealStep.MAIN.value, main)

    def set_dessert(self, dessert: str) -> "MealBuilder":
        return self._set(MealStep.DESSERT.value, dessert)

    def set_drink(self, drink: str) -> "MealBuilder":
        return self._set(MealStep.DRINK.value, drink)

    def _create_product(self, fields: Dict[str, Any]) -> Meal:
        return Meal(meal_type=self.meal_type, **fields)


class VeganMealBuilder(MealBuilder):
    meal_type = MealType.VEGAN
    step_defaults = MappingProxyType({
        MealStep.STARTER.value: "Salad",
        MealStep.MAIN.value: "Stir Fry",
        MealStep.DESSERT.value: "Pudding",
        MealStep.DRINK.value: "Shake",
    })


class ClassicMealBuilder(MealBuilder):
    meal_type = MealType.CLASSIC
    step_defaults = MappingProxyType({
        MealStep.STARTER.value: "Chicken Wings",
        MealStep.MAIN.value: "Steak",
        MealStep.DESSERT.value: "Ice Cream",
        MealStep.DRINK.value: "Cola",
    })


class KidsMealBuilder(MealBuilder):
    meal_type = MealType.KIDS
    step_defaults = MappingProxyType({
        MealStep.STARTER.value: "Carrot Sticks",
        MealStep.MAIN.value: "Mac and Cheese",
        MealStep.DESSERT.value: "Fruit Cup",
        MealStep.DRINK.value: "Apple Juice",
    })
