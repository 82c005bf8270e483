# src/domain/meal/value_objects.py
from enum import Enum

from src.domain.core.exceptions import ValidationError


class MealType(str, Enum):
    """Meal variants, one per concrete builder."""
    CUSTOM = "custom"
    VEGAN = "vegan"
    CLASSIC = "classic"
    KIDS = "kids"


class MealStep(str, Enum):
    """Build steps understood by meal builders, in serving order."""
    STARTER = "starter"
    MAIN = "main"
    DESSERT = "dessert"
    DRINK = "drink"

    @classmethod
    def validate(cls, value: str) -> "MealStep":
        try:
            return cls(value)
        except ValueError:
            raise ValidationError(f"Invalid meal step: {value}")
