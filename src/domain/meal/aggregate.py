"""Meal product."""
from typing import Optional

from pydantic import Field, field_validator

from src.domain.base.product import Product
from src.domain.meal.value_objects import MealType


class Meal(Product):
    """A meal of up to four courses. Main and drink are always present."""

    meal_type: MealType = MealType.CUSTOM
    starter: Optional[str] = None
    main: str = Field(..., description="Main course")
    dessert: Optional[str] = None
    drink: str = Field(..., description="Drink served with the meal")

    @field_validator("starter", "main", "dessert", "drink")
    @classmethod
    def validate_course(cls, v: Optional[str]) -> Optional[str]:
        if v is not None and not v.strip():
            raise ValueError("Course names must not be blank")
        return v

    def courses(self) -> list:
        """Served courses in order, skipping the ones not ordered."""
        return [c for c in (self.starter, self.main, self.dessert, self.drink) if c is not None]

    def __str__(self) -> str:
        return f"{self.meal_type.value} meal: {', '.join(self.courses())}"
