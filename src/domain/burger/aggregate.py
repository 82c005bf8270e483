"""Burger product."""
from typing import List

from pydantic import Field, field_validator

from src.domain.base.product import Product
from src.domain.burger.value_objects import BurgerType


class Burger(Product):
    """A burger as handed out by the burger factory."""

    burger_type: BurgerType
    name: str
    bun: str
    patty: str
    toppings: List[str] = Field(default_factory=list)
    prepared: bool = False

    @field_validator("name", "bun", "patty")
    @classmethod
    def validate_not_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("Value must not be blank")
        return v

    @property
    def is_vegan(self) -> bool:
        return self.burger_type == BurgerType.VEGAN

    def prepare(self) -> "Burger":
        """Return a prepared copy; the original stays untouched."""
        if self.prepared:
            return self
        return self.model_copy(update={"prepared": True}, deep=True)

    def describe(self) -> str:
        toppings = ", ".join(self.toppings) if self.toppings else "no toppings"
        return f"{self.name}: {self.patty} on {self.bun} with {toppings}"
