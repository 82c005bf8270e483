"""Burger ordering service."""
from typing import Any, List

from src.domain.burger.aggregate import Burger
from src.infrastructure.logging.logger import get_logger
from src.infrastructure.registry.product_factory import ProductFactory


class BurgerRestaurant:
    """Takes burger orders by tag and hands out prepared burgers."""

    def __init__(self, factory: ProductFactory[Burger]):
        self._factory = factory
        self.logger = get_logger(__name__)

    def menu(self) -> List[str]:
        return self._factory.registered_tags()

    def order_burger(self, tag: Any, **overrides: Any) -> Burger:
        """
        Create and prepare a burger.

        Raises:
            UnknownTypeError: If the burger tag is not on the menu
        """
        burger = self._factory.create(tag, **overrides).prepare()
        self.logger.info("Served %s", burger.name)
        return burger
