"""Burger Registration Module.

Registration functions that populate a product factory with the burger
menu at startup.
"""
from typing import Iterable, Optional

from src.domain.burger.aggregate import Burger
from src.domain.burger.menu import MENU
from src.domain.burger.value_objects import BurgerType
from src.infrastructure.logging.logger import get_logger
from src.infrastructure.registry.product_factory import ProductFactory


def create_burger_factory() -> ProductFactory[Burger]:
    """Create an empty factory for burgers."""
    return ProductFactory(name="burger")


def register_burger_types(
    factory: ProductFactory[Burger],
    enabled: Optional[Iterable[BurgerType]] = None,
) -> None:
    """
    Register burger constructors with the factory.

    Args:
        factory: Factory to populate
        enabled: Burger tags to register; None registers the whole menu
    """
    logger = get_logger(__name__)
    tags = list(MENU) if enabled is None else [BurgerType(tag) for tag in enabled]

    for tag in tags:
        factory.register(tag, MENU[tag], Burger)

    logger.info("Registered %d burger types: %s", len(tags), ", ".join(t.value for t in tags))
