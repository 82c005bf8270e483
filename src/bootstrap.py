"""Application bootstrap - builds the application context once at startup."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Optional

from src.application.burger.service import BurgerRestaurant
from src.application.document.service import DocumentService
from src.config import AppConfig, ConfigurationManager
from src.domain.burger.aggregate import Burger
from src.domain.document.aggregate import Document
from src.domain.printer.aggregate import Printer
from src.infrastructure.factories import (
    create_burger_factory,
    register_burger_types,
    register_document_prototypes,
    register_meal_recipes,
)
from src.infrastructure.logging.logger import get_logger, setup_logging
from src.infrastructure.patterns.director import Director
from src.infrastructure.patterns.singleton_access import SingletonAccessor
from src.infrastructure.registry.product_factory import ProductFactory
from src.infrastructure.registry.prototype_registry import PrototypeRegistry
from src.infrastructure.registry.recipe_registry import RecipeRegistry


@dataclass
class ApplicationContext:
    """
    Explicit context handed to the code that needs shared components.

    Registries are populated once by ``Application.initialize`` and are
    only read afterwards.
    """
    config: AppConfig
    burger_factory: ProductFactory[Burger]
    recipes: RecipeRegistry
    prototypes: PrototypeRegistry[Document]
    director: Director
    printer: SingletonAccessor[Printer]
    restaurant: BurgerRestaurant
    documents: DocumentService


class Application:
    """Application entry point with registration pattern."""

    def __init__(
        self,
        config_path: Optional[str] = None,
        overrides: Optional[Dict[str, Any]] = None,
        configure_logging: bool = True,
    ) -> None:
        """Initialize the instance."""
        self.config_path = config_path
        self._config_manager = ConfigurationManager(config_path, overrides)
        self._configure_logging = configure_logging
        self._context: Optional[ApplicationContext] = None
        self.logger = get_logger(__name__)

    @property
    def is_initialized(self) -> bool:
        return self._context is not None

    @property
    def context(self) -> ApplicationContext:
        if self._context is None:
            raise RuntimeError("Application is not initialized; call initialize() first")
        return self._context

    def initialize(self) -> ApplicationContext:
        """Load configuration, set up logging and populate every registry."""
        if self._context is not None:
            return self._context

        app_config = self._config_manager.app_config
        if self._configure_logging:
            setup_logging(app_config.logging)

        self.logger.info("Initializing application", environment=app_config.environment)
        catalog = app_config.catalog

        burger_factory = create_burger_factory()
        register_burger_types(burger_factory, catalog.enabled_burgers)

        recipes = RecipeRegistry()
        register_meal_recipes(recipes, catalog.recipes, catalog.register_default_recipes)

        prototypes: PrototypeRegistry[Document] = PrototypeRegistry()
        if catalog.register_default_prototypes:
            register_document_prototypes(prototypes)

        printer = SingletonAccessor(Printer, mode=app_config.printer.default_mode)

        self._context = ApplicationContext(
            config=app_config,
            burger_factory=burger_factory,
            recipes=recipes,
            prototypes=prototypes,
            director=Director(recipes),
            printer=printer,
            restaurant=BurgerRestaurant(burger_factory),
            documents=DocumentService(prototypes, printer),
        )

        self.logger.info(
            "Application initialized",
            burgers=burger_factory.registered_tags(),
            recipes=recipes.get_registered_types(),
            prototypes=prototypes.get_registered_types(),
        )
        return self._context
