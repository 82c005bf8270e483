import pytest

from src.config import AppConfig
from src.domain.meal.builders import ClassicMealBuilder, MealBuilder, VeganMealBuilder
from src.infrastructure.factories import (
    create_burger_factory,
    register_burger_types,
    register_document_prototypes,
    register_meal_recipes,
)
from src.infrastructure.patterns.director import Director
from src.infrastructure.patterns.singleton_registry import SingletonRegistry
from src.infrastructure.registry.prototype_registry import PrototypeRegistry
from src.infrastructure.registry.recipe_registry import RecipeRegistry


@pytest.fixture(autouse=True)
def reset_singletons():
    """Every test starts without shared instances."""
    SingletonRegistry.get_instance().reset()
    yield
    SingletonRegistry.get_instance().reset()


@pytest.fixture
def burger_factory():
    factory = create_burger_factory()
    register_burger_types(factory)
    return factory


@pytest.fixture
def recipes():
    registry = RecipeRegistry()
    register_meal_recipes(registry)
    return registry


@pytest.fixture
def director(recipes):
    return Director(recipes)


@pytest.fixture
def prototypes():
    registry = PrototypeRegistry()
    register_document_prototypes(registry)
    return registry


@pytest.fixture
def meal_builder():
    return MealBuilder()


@pytest.fixture
def vegan_builder():
    return VeganMealBuilder()


@pytest.fixture
def classic_builder():
    return ClassicMealBuilder()


@pytest.fixture
def default_config():
    return AppConfig()
