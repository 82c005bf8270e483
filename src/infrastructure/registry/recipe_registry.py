"""Recipe Registry - named build specifications played by the Director."""
from typing import Any, Iterable, Union

from src.domain.base.builder import BuildSpec, StepLike
from src.infrastructure.registry.base_registry import BaseRegistry


class RecipeRegistry(BaseRegistry[BuildSpec]):
    """Registry of named build recipes (ordered step sequences)."""

    def register(self, name: Any, steps: Union[BuildSpec, Iterable[StepLike]]) -> BuildSpec:
        """
        Register a recipe.

        Raises:
            DuplicateRegistrationError: If the name is already registered
            ValidationError: If ``steps`` is not a valid build spec
        """
        spec = BuildSpec.parse(steps)
        key = self.register_type(name, spec)
        self.logger.info("Registered recipe %s: %s", key, spec)
        return spec

    def get(self, name: Any) -> BuildSpec:
        """
        Get a recipe by name.

        Raises:
            UnknownTypeError: If no recipe has that name
        """
        return self.get_registration(name)
