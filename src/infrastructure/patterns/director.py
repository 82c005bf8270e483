"""Director - plays build specifications against builders."""
from typing import Any, Iterable, Optional, TypeVar, Union

from src.domain.base.builder import Builder, BuildSpec, StepLike
from src.domain.core.exceptions import ConfigurationError, UnknownBuildStepError
from src.infrastructure.error.context import ExceptionContext, log_failure
from src.infrastructure.logging.logger import get_logger
from src.infrastructure.registry.recipe_registry import RecipeRegistry

P = TypeVar("P")


class Director:
    """
    Sequences construction steps against a builder.

    Steps run exactly in the order the spec declares them. The whole spec
    is checked against the builder before the first step runs, so an
    unsupported step never leaves a half-played draft behind.
    """

    def __init__(self, recipes: Optional[RecipeRegistry] = None):
        self.recipes = recipes
        self.logger = get_logger(__name__)

    def construct(self, builder: Builder[P], spec: Union[BuildSpec, Iterable[StepLike]]) -> None:
        """
        Invoke every step of ``spec`` on ``builder``, in order.

        Raises:
            UnknownBuildStepError: If a step is not supported by the builder
        """
        spec = BuildSpec.parse(spec)
        supported = builder.supported_steps()
        for step in spec:
            if step.name not in supported:
                error = UnknownBuildStepError(step.name, supported)
                log_failure(
                    self.logger,
                    error,
                    ExceptionContext(
                        "construct", builder=type(builder).__name__, spec=str(spec)
                    ),
                )
                raise error

        for step in spec:
            builder.apply_step(step.name, step.value)

        self.logger.debug(
            "Constructed %s with %d steps: %s", type(builder).__name__, len(spec), spec
        )

    def construct_recipe(self, builder: Builder[P], recipe_name: Any) -> None:
        """
        Look up a named recipe and play it against ``builder``.

        Raises:
            ConfigurationError: If the director has no recipe registry
            UnknownTypeError: If the recipe is not registered
        """
        if self.recipes is None:
            raise ConfigurationError("Director has no recipe registry")
        self.construct(builder, self.recipes.get(recipe_name))

    def make(self, builder: Builder[P], spec: Union[BuildSpec, Iterable[StepLike]]) -> P:
        """Reset ``builder``, play ``spec`` and return the finished product."""
        builder.reset()
        self.construct(builder, spec)
        return builder.build()

    def make_recipe(self, builder: Builder[P], recipe_name: Any) -> P:
        """Reset ``builder``, play the named recipe and return the finished product."""
        builder.reset()
        self.construct_recipe(builder, recipe_name)
        return builder.build()
