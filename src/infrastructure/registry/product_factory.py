"""Product Factory - registry pattern for tag-based product construction.

Replaces conditional dispatch on type tags with a registration table built
once at startup. Adding a product tag means registering one more
constructor; existing dispatch code never changes.
"""
from typing import Any, Callable, Generic, List, Type, TypeVar

from src.domain.core.exceptions import ConfigurationError
from src.infrastructure.error.context import ExceptionContext, log_failure
from src.infrastructure.registry.base_registry import BaseRegistration, BaseRegistry

P = TypeVar("P")


class ProductRegistration(BaseRegistration, Generic[P]):
    """Constructor registered for a product tag."""

    def __init__(self, type_name: str, constructor: Callable[..., P], product_type: Type[P]):
        super().__init__(type_name, product_type=product_type.__name__)
        self.constructor = constructor
        self.product_type = product_type


class ProductFactory(BaseRegistry[ProductRegistration[P]]):
    """
    Factory dispatcher mapping a discriminant tag to a product constructor.

    Tags are case-insensitive: ``"vegan"``, ``"VEGAN"`` and an enum member
    whose value is ``"VEGAN"`` all address the same registration.
    """

    def __init__(self, name: str = "products") -> None:
        super().__init__()
        self.name = name

    def _normalize_tag(self, tag: Any) -> str:
        return super()._normalize_tag(tag).upper()

    def register(self, tag: Any, constructor: Callable[..., P], product_type: Type[P]) -> None:
        """
        Register a constructor for a tag.

        Args:
            tag: Discriminant value (string or enum)
            constructor: Callable returning a new product; receives creation overrides
            product_type: Class every product created for this tag must be an instance of

        Raises:
            DuplicateRegistrationError: If the tag is already registered
        """
        if not callable(constructor):
            raise ConfigurationError(f"Constructor for '{tag}' is not callable")
        key = self._normalize_tag(tag)
        self.register_type(key, ProductRegistration(key, constructor, product_type))
        self.logger.info("Registered %s type: %s", self.name, key)

    def create(self, tag: Any, **overrides: Any) -> P:
        """
        Create a new product for a registered tag.

        Raises:
            UnknownTypeError: If the tag is not registered
            ConfigurationError: If the constructor returns the wrong type
        """
        registration = self.get_registration(tag)
        product = registration.constructor(**overrides)

        if not isinstance(product, registration.product_type):
            error = ConfigurationError(
                f"Constructor for '{registration.type_name}' returned "
                f"{type(product).__name__}, expected {registration.product_type.__name__}"
            )
            log_failure(
                self.logger,
                error,
                ExceptionContext("create", factory=self.name, tag=registration.type_name),
            )
            raise error

        self.logger.debug("Created %s product for type: %s", self.name, registration.type_name)
        return product

    def is_registered(self, tag: Any) -> bool:
        return self.is_type_registered(tag)

    def registered_tags(self) -> List[str]:
        return self.get_registered_types()

    def product_type_for(self, tag: Any) -> Type[P]:
        return self.get_registration(tag).product_type

    def unregister(self, tag: Any) -> bool:
        return self.unregister_type(tag)
