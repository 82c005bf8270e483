"""Prototype Registry - named prototype templates handed out as clones."""
from typing import Any, Generic, TypeVar

from src.domain.base.prototype import PrototypeModel
from src.domain.core.exceptions import ValidationError
from src.infrastructure.registry.base_registry import BaseRegistry

T = TypeVar("T", bound=PrototypeModel)


class PrototypeRegistry(BaseRegistry[T], Generic[T]):
    """
    Registry of prototype templates.

    The registry keeps its own clone of every template, so later edits to
    the object passed to ``register`` do not leak into clones handed out.
    """

    def register(self, name: Any, prototype: T) -> None:
        """
        Register a prototype template.

        Raises:
            DuplicateRegistrationError: If the name is already registered
            InvalidCloneSourceError: If the template cannot be cloned
        """
        if not isinstance(prototype, PrototypeModel):
            raise ValidationError(
                f"Prototype '{name}' must be a PrototypeModel, got {type(prototype).__name__}"
            )
        key = self.register_type(name, prototype.clone())
        self.logger.info("Registered prototype %s (%s)", key, type(prototype).__name__)

    def clone(self, name: Any, **updates: Any) -> T:
        """
        Return a fresh clone of a registered prototype.

        Raises:
            UnknownTypeError: If no prototype has that name
        """
        duplicate = self.get_registration(name).clone(**updates)
        self.logger.debug("Cloned prototype %s", self._normalize_tag(name))
        return duplicate
