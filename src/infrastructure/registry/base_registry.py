"""Base Registry - thread-safe tag table shared by all registries.

A registry maps a discriminant tag to exactly one registration. Lookups of
an unknown tag are errors, never silent defaults, and registering a tag
twice is rejected so that startup wiring mistakes surface immediately.
"""
import threading
from abc import ABC
from enum import Enum
from typing import Any, Dict, Generic, List, Optional, TypeVar

from src.domain.core.exceptions import DuplicateRegistrationError, UnknownTypeError
from src.infrastructure.error.context import ExceptionContext, log_failure
from src.infrastructure.logging.logger import get_logger

R = TypeVar("R")


class BaseRegistration:
    """Container for a single registration."""

    def __init__(self, type_name: str, **metadata: Any):
        self.type_name = type_name
        self.metadata = metadata

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(type='{self.type_name}')"


class BaseRegistry(ABC, Generic[R]):
    """
    Registry of registrations keyed by tag.

    Subclasses decide how tags are normalized and what a registration
    holds. All access to the table goes through a single lock.
    """

    def __init__(self) -> None:
        self._registrations: Dict[str, R] = {}
        self._registry_lock = threading.RLock()
        self.logger = get_logger(self.__class__.__module__)

    def _normalize_tag(self, tag: Any) -> str:
        """Turn a raw tag (string or enum) into the table key."""
        if isinstance(tag, Enum):
            tag = tag.value
        if not isinstance(tag, str):
            raise TypeError(f"Registry tags must be strings or enums, got {type(tag).__name__}")
        return tag.strip()

    def _lookup_key(self, tag: Any) -> Optional[str]:
        """Table key for a lookup; None when the tag cannot be a key."""
        try:
            return self._normalize_tag(tag)
        except TypeError:
            return None

    def register_type(self, tag: Any, registration: R) -> str:
        """
        Register a tag.

        Raises:
            DuplicateRegistrationError: If the tag is already registered
        """
        key = self._normalize_tag(tag)
        with self._registry_lock:
            if key in self._registrations:
                raise DuplicateRegistrationError(key)
            self._registrations[key] = registration
        self.logger.debug("Registered type %s in %s", key, self.__class__.__name__)
        return key

    def get_registration(self, tag: Any) -> R:
        """
        Look up the registration for a tag.

        Raises:
            UnknownTypeError: If the tag is not registered
        """
        key = self._lookup_key(tag)
        with self._registry_lock:
            registration = None if key is None else self._registrations.get(key)
            if registration is None:
                error = UnknownTypeError(tag if key is None else key, self._registrations.keys())
            else:
                return registration
        log_failure(
            self.logger,
            error,
            ExceptionContext("lookup", registry=self.__class__.__name__, tag=str(error.tag)),
        )
        raise error

    def is_type_registered(self, tag: Any) -> bool:
        key = self._lookup_key(tag)
        if key is None:
            return False
        with self._registry_lock:
            return key in self._registrations

    def get_registered_types(self) -> List[str]:
        """Registered tags in registration order."""
        with self._registry_lock:
            return list(self._registrations.keys())

    def unregister_type(self, tag: Any) -> bool:
        """Remove a tag. Returns True if it was registered."""
        key = self._lookup_key(tag)
        if key is None:
            return False
        with self._registry_lock:
            removed = self._registrations.pop(key, None) is not None
        if removed:
            self.logger.debug("Unregistered type %s from %s", key, self.__class__.__name__)
        return removed

    def clear_registrations(self) -> None:
        """Clear all registrations (useful for testing)."""
        with self._registry_lock:
            self._registrations.clear()

    def __contains__(self, tag: Any) -> bool:
        return self.is_type_registered(tag)

    def __len__(self) -> int:
        with self._registry_lock:
            return len(self._registrations)
