"""Infrastructure patterns package."""

from src.infrastructure.patterns.director import Director
from src.infrastructure.patterns.singleton_access import SingletonAccessor, get_singleton
from src.infrastructure.patterns.singleton_registry import SingletonRegistry

__all__ = ["Director", "SingletonAccessor", "SingletonRegistry", "get_singleton"]
