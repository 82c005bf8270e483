"""Standard singleton access functions."""

from typing import Any, Generic, Type, TypeVar

from src.infrastructure.patterns.singleton_registry import SingletonRegistry

T = TypeVar("T")


def get_singleton(singleton_class: Type[T], *args: Any, **kwargs: Any) -> T:
    """
    Standard way to get singleton instances.

    Args:
        singleton_class: The class to get an instance of
        *args: Arguments to pass to the constructor if creating a new instance
        **kwargs: Keyword arguments to pass to the constructor if creating a new instance

    Returns:
        The singleton instance
    """
    return SingletonRegistry.get_instance().get(singleton_class, *args, **kwargs)


class SingletonAccessor(Generic[T]):
    """
    Typed lazy handle to a process-wide singleton.

    The accessor does not own the instance: every accessor for the same
    class returns the one instance kept by the SingletonRegistry. It is the
    object the application context hands to code that needs the shared
    resource, instead of that code looking the resource up globally.
    """

    def __init__(self, singleton_class: Type[T], *args: Any, **kwargs: Any):
        self.singleton_class = singleton_class
        self._args = args
        self._kwargs = kwargs

    def get_instance(self) -> T:
        return get_singleton(self.singleton_class, *self._args, **self._kwargs)

    def is_initialized(self) -> bool:
        return SingletonRegistry.get_instance().is_initialized(self.singleton_class)

    def reset(self) -> None:
        """Drop the shared instance (useful for testing)."""
        SingletonRegistry.get_instance().reset(self.singleton_class)

    def __repr__(self) -> str:
        return f"SingletonAccessor({self.singleton_class.__name__})"
