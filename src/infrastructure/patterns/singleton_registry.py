"""Process-wide registry of singleton instances."""
import threading
from collections import defaultdict
from typing import Any, Dict, Optional, Type, TypeVar

from src.infrastructure.logging.logger import get_logger

T = TypeVar("T")


class SingletonRegistry:
    """
    Registry holding at most one instance per class for the whole process.

    Creation is serialized with double-checked locking on a lock per class:
    the lock is held only for that class's check-and-create window, so
    concurrent first callers build the instance exactly once, later callers
    never touch the lock, and a constructor may itself ask for another
    singleton.
    """

    _instance: Optional["SingletonRegistry"] = None
    _lock = threading.Lock()

    def __init__(self) -> None:
        self._instances: Dict[Type[Any], Any] = {}
        self._instances_lock = threading.Lock()
        self._class_locks: Dict[Type[Any], Any] = defaultdict(threading.RLock)
        self.logger = get_logger(__name__)

    @classmethod
    def get_instance(cls) -> "SingletonRegistry":
        """Get the process-wide registry."""
        if cls._instance is None:
            with cls._lock:
                if cls._instance is None:
                    cls._instance = cls()
        return cls._instance

    def get(self, singleton_class: Type[T], *args: Any, **kwargs: Any) -> T:
        """
        Get the instance of ``singleton_class``, creating it on first use.

        Constructor arguments are only used by the call that creates the
        instance; later calls return the existing instance unchanged.
        """
        instance = self._instances.get(singleton_class)
        if instance is None:
            with self._instances_lock:
                class_lock = self._class_locks[singleton_class]
            with class_lock:
                instance = self._instances.get(singleton_class)
                if instance is None:
                    instance = singleton_class(*args, **kwargs)
                    with self._instances_lock:
                        self._instances[singleton_class] = instance
                    self.logger.debug("Created singleton instance of %s", singleton_class.__name__)
        return instance

    def is_initialized(self, singleton_class: Type[Any]) -> bool:
        return singleton_class in self._instances

    def reset(self, singleton_class: Optional[Type[Any]] = None) -> None:
        """Drop one instance, or all of them (useful for testing)."""
        with self._instances_lock:
            if singleton_class is None:
                self._instances.clear()
            else:
                self._instances.pop(singleton_class, None)
