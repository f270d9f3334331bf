"""
Factories

A factory is what the scope registry stores for each bound type. The
injector calls ``get()`` on it for every resolution.
"""

import logging
import threading
from abc import ABC, abstractmethod
from typing import Any, Type, TYPE_CHECKING

from .provider import Provider

if TYPE_CHECKING:
    from .injector import AbstractInjector

logger = logging.getLogger(__name__)


class Factory(ABC):
    """Returns the instance for a bound type."""

    @abstractmethod
    def get(self, interface: Type) -> Any:
        pass


class InstanceFactory(Factory):
    """Always returns the same pre-supplied value."""

    def __init__(self, instance: Any):
        self.instance = instance

    def get(self, interface: Type) -> Any:
        return self.instance


class SelfFactory(Factory):
    """Returns the owning injector. Used for the injector's own binding."""

    def __init__(self, injector: 'AbstractInjector'):
        self.injector = injector

    def get(self, interface: Type) -> Any:
        return self.injector


class SingletonFactory(Factory):
    """Lazily creates one instance through a provider and keeps it.

    The provider runs at most once at a time per factory, under the
    factory's own lock. Once an instance was created, every caller,
    including those that waited on the lock, gets that same instance.

    There is no failed state: if the provider raises (or returns None)
    nothing is cached, and the next call runs the provider again.

    The lock is re-entrant. A provider that resolves its own type again
    recurses until ``RecursionError``; cycles are not detected.
    """

    def __init__(self, provider: Provider, injector: 'AbstractInjector'):
        self.provider = provider
        self._injector = injector
        self._lock = threading.RLock()
        self._initialized = False
        self._instance: Any = None

    @property
    def initialized(self) -> bool:
        return self._initialized

    def get(self, interface: Type) -> Any:
        if self._initialized:
            return self._instance

        with self._lock:
            if not self._initialized:
                instance = self.provider.provide(self._injector)
                if instance is not None:
                    self._instance = instance
                    self._initialized = True
                    logger.debug(
                        "Created singleton for %s: %s",
                        getattr(interface, '__name__', interface), type(instance).__name__,
                    )
                return instance
            return self._instance
