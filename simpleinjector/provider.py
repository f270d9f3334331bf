"""
Providers

A provider creates an instance given access to the injector. Users supply
their own through ``Binding.to_provider()``; singleton bindings without one
get a ConstructorInjectionProvider.
"""

from abc import ABC, abstractmethod
from typing import Any, Callable, Hashable, Type, TYPE_CHECKING

from .constructor import instantiate

if TYPE_CHECKING:
    from .injector import AbstractInjector


class Provider(ABC):
    """Creates an instance for a binding.

    Use when the object needs something besides injectable types,
    e.g. an ID or a name::

        class ConnectionProvider(Provider):
            def provide(self, injector):
                return Connection(injector.get_instance(Settings), name="main")
    """

    @abstractmethod
    def provide(self, injector: 'AbstractInjector') -> Any:
        pass


class CallableProvider(Provider):
    """Adapts a plain function ``fn(injector)`` to the Provider interface."""

    def __init__(self, fn: Callable[['AbstractInjector'], Any]):
        self._fn = fn

    def provide(self, injector: 'AbstractInjector') -> Any:
        return self._fn(injector)

    def __repr__(self) -> str:
        return f"CallableProvider({getattr(self._fn, '__name__', self._fn)!r})"


class ConstructorInjectionProvider(Provider):
    """Instantiates ``implementation`` with its constructor dependencies
    resolved in ``scope``."""

    def __init__(self, implementation: Type, scope: Hashable):
        self.implementation = implementation
        self.scope = scope

    def provide(self, injector: 'AbstractInjector') -> Any:
        return instantiate(self.implementation, injector, self.scope)

    def __repr__(self) -> str:
        name = getattr(self.implementation, "__name__", self.implementation)
        return f"ConstructorInjectionProvider({name}, scope={self.scope!r})"


def as_provider(provider) -> Provider:
    if isinstance(provider, Provider):
        return provider
    if callable(provider):
        return CallableProvider(provider)
    raise TypeError(
        f"Expected a Provider or a callable taking the injector, got {type(provider).__name__}"
    )
