"""
Scope Registry

Maps each scope key to the factories bound in that scope. The default
scope always exists and is consulted when a type is not bound in the
requested scope.

The registry is only written while the injector reads its configuration.
Afterwards it is read concurrently without locking.
"""

from typing import Dict, Hashable, Iterator, Optional, Tuple, Type

from .binding import DEFAULT_SCOPE
from .exceptions import DuplicateBindingError
from .factory import Factory


class ScopeRegistry:
    """Scope key -> {type -> Factory}.

    Example::

        registry = ScopeRegistry()
        registry.install(DEFAULT_SCOPE, Database, InstanceFactory(db))
        registry.lookup("request", Database)  # found through the default scope
    """

    def __init__(self):
        self._scopes: Dict[Hashable, Dict[Type, Factory]] = {DEFAULT_SCOPE: {}}

    def install(self, scope: Hashable, interface: Type, factory: Factory) -> None:
        """Add ``factory`` for ``interface`` in ``scope``, creating the scope if needed.

        Raises:
            DuplicateBindingError: When ``interface`` is already bound in ``scope``
        """
        factories = self._scopes.setdefault(scope, {})
        if interface in factories:
            raise DuplicateBindingError(interface, scope)
        factories[interface] = factory

    def lookup(self, scope: Hashable, interface: Type) -> Optional[Factory]:
        """Find the factory for ``interface`` in ``scope``, then in the default scope."""
        factories = self._scopes.get(scope)
        if factories is not None:
            factory = factories.get(interface)
            if factory is not None:
                return factory
        return self._scopes[DEFAULT_SCOPE].get(interface)

    def __contains__(self, scope: Hashable) -> bool:
        return scope in self._scopes

    @property
    def scopes(self) -> Tuple[Hashable, ...]:
        return tuple(self._scopes)

    def bound_types(self, scope: Hashable) -> Iterator[Type]:
        return iter(self._scopes.get(scope, {}))
