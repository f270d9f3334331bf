"""
Injector

This module provides the resolution engine of SimpleInjector. It is
responsible for:

- Reading the bindings of one configuration pass into the scope registry
- Resolving types through explicit bindings, the default-scope fallback
  and implicit constructor injection
- Recording created instances for the debug dump

Example::

    def configure(binder):
        binder.bind(Database).to(PostgresDatabase).as_singleton()
        binder.bind(Session).as_singleton().for_scope("request")

    injector = create_injector(configure)
    db = injector.get_instance(Database)
    session = injector.get_instance(Session, scope="request")
"""

import logging
import threading
from abc import ABC, abstractmethod
from typing import Any, Dict, Hashable, List, Type, TypeVar

from .binder import Binder, Configuration, apply_configuration
from .binding import Binding, DEFAULT_SCOPE
from .constructor import instantiate, is_constructible
from .dump import InstantiatedObject, render_plantuml
from .exceptions import NullResolutionError, UnresolvedTypeError, UnsupportedBindingError
from .factory import Factory, InstanceFactory, SelfFactory, SingletonFactory
from .provider import ConstructorInjectionProvider
from .scope import ScopeRegistry

logger = logging.getLogger(__name__)

T = TypeVar('T')


class AbstractInjector(ABC):
    """Interface of the injector.

    Bind-free: every injector resolves this type (and its own class) to
    itself, so components can depend on the injector.
    """

    @abstractmethod
    def get_instance(self, interface: Type[T], scope: Hashable = DEFAULT_SCOPE) -> T:
        pass

    @abstractmethod
    def dump(self) -> List[str]:
        pass


class Injector(AbstractInjector):
    """Dependency injection engine.

    Create it with ``create_injector()``. The binding topology is fixed
    once the constructor returns; ``get_instance()`` may then be called
    from any number of threads.

    Attributes:
        debug: Whether created instances are recorded for ``dump()``
    """

    def __init__(self, *configs: Configuration, debug: bool = False):
        """Configure the injector.

        Args:
            *configs: Modules or callables taking a Binder, applied in order
            debug: Record created instances for ``dump()``

        Raises:
            DuplicateBindingError: When a type is bound twice in one scope
            UnsupportedBindingError: When a binding is neither an instance
                nor a singleton
        """
        self.debug = debug
        self._registry = ScopeRegistry()
        self._created: Dict[Any, List[InstantiatedObject]] = {}
        self._created_lock = threading.Lock()

        # someone will need the injector itself
        self_factory = SelfFactory(self)
        self._registry.install(DEFAULT_SCOPE, AbstractInjector, self_factory)
        self._registry.install(DEFAULT_SCOPE, Injector, self_factory)

        binder = Binder()
        for config in configs:
            apply_configuration(config, binder)
        for binding in binder.bindings:
            self._add_binding(binding)

        logger.debug(
            "Injector configured with %d bindings in scopes %s",
            len(binder.bindings), ", ".join(repr(s) for s in self._registry.scopes),
        )

    def _add_binding(self, binding: Binding) -> None:
        factory = self._create_factory(binding)
        self._registry.install(binding.scope, binding.interface, factory)
        if binding.implementation is not binding.interface:
            self._registry.install(binding.scope, binding.implementation, factory)
        logger.debug(
            "Bound %s to %s in scope %r",
            _name(binding.interface), type(factory).__name__, binding.scope,
        )

    def _create_factory(self, binding: Binding) -> Factory:
        if binding.has_instance:
            return InstanceFactory(binding.instance)
        if binding.singleton:
            provider = binding.provider
            if provider is None:
                provider = ConstructorInjectionProvider(binding.implementation, binding.scope)
            return SingletonFactory(provider, self)
        raise UnsupportedBindingError(binding.interface)

    def get_instance(self, interface: Type[T], scope: Hashable = DEFAULT_SCOPE) -> T:
        """Resolve ``interface`` in ``scope``.

        Lookup order:

        1. the binding in ``scope``
        2. the binding in the default scope
        3. implicit construction of ``interface`` itself, resolving its
           constructor parameters in ``scope``

        Args:
            interface: The type to resolve
            scope: Scope key, the default scope when omitted

        Returns:
            The resolved instance

        Raises:
            NullResolutionError: When the binding produced None
            UnresolvedTypeError: When there is no binding and implicit
                construction is impossible or failed
            InstantiationError: When a singleton binding could not
                construct its implementation
        """
        factory = self._registry.lookup(scope, interface)

        if factory is not None:
            # explicit binding
            instance = factory.get(interface)
            if instance is None:
                raise NullResolutionError(interface)
            self._save_for_dump(interface, instance, True)
            return instance

        if not is_constructible(interface):
            raise UnresolvedTypeError(interface, scope, "it has no public constructor")

        # implicit binding, only works for concrete classes
        try:
            instance = instantiate(interface, self, scope)
        except Exception as e:
            raise UnresolvedTypeError(
                interface, scope, "it could not be instantiated as a concrete class"
            ) from e
        logger.debug("Implicitly constructed %s for scope %r", _name(interface), scope)
        self._save_for_dump(interface, instance, False)
        return instance

    def __getitem__(self, interface: Type[T]) -> T:
        """Support subscript syntax: ``injector[Type]``."""
        return self.get_instance(interface)

    def _save_for_dump(self, interface: Any, instance: Any, explicit: bool) -> None:
        if not self.debug:
            return
        if self._is_recorded(interface, instance):
            return
        # introspection stays outside the lock
        record = InstantiatedObject.create(instance, explicit)
        with self._created_lock:
            records = self._created.setdefault(interface, [])
            if not any(r.instance is instance for r in records):
                records.append(record)

    def _is_recorded(self, interface: Any, instance: Any) -> bool:
        with self._created_lock:
            return any(r.instance is instance for r in self._created.get(interface, ()))

    def dump(self) -> List[str]:
        """Render the recorded object graph as PlantUML lines.

        Only instances created while ``debug`` was set are included;
        without debug the diagram is empty.
        """
        with self._created_lock:
            created = {key: list(records) for key, records in self._created.items()}
        return render_plantuml(created)


def create_injector(*configs: Configuration, debug: bool = False) -> Injector:
    """Create an injector from modules or configuration callables.

    Example::

        injector = create_injector(
            lambda binder: binder.bind(list).to_instance([]),
            DatabaseModule(),
            debug=True,
        )
    """
    return Injector(*configs, debug=debug)


def _name(t: Any) -> str:
    return t.__name__ if hasattr(t, '__name__') else str(t)
