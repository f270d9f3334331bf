"""
Binder and Module

A Binder collects the bindings of one configuration pass. A Module is a
reusable configuration unit that fills a Binder; plain callables taking a
Binder work as well.

Example::

    class PersistenceModule(Module):
        def configure(self, binder):
            binder.bind(Database).to(PostgresDatabase).as_singleton()
            binder.bind(Settings).to_instance(settings)

    injector = create_injector(PersistenceModule())
"""

from abc import ABC, abstractmethod
from typing import Callable, List, Type, Union

from .binding import Binding


class Binder:
    """Creates new bindings and keeps them, in order, for the injector."""

    def __init__(self):
        self._bindings: List[Binding] = []

    def bind(self, interface: Type) -> Binding:
        """Start a binding for ``interface``.

        The binding defaults to the default scope and to ``interface``
        itself as implementation. Finish it with ``to_instance()`` or
        ``as_singleton()``.
        """
        binding = Binding(interface)
        self._bindings.append(binding)
        return binding

    @property
    def bindings(self) -> List[Binding]:
        return list(self._bindings)


class Module(ABC):
    """Configuration unit for an injector.

    Subclass and implement ``configure()``. Modules are applied in the
    order they are passed to ``create_injector()``.
    """

    @abstractmethod
    def configure(self, binder: Binder) -> None:
        pass


Configuration = Union[Module, Callable[[Binder], None]]


def apply_configuration(config: Configuration, binder: Binder) -> None:
    if isinstance(config, Module):
        config.configure(binder)
    elif callable(config):
        config(binder)
    else:
        raise TypeError(
            f"Expected a Module or a callable taking a Binder, got {type(config).__name__}"
        )
