"""
Binding

Data class describing how one type is resolved
"""

from dataclasses import dataclass
from typing import Any, Hashable, Optional, Type, TYPE_CHECKING

if TYPE_CHECKING:
    from .provider import Provider


DEFAULT_SCOPE = "DEFAULT_SCOPE"


class _Unset:
    """Marker for a binding without an instance (``None`` is a valid argument)."""

    def __repr__(self) -> str:
        return "UNSET"


UNSET: Any = _Unset()


@dataclass
class Binding:
    """Ongoing binding.

    Created by ``Binder.bind()`` and configured through the chainable
    methods below. The injector reads it once, after configuration.

    Example::

        binder.bind(Repository).to(SqlRepository).as_singleton()
        binder.bind(Settings).to_instance(settings)
        binder.bind(Session).to_provider(open_session).as_singleton().for_scope("request")
    """
    interface: Type
    implementation: Optional[Type] = None
    instance: Any = UNSET
    provider: Optional['Provider'] = None
    singleton: bool = False
    scope: Hashable = DEFAULT_SCOPE

    def __post_init__(self):
        if self.implementation is None:
            self.implementation = self.interface

    def to(self, implementation: Type) -> 'Binding':
        """Resolve the bound type with another (usually concrete) class."""
        self.implementation = implementation
        return self

    def to_instance(self, instance: Any) -> 'Binding':
        """Always resolve the bound type to ``instance``."""
        self.instance = instance
        return self

    def to_provider(self, provider) -> 'Binding':
        """Create the instance with ``provider``.

        ``provider`` is either a ``Provider`` or a callable taking the
        injector.
        """
        from .provider import as_provider

        self.provider = as_provider(provider)
        return self

    def as_singleton(self) -> 'Binding':
        self.singleton = True
        return self

    def for_scope(self, scope: Hashable) -> 'Binding':
        self.scope = scope
        return self

    @property
    def has_instance(self) -> bool:
        return self.instance is not UNSET
