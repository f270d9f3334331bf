# Public API
from .binder import Binder, Module
from .binding import Binding, DEFAULT_SCOPE
from .constructor import clear_constructors, constructor, register_constructor
from .exceptions import (
    DuplicateBindingError,
    InjectorError,
    InstantiationError,
    NullResolutionError,
    UnresolvedTypeError,
    UnsupportedBindingError,
)
from .injector import AbstractInjector, Injector, create_injector
from .provider import Provider

__all__ = [
    "create_injector",
    "AbstractInjector",
    "Injector",
    "Binder",
    "Binding",
    "Module",
    "Provider",
    "DEFAULT_SCOPE",
    # Constructors
    "constructor",
    "register_constructor",
    "clear_constructors",
    # Exceptions
    "InjectorError",
    "DuplicateBindingError",
    "UnsupportedBindingError",
    "UnresolvedTypeError",
    "NullResolutionError",
    "InstantiationError",
]

__version__ = '0.1.0'
