"""
Constructor Resolution

This module finds out how a class is constructed and builds it with its
dependencies resolved through the injector. It is used both for implicit
resolution (types without a binding) and by singleton bindings without a
custom provider.

Constructor descriptors come from two sources, in this order:

- an explicit manifest, filled with ``register_constructor()`` or the
  ``@constructor(...)`` class decorator
- introspection of the class signature (``__init__`` or a pure Python
  ``__new__``) and its type hints

The first descriptor is always the one used. Classes with several
registered constructors are not disambiguated.
"""

import inspect
import logging
import threading
import typing
from dataclasses import dataclass
from typing import Any, Callable, Dict, Hashable, List, Optional, Tuple, Type, TYPE_CHECKING

from .exceptions import InstantiationError

if TYPE_CHECKING:
    from .injector import AbstractInjector

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ConstructorParameter:
    """One constructor parameter. ``name`` is None for positional passing."""
    name: Optional[str]
    type: Any


@dataclass(frozen=True)
class ConstructorDescriptor:
    """Callable building the class plus its ordered parameters."""
    factory: Callable
    parameters: Tuple[ConstructorParameter, ...] = ()

    @property
    def parameter_types(self) -> List[Any]:
        return [p.type for p in self.parameters]


# Process-wide: shared by every injector, filled at import time by @constructor
_manifest: Dict[Type, List[ConstructorDescriptor]] = {}
_manifest_lock = threading.Lock()


def register_constructor(cls: Type, *parameter_types: Any, factory: Optional[Callable] = None) -> None:
    """Declare a constructor for ``cls`` explicitly.

    Parameters are passed positionally, in the given order. ``factory``
    defaults to the class itself; pass a classmethod or function to
    build the instance differently.

    Example::

        register_constructor(Repository, Database, Cache)
        register_constructor(Client, Settings, factory=Client.from_settings)
    """
    descriptor = ConstructorDescriptor(
        factory=factory if factory is not None else cls,
        parameters=tuple(ConstructorParameter(None, t) for t in parameter_types),
    )
    with _manifest_lock:
        _manifest.setdefault(cls, []).append(descriptor)


def clear_constructors(*classes: Any) -> None:
    """Forget registered constructors of ``classes``, or of every class when
    called without arguments.

    The manifest is process-wide, so tests registering constructors for
    throwaway keys should clean up after themselves.
    """
    with _manifest_lock:
        if not classes:
            _manifest.clear()
        for cls in classes:
            _manifest.pop(cls, None)


def constructor(*parameter_types: Any):
    """Class decorator form of ``register_constructor()``.

    Example::

        @constructor(Database, Cache)
        class Repository:
            def __init__(self, db, cache): ...
    """

    def decorate(cls: Type) -> Type:
        register_constructor(cls, *parameter_types)
        return cls

    return decorate


def is_constructible(cls: Any) -> bool:
    """Whether ``cls`` exposes a public constructor.

    Abstract classes, protocols and non-class keys (generic aliases,
    strings) are not constructible unless a constructor was registered.
    """
    if cls in _manifest:
        return True
    if not inspect.isclass(cls):
        return False
    if inspect.isabstract(cls):
        return False
    return not getattr(cls, '_is_protocol', False)


def constructor_descriptors(cls: Type) -> List[ConstructorDescriptor]:
    registered = _manifest.get(cls)
    if registered:
        return list(registered)
    return [ConstructorDescriptor(factory=cls, parameters=tuple(_introspect_parameters(cls)))]


def instantiate(cls: Type, injector: 'AbstractInjector', scope: Hashable) -> Any:
    """Build ``cls`` using its first constructor.

    Each parameter is resolved with ``injector.get_instance(type, scope)``,
    in declaration order.

    Raises:
        InstantiationError: When the constructor can not be analysed, a
            parameter can not be resolved, or the constructor raises.
            The original exception is chained.
    """
    try:
        descriptor = constructor_descriptors(cls)[0]
        if not descriptor.parameters:
            return descriptor.factory()

        args = []
        kwargs = {}
        for parameter in descriptor.parameters:
            value = injector.get_instance(parameter.type, scope=scope)
            if parameter.name is None:
                args.append(value)
            else:
                kwargs[parameter.name] = value
        logger.debug(
            "Instantiating %s with %s",
            _name(cls), ", ".join(_name(t) for t in descriptor.parameter_types),
        )
        return descriptor.factory(*args, **kwargs)
    except InstantiationError as e:
        if e.target is cls:
            raise
        raise InstantiationError(cls, str(e)) from e
    except Exception as e:
        raise InstantiationError(cls, f"{type(e).__name__}: {e}") from e


def _introspect_parameters(cls: Type) -> List[ConstructorParameter]:
    """Read the parameters of the class's constructor.

    The signature follows ``inspect.signature(cls)``, so a user-defined
    ``__new__`` (as on ``NamedTuple`` classes) counts as well as
    ``__init__``. ``*args``, ``**kwargs`` and parameters with a default
    value are skipped.
    """
    constructor_fn = _constructor_function(cls)
    sig = _constructor_signature(cls)
    hints = _resolve_type_hints(constructor_fn)
    where = f"{_name(cls)}.{getattr(constructor_fn, '__name__', '__init__')}"

    parameters = []
    for param_name, param in sig.parameters.items():
        if param.kind in (inspect.Parameter.VAR_POSITIONAL, inspect.Parameter.VAR_KEYWORD):
            continue

        if param.default is not inspect.Parameter.empty:
            continue

        if param.annotation is inspect.Parameter.empty:
            raise InstantiationError(
                cls,
                f"missing type hint for parameter '{param_name}' in {where}. "
                f"Constructor injection requires type hints for all parameters "
                f"without a default value.",
            )

        param_type = hints.get(param_name, param.annotation)
        if isinstance(param_type, str):
            param_type = _resolve_string_annotation(cls, where, param_name, param_type)

        name = None if param.kind == inspect.Parameter.POSITIONAL_ONLY else param_name
        parameters.append(ConstructorParameter(name, param_type))

    return parameters


def _constructor_signature(cls: Type) -> inspect.Signature:
    try:
        return inspect.signature(cls)
    except (ValueError, TypeError):
        # some builtins expose no class signature, only a slot wrapper
        pass
    try:
        sig = inspect.signature(cls.__init__)
    except (ValueError, TypeError) as e:
        raise InstantiationError(
            cls, f"cannot inspect {_name(cls)}.__init__: {e}"
        ) from e
    return sig.replace(parameters=list(sig.parameters.values())[1:])


def _constructor_function(cls: Type) -> Optional[Callable]:
    """The pure Python ``__new__`` or ``__init__`` closest in the MRO,
    ``__new__`` first, matching what ``inspect.signature`` picks."""
    for base in cls.__mro__:
        for name in ('__new__', '__init__'):
            if name in vars(base):
                fn = getattr(base, name)
                if inspect.isfunction(fn):
                    return fn
    return None


def _resolve_type_hints(fn: Optional[Callable]) -> Dict[str, Any]:
    if fn is None:
        return {}
    try:
        return typing.get_type_hints(fn)
    except Exception:
        # Unresolvable hints fall back to the raw annotations
        return {}


def _resolve_string_annotation(cls: Type, where: str, param_name: str, annotation: str) -> Any:
    """Evaluate a forward reference in the namespace of the class's module."""
    module = inspect.getmodule(cls)
    namespace: Dict[str, Any] = {}
    if module is not None:
        namespace.update(vars(module))
    namespace.update(vars(cls))

    try:
        return eval(annotation, namespace)
    except NameError as e:
        raise InstantiationError(
            cls,
            f"cannot resolve forward reference '{annotation}' for parameter "
            f"'{param_name}' in {where}. "
            f"Hint: Ensure '{annotation}' is defined at module level.",
        ) from e
    except Exception as e:
        raise InstantiationError(
            cls,
            f"failed to resolve forward reference '{annotation}' for parameter "
            f"'{param_name}' in {where}: {type(e).__name__}: {e}",
        ) from e


def _name(t: Any) -> str:
    return t.__name__ if hasattr(t, '__name__') else str(t)
