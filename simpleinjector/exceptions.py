"""
SimpleInjector Exceptions

Custom exception hierarchy for the SimpleInjector DI framework
"""


def _type_name(interface) -> str:
    return interface.__name__ if hasattr(interface, '__name__') else str(interface)


class InjectorError(Exception):
    """
    Base exception for all SimpleInjector errors.

    All SimpleInjector-specific exceptions inherit from this class.
    You can catch this to handle any injector error generically.

    Example:
        >>> try:
        ...     service = injector.get_instance(MyService)
        ... except InjectorError as e:
        ...     print(f"DI error: {e}")
    """

    pass


class DuplicateBindingError(InjectorError):
    """
    Raised when the same type is bound twice in the same scope.

    This error occurs while the injector reads its configuration, so the
    injector is never created.

    Common causes:
        - Binding the same type twice in one configuration
        - Applying the same ``Module`` twice
        - ``bind(A).to(B)`` together with a separate ``bind(B)`` in the
          same scope (the alias already occupies ``B``)

    Solution:
        Bind each type once per scope, or move one of the bindings to a
        different scope::

            binder.bind(Database).as_singleton()
            binder.bind(Database).as_singleton().for_scope("request")
    """

    def __init__(self, interface, scope):
        self.interface = interface
        self.scope = scope
        super().__init__(
            f"Binding for {_type_name(interface)} already exists in scope {scope!r}"
        )


class UnsupportedBindingError(InjectorError):
    """
    Raised for a binding that is neither an instance nor a singleton.

    Only ``to_instance()`` and ``as_singleton()`` bindings are supported.

    Solution:
        Finish the binding with one of them::

            binder.bind(Database).to(PostgresDatabase).as_singleton()
    """

    def __init__(self, interface):
        self.interface = interface
        name = _type_name(interface)
        super().__init__(
            f"Binding for {name} is neither an instance nor a singleton. "
            f"Only singletons are supported.\n"
            f"Hint: binder.bind({name}).as_singleton()"
        )


class UnresolvedTypeError(InjectorError):
    """
    Raised when a requested type can not be resolved.

    The type has no binding in the requested scope nor in the default
    scope, and it either can not be constructed at all (abstract classes,
    protocols, non-class keys) or its implicit construction failed.
    When construction failed, the original error is available as
    ``__cause__``.

    Common causes:
        - Forgetting to bind an abstract type
        - A constructor parameter without a type hint
        - A dependency bound only in another, unrelated scope
    """

    def __init__(self, interface, scope, reason: str):
        self.interface = interface
        self.scope = scope
        super().__init__(
            f"{_type_name(interface)} was not bound for scope {scope!r} and {reason}. "
            f"Have you configured the injector correctly?"
        )


class NullResolutionError(InjectorError):
    """
    Raised when a binding resolved to ``None``.

    A provider returned nothing, or an instance binding was given ``None``.
    """

    def __init__(self, interface):
        self.interface = interface
        super().__init__(
            f"Binding for {_type_name(interface)} resolved to None. "
            f"Please fix the instantiation sequence!"
        )


class InstantiationError(InjectorError):
    """
    Raised when a class could not be instantiated through its constructor.

    Wraps failures while resolving constructor parameters and exceptions
    raised by the constructor itself. The original error is chained as
    ``__cause__``.
    """

    def __init__(self, target, message: str = ""):
        self.target = target
        detail = f": {message}" if message else ""
        super().__init__(f"Failed to instantiate {_type_name(target)}{detail}")
