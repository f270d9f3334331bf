"""
Test Configuration and Utilities

Common base classes and helper functions for SimpleInjector tests
"""

import unittest
from typing import Callable, Type

from simpleinjector import Binder, Injector, create_injector


class InjectorTestCase(unittest.TestCase):
    """
    Base test case class for SimpleInjector tests.

    Provides ``create()`` which builds an injector from configuration
    callables and keeps it on ``self.injector``.
    """

    injector: Injector = None

    def create(self, *configs, debug: bool = False) -> Injector:
        self.injector = create_injector(*configs, debug=debug)
        return self.injector

    def tearDown(self):
        self.injector = None


def bind_singletons(*service_classes: Type) -> Callable[[Binder], None]:
    """
    Create a configuration binding each class as a singleton.

    Args:
        *service_classes: Classes to bind

    Returns:
        A configuration callable for ``create_injector()``

    Example:
        >>> injector = create_injector(bind_singletons(Database, CacheService))
    """

    def configure(binder: Binder) -> None:
        for cls in service_classes:
            binder.bind(cls).as_singleton()

    return configure
