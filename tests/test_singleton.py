"""
Singleton Factory Tests

Tests for the lazily initialized, memoized singleton factory:
- Provider invoked at most once
- Retry after a failing provider
- None results are not cached
"""

import unittest

from simpleinjector.factory import InstanceFactory, SelfFactory, SingletonFactory
from simpleinjector.provider import CallableProvider


class Database:
    pass


class TestSingletonFactory(unittest.TestCase):
    """State machine of SingletonFactory."""

    def test_starts_uninitialized(self):
        """Nothing is created before the first get()."""
        calls = []
        factory = SingletonFactory(CallableProvider(lambda i: calls.append(i) or Database()), None)

        self.assertFalse(factory.initialized)
        self.assertEqual(calls, [])

    def test_provider_runs_once(self):
        """The first get() creates the instance, later calls reuse it."""
        calls = []

        def provide(injector):
            calls.append(injector)
            return Database()

        injector = object()
        factory = SingletonFactory(CallableProvider(provide), injector)

        first = factory.get(Database)
        second = factory.get(Database)

        self.assertTrue(factory.initialized)
        self.assertIs(first, second)
        self.assertEqual(calls, [injector])

    def test_retry_after_failure(self):
        """A failing provider leaves the factory uninitialized."""
        attempts = []

        def provide(injector):
            attempts.append(1)
            if len(attempts) == 1:
                raise RuntimeError("database not ready")
            return Database()

        factory = SingletonFactory(CallableProvider(provide), None)

        with self.assertRaises(RuntimeError):
            factory.get(Database)
        self.assertFalse(factory.initialized)

        db = factory.get(Database)

        self.assertIsInstance(db, Database)
        self.assertIs(factory.get(Database), db)
        self.assertEqual(len(attempts), 2)

    def test_none_is_not_cached(self):
        """A provider returning None runs again on the next call."""
        results = [None, Database()]
        factory = SingletonFactory(CallableProvider(lambda i: results.pop(0)), None)

        self.assertIsNone(factory.get(Database))
        self.assertFalse(factory.initialized)
        self.assertIsInstance(factory.get(Database), Database)
        self.assertTrue(factory.initialized)


class TestOtherFactories(unittest.TestCase):
    """InstanceFactory and SelfFactory."""

    def test_instance_factory(self):
        db = Database()
        self.assertIs(InstanceFactory(db).get(Database), db)

    def test_self_factory(self):
        injector = object()
        self.assertIs(SelfFactory(injector).get(object), injector)


if __name__ == '__main__':
    unittest.main()
