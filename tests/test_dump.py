"""
Debug Dump Tests

Tests for recording created instances in debug mode and rendering
them as a PlantUML diagram.
"""

import os
import sys
import typing  # referenced by the annotation of Odd
import unittest

sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from simpleinjector.dump import InstantiatedObject, render_plantuml
from conftest import InjectorTestCase
from fixtures import Database, IDatabase, IRepository, PostgresDatabase, SqlRepository


FRAME = ["@startuml", "hide empty methods", "hide empty fields", "@enduml"]


def _bind_repository(binder):
    binder.bind(IDatabase).to(PostgresDatabase).as_singleton()
    binder.bind(IRepository).to(SqlRepository).as_singleton()


class Consumer1:
    def __init__(self, db: Database):
        self.db = db


class Consumer2(Consumer1):
    pass


class Consumer3(Consumer1):
    pass


class Consumer4(Consumer1):
    pass


class Consumer5(Consumer1):
    pass


class Consumer6(Consumer1):
    pass


class Odd:
    """Annotation that does not resolve"""

    def __init__(self, thing: "typing.DoesNotExist"):
        self.thing = thing


class TestDump(InjectorTestCase):
    """Tests for Injector.dump()."""

    def test_dump_without_debug_is_empty(self):
        """Without debug mode nothing is recorded."""
        injector = self.create(_bind_repository)
        injector.get_instance(IRepository)

        self.assertEqual(injector.dump(), FRAME)

    def test_dump_graph(self):
        """Interfaces, implementations and dependencies are drawn."""
        injector = self.create(_bind_repository, debug=True)
        injector.get_instance(IRepository)

        lines = injector.dump()

        self.assertEqual(lines[:3], FRAME[:3])
        self.assertEqual(lines[-1], "@enduml")
        self.assertIn("interface IDatabase", lines)
        self.assertIn("interface IRepository", lines)
        self.assertIn("PostgresDatabase .up.|> IDatabase", lines)
        self.assertIn("SqlRepository .up.|> IRepository", lines)
        self.assertIn("SqlRepository o-down- IDatabase", lines)

    def test_same_instance_recorded_once(self):
        """Repeated resolutions of a singleton are one record."""
        injector = self.create(_bind_repository, debug=True)
        injector.get_instance(IDatabase)
        injector.get_instance(IDatabase)

        self.assertEqual(len(injector._created[IDatabase]), 1)
        self.assertTrue(injector._created[IDatabase][0].explicit)

    def test_implicit_instances_recorded(self):
        """Implicit instances are recorded as such."""
        injector = self.create(debug=True)
        injector.get_instance(Consumer1)

        record = injector._created[Consumer1][0]
        self.assertFalse(record.explicit)
        self.assertEqual(record.dependencies, [Database])
        self.assertIn("Consumer1 o-down- Database", injector.dump())

    def test_crowded_dependency(self):
        """Dependencies with many dependees get a longer edge."""
        injector = self.create(lambda binder: binder.bind(Database).as_singleton(), debug=True)
        for consumer in (Consumer1, Consumer2, Consumer3, Consumer4, Consumer5, Consumer6):
            injector.get_instance(consumer)

        lines = injector.dump()

        self.assertIn("Consumer6 o---down- Database", lines)
        self.assertNotIn("Consumer6 o-down- Database", lines)


    def test_unresolvable_annotation_does_not_break_lookup(self):
        """Recording an instance whose class has a broken hint still returns it."""
        odd = Odd(None)
        injector = self.create(lambda binder: binder.bind(Odd).to_instance(odd), debug=True)

        self.assertIs(injector.get_instance(Odd), odd)
        self.assertEqual(injector._created[Odd][0].dependencies, [])
        self.assertIn("@enduml", injector.dump())


class TestRenderPlantuml(unittest.TestCase):
    """Tests for render_plantuml() on hand-made records."""

    def test_empty(self):
        self.assertEqual(render_plantuml({}), FRAME)

    def test_names_are_sanitized(self):
        """Non-alphanumeric characters in names become underscores."""
        record = InstantiatedObject(Database(), True, ["my-dependency"])
        lines = render_plantuml({"db key": [record]})

        self.assertIn("Database .up.|> db_key", lines)
        self.assertIn("Database o-down- my_dependency", lines)


if __name__ == '__main__':
    unittest.main()
