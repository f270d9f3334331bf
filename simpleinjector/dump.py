"""
Debug Dump

Records of instances created by an injector in debug mode, and their
rendering as a PlantUML class diagram.
"""

import inspect
import re
from dataclasses import dataclass, field
from typing import Any, Dict, List, Set

from .constructor import constructor_descriptors
from .exceptions import InjectorError

# Dependencies with more dependees than this are drawn with a longer edge
CROWDED_DEPENDENCY = 5


@dataclass
class InstantiatedObject:
    """One created instance: whether it came from an explicit binding, and
    the constructor parameter types of its class."""
    instance: Any
    explicit: bool
    dependencies: List[Any] = field(default_factory=list)

    @classmethod
    def create(cls, instance: Any, explicit: bool) -> 'InstantiatedObject':
        try:
            dependencies = constructor_descriptors(type(instance))[0].parameter_types
        except InjectorError:
            dependencies = []
        return cls(instance, explicit, dependencies)


def render_plantuml(created: Dict[Any, List[InstantiatedObject]]) -> List[str]:
    """Build diagram lines from ``{bound type: [records]}``.

    Abstract keys are declared as interfaces, keys satisfied by another
    class get a realization arrow, and constructor parameters become
    dependency edges.
    """
    interfaces: Set[str] = set()
    implemented_by: Set[str] = set()
    dependees_by_dependency: Dict[str, List[str]] = {}

    for interface, records in created.items():
        abstraction = _simple_name(interface)
        if _is_interface(interface):
            interfaces.add(f"interface {abstraction}")
        for record in records:
            implementation = _simple_name(type(record.instance))
            if implementation != abstraction:
                implemented_by.add(f"{implementation} .up.|> {abstraction}")
            for dependency in record.dependencies:
                dependees_by_dependency.setdefault(_simple_name(dependency), []).append(implementation)

    depends_on: Set[str] = set()
    for dependency, dependees in dependees_by_dependency.items():
        arrow = " o---down- " if len(dependees) > CROWDED_DEPENDENCY else " o-down- "
        for dependee in dependees:
            depends_on.add(f"{dependee}{arrow}{dependency}")

    lines = ["@startuml", "hide empty methods", "hide empty fields"]
    lines.extend(sorted(interfaces))
    lines.extend(sorted(implemented_by))
    lines.extend(sorted(depends_on))
    lines.append("@enduml")
    return lines


def _simple_name(t: Any) -> str:
    name = t.__name__ if hasattr(t, '__name__') else str(t)
    return re.sub(r'[^A-Za-z0-9]', '_', name)


def _is_interface(t: Any) -> bool:
    return inspect.isclass(t) and (inspect.isabstract(t) or getattr(t, '_is_protocol', False))
