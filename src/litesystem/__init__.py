"""Minimal lifecycle container.

This package wires named components into a dependency graph, starts them in
dependency order and stops them in reverse, handing each component the started
values of the components it depends on.

Exports:
- `System`: Registry of components plus the start/stop/restart lifecycle.
- `Component`, `StoppableComponent`: Protocols for objects with `start`/`stop`.
- `Dependency`: A declared dependency (component, destination, source, optional).
- Errors raised by registration, sorting and dependency resolution.
- `get_property`, `has_property`, `set_property`: dotted-path helpers used to
  shape dependencies and the started system.
"""

from ._component import Component, ComponentKind, Definition, Dependency, Lifecycle, StoppableComponent
from ._errors import (
    CyclicDependencyError,
    DependencyInUseError,
    DuplicateComponentError,
    NoCurrentComponentError,
    ResolutionError,
    UnknownComponentError,
)
from ._property import get_property, has_property, set_property
from ._system import System


__all__ = [
    "Component",
    "ComponentKind",
    "CyclicDependencyError",
    "Definition",
    "Dependency",
    "DependencyInUseError",
    "DuplicateComponentError",
    "Lifecycle",
    "NoCurrentComponentError",
    "ResolutionError",
    "StoppableComponent",
    "System",
    "UnknownComponentError",
    "get_property",
    "has_property",
    "set_property",
]
