from __future__ import annotations

import logging
import random
from types import MappingProxyType
from typing import TYPE_CHECKING, Any

from ._component import Definition, Dependency, as_lifecycle, invoke
from ._dependencies import get_dependencies
from ._errors import (
    DependencyInUseError,
    DuplicateComponentError,
    NoCurrentComponentError,
    UnknownComponentError,
)
from ._property import set_property
from ._sort import sort_components


if TYPE_CHECKING:
    from collections.abc import Mapping

    from ._component import DependencySpec


logger = logging.getLogger(__name__)


def random_name() -> str:
    return f"Z-{random.randint(1, 100_000_000)}"  # noqa: S311


def build_system(components: Mapping[str, Any]) -> dict[str, Any]:
    """Nest active components by their dotted names, `"a.b"` landing at `system["a"]["b"]`."""
    system: dict[str, Any] = {}
    for name, component in components.items():
        set_property(system, name, component)
    return system


class System:
    """Lifecycle container.

    - register components by name, with dependencies on other components
    - start them in dependency order, passing each its dependencies
    - stop them in reverse order
    - scoped components hand each dependant its own slice
    """

    def __init__(self, *, name: str | None = None) -> None:
        self.name = name or random_name()
        self._definitions: dict[str, Definition] = {}
        self._current: Definition | None = None
        self._active: dict[str, Any] = {}

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self.name!r}, components={list(self._definitions)!r})"

    @property
    def definitions(self) -> Mapping[str, Definition]:
        return MappingProxyType(self._definitions)

    @property
    def active(self) -> Mapping[str, Any]:
        """Started values keyed by component name."""
        return MappingProxyType(self._active)

    def add(self, name: str, component: Any = None, *, scoped: bool = False) -> System:
        """Register a new component.

        Example:
          system.add("config", {"db": {"url": "..."}}, scoped=True)
          system.add("db", Database()).depends_on("config")
          system.add("repos").depends_on("db")  # pass-through of its dependencies

        """
        logger.debug("Adding component %s to system %s", name, self.name)

        if name in self._definitions:
            raise DuplicateComponentError(name)

        return self._set(name, component, scoped=scoped)

    def set(self, name: str, component: Any, *, scoped: bool = False) -> System:
        """Register or replace a component, e.g. to substitute a test double."""
        logger.debug("Setting component %s on system %s", name, self.name)

        return self._set(name, component, scoped=scoped)

    def configure(self, component: Any) -> System:
        """Register `component` as the scoped `config` component."""
        logger.debug("Adding component config to system %s", self.name)

        return self._set("config", component, scoped=True)

    def _set(self, name: str, component: Any, *, scoped: bool) -> System:
        definition = Definition(component=as_lifecycle(component), scoped=scoped)
        self._definitions[name] = definition
        self._current = definition
        return self

    def remove(self, name: str) -> System:
        logger.debug("Removing component %s from system %s", name, self.name)

        if name not in self._definitions:
            raise UnknownComponentError(name)

        for key, definition in self._definitions.items():
            if definition.depends_on(name):
                raise DependencyInUseError(name, key)

        del self._definitions[name]
        self._current = None
        return self

    def merge(self, subsystem: System, *, override: bool = False) -> System:
        return self.include(subsystem, override=override)

    def include(self, subsystem: System, *, override: bool = False) -> System:
        """Copy every definition of `subsystem` into this system.

        Name collisions raise `DuplicateComponentError` unless `override` is set,
        in which case the included definition wins.
        """
        logger.debug("Including definitions from sub system %s into system %s", subsystem.name, self.name)

        incoming = subsystem.definitions
        if not override:
            for name in incoming:
                if name in self._definitions:
                    raise DuplicateComponentError(name)

        for name, definition in incoming.items():
            self._definitions[name] = definition.copy()

        return self

    def depends_on(self, *dependencies: DependencySpec) -> System:
        """Declare dependencies of the most recently added or set component.

        Each dependency is a component name, or a mapping with `component` and
        optional `destination`, `source` and `optional` keys.
        """
        if self._current is None:
            raise NoCurrentComponentError

        self._current.dependencies.extend(Dependency.parse(dep) for dep in dependencies)
        return self

    async def start(self) -> dict[str, Any]:
        """Start every registered component not already active.

        A failing component propagates its own error; components started
        before it stay active until `stop()`.
        """
        logger.debug("Starting system %s", self.name)

        for name in sort_components(self._definitions, ascending=True):
            if name in self._active:
                continue

            logger.debug("Starting component %s", name)
            definition = self._definitions[name]
            dependencies = get_dependencies(name, self._definitions, self._active)
            self._active[name] = await invoke(definition.component.start, dependencies)
            logger.debug("Component %s started", name)

        logger.debug("Building system %s", self.name)
        system = build_system(self._active)

        logger.debug("System %s started", self.name)
        return system

    async def stop(self) -> None:
        """Stop active components in reverse dependency order."""
        logger.debug("Stopping system %s", self.name)

        for name in sort_components(self._definitions, ascending=False):
            if name not in self._active:
                continue

            logger.debug("Stopping component %s", name)
            stop = self._definitions[name].component.stop
            if stop is not None:
                await invoke(stop)
            del self._active[name]
            logger.debug("Component %s stopped", name)

        logger.debug("System %s stopped", self.name)

    async def restart(self) -> dict[str, Any]:
        await self.stop()
        return await self.start()
