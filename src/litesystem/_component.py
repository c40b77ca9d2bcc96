from __future__ import annotations

import inspect
from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING, Any, Protocol, TypeVar, Union, runtime_checkable


if TYPE_CHECKING:
    from collections.abc import Awaitable, Callable

T = TypeVar("T")
T_co = TypeVar("T_co", covariant=True)


@runtime_checkable
class Component(Protocol[T_co]):
    """Object shape accepted by `System.add`; `start` may be sync or async."""

    def start(self, dependencies: dict[str, Any]) -> T_co | Awaitable[T_co]: ...


@runtime_checkable
class StoppableComponent(Component[T_co], Protocol[T_co]):
    def stop(self) -> None | Awaitable[None]: ...


class ComponentKind(Enum):
    COMPONENT = "component"
    FUNCTION = "function"
    CONSTANT = "constant"
    DEFAULT = "default"


@dataclass(frozen=True)
class Lifecycle:
    """Canonical start/stop capability every registration is normalized into."""

    start: Callable[[dict[str, Any]], Any]
    stop: Callable[[], Any] | None = None
    kind: ComponentKind = ComponentKind.COMPONENT


@dataclass(frozen=True)
class Dependency:
    component: str
    destination: str
    source: str | None = None
    optional: bool = False

    _KEYS = frozenset({"component", "destination", "source", "optional"})

    @classmethod
    def parse(cls, spec: DependencySpec) -> Dependency:
        """Normalize a bare name or a mapping into a `Dependency`.

        A bare name `"db"` is `{"component": "db", "destination": "db"}`;
        a mapping without `destination` delivers into the component's name.
        """
        if isinstance(spec, Dependency):
            return spec

        if isinstance(spec, str):
            return cls(component=spec, destination=spec)

        if isinstance(spec, Mapping):
            unknown = set(spec) - cls._KEYS
            if unknown:
                msg = f"Unknown dependency option(s): {', '.join(sorted(unknown))}"
                raise ValueError(msg)
            if "component" not in spec:
                msg = f"Dependency {dict(spec)!r} must name a component"
                raise ValueError(msg)
            component = spec["component"]
            return cls(
                component=component,
                destination=spec.get("destination") or component,
                source=spec.get("source"),
                optional=bool(spec.get("optional", False)),
            )

        msg = f"Dependency must be a name or a mapping, not {type(spec).__name__}"
        raise TypeError(msg)


DependencySpec = Union[str, Mapping[str, Any], Dependency]


@dataclass
class Definition:
    component: Lifecycle
    dependencies: list[Dependency] = field(default_factory=list)
    scoped: bool = False

    def copy(self) -> Definition:
        return Definition(component=self.component, dependencies=list(self.dependencies), scoped=self.scoped)

    def depends_on(self, name: str) -> bool:
        return any(dep.component == name for dep in self.dependencies)


def _pass_through(dependencies: dict[str, Any]) -> dict[str, Any]:
    return dependencies


DEFAULT_COMPONENT = Lifecycle(start=_pass_through, kind=ComponentKind.DEFAULT)


def as_lifecycle(component: Any) -> Lifecycle:
    """Normalize a registration into a `Lifecycle`.

    - objects exposing a callable `start` keep their `start`/`stop`
    - other callables (functions, coroutine functions, classes) become `start`
    - anything else is a constant returned as-is
    - None is the pass-through default that returns its dependencies
    """
    if component is None:
        return DEFAULT_COMPONENT

    if isinstance(component, Lifecycle):
        return component

    if not inspect.isclass(component) and callable(getattr(component, "start", None)):
        stop = getattr(component, "stop", None)
        return Lifecycle(start=component.start, stop=stop if callable(stop) else None, kind=ComponentKind.COMPONENT)

    if callable(component):
        return Lifecycle(start=component, kind=ComponentKind.FUNCTION)

    return Lifecycle(start=lambda _: component, kind=ComponentKind.CONSTANT)


async def invoke(func: Callable[..., T | Awaitable[T]], *args: Any) -> T:
    """Call `func` and await the result when it is awaitable."""
    result = func(*args)
    if inspect.isawaitable(result):
        return await result
    return result
