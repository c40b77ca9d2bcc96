from __future__ import annotations


class DuplicateComponentError(KeyError):
    def __init__(self, name: str) -> None:
        super().__init__(f'Component "{name}" is already registered')
        self.name = name


class UnknownComponentError(KeyError):
    def __init__(self, name: str) -> None:
        super().__init__(f'Component "{name}" is not registered')
        self.name = name


class DependencyInUseError(RuntimeError):
    def __init__(self, name: str, dependant: str) -> None:
        super().__init__(f'Component "{name}" is a dependency of "{dependant}"')
        self.name = name
        self.dependant = dependant


class NoCurrentComponentError(RuntimeError):
    def __init__(self) -> None:
        super().__init__("You must add a component before calling depends_on")


class CyclicDependencyError(ValueError):
    """Raised when the dependency graph cannot be ordered.

    `cycle` lists the participating names, first and last being the same node.
    """

    def __init__(self, cycle: list[str]) -> None:
        self.cycle = cycle
        self.node = cycle[-1] if cycle else None
        super().__init__(f'Cyclic dependency, node was:"{self.node}"')


class ResolutionError(RuntimeError):
    def __init__(self, name: str, dependency: str) -> None:
        super().__init__(f"Component {name} has an unsatisfied dependency on {dependency}")
        self.name = name
        self.dependency = dependency
