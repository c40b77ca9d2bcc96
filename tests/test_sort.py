import pytest

from litesystem import CyclicDependencyError, Definition, Dependency
from litesystem._component import as_lifecycle
from litesystem._sort import sort_components


def definition(*dependencies, optional=False):
    return Definition(
        component=as_lifecycle({}),
        dependencies=[Dependency(component=d, destination=d, optional=optional) for d in dependencies],
    )


def chain():
    return {
        "a": definition("b"),
        "c": definition(),
        "b": definition("c"),
    }


def test_sort_ascending_places_dependencies_first():
    assert sort_components(chain(), ascending=True) == ["c", "b", "a"]


def test_sort_descending_is_reverse_of_ascending():
    ascending = sort_components(chain(), ascending=True)
    assert sort_components(chain(), ascending=False) == list(reversed(ascending))


def test_sort_respects_every_edge_in_a_diamond():
    definitions = {
        "app": definition("db", "cache"),
        "db": definition("config"),
        "cache": definition("config"),
        "config": definition(),
        "metrics": definition(),
    }

    order = sort_components(definitions, ascending=True)

    assert sorted(order) == sorted(definitions)
    for name, d in definitions.items():
        for dep in d.dependencies:
            assert order.index(dep.component) < order.index(name)


def test_sort_raises_on_cycle():
    definitions = {"a": definition("b"), "b": definition("a")}

    with pytest.raises(CyclicDependencyError, match="Cyclic dependency") as exc_info:
        sort_components(definitions, ascending=True)

    assert exc_info.value.node in {"a", "b"}
    assert set(exc_info.value.cycle) == {"a", "b"}


def test_sort_raises_on_self_dependency():
    with pytest.raises(CyclicDependencyError):
        sort_components({"a": definition("a")}, ascending=True)


def test_sort_ignores_dependencies_outside_definitions():
    definitions = {"a": definition("b", optional=True)}
    assert sort_components(definitions, ascending=True) == ["a"]


def test_sort_empty():
    assert sort_components({}, ascending=True) == []
