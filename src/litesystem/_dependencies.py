from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from ._errors import ResolutionError
from ._property import get_property, set_property


if TYPE_CHECKING:
    from collections.abc import Mapping

    from ._component import Definition


logger = logging.getLogger(__name__)


def get_dependencies(
    name: str,
    definitions: Mapping[str, Definition],
    active_components: Mapping[str, Any],
) -> dict[str, Any]:
    """Build the dependency bag handed to the `start` of component `name`.

    For each declared dependency the value is read from the active component,
    sliced by `source` when given, else by `name` when the provider is scoped,
    then written at the (possibly dotted) `destination`.

    Missing optional dependencies are skipped; a missing required one raises
    `ResolutionError`.
    """
    definition = definitions.get(name)
    dependencies = definition.dependencies if definition is not None else []

    bag: dict[str, Any] = {}
    for dep in dependencies:
        if dep.component not in active_components:
            if dep.optional:
                logger.debug("Component %s has an unsatisfied optional dependency on %s", name, dep.component)
                continue
            raise ResolutionError(name, dep.component)

        provider = definitions.get(dep.component)
        source = dep.source or (name if provider is not None and provider.scoped else None)
        value = active_components[dep.component]
        set_property(bag, dep.destination, get_property(value, source) if source else value)

    return bag
