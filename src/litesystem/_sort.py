from __future__ import annotations

import logging
from graphlib import CycleError, TopologicalSorter
from typing import TYPE_CHECKING

from ._errors import CyclicDependencyError


if TYPE_CHECKING:
    from collections.abc import Mapping

    from ._component import Definition


logger = logging.getLogger(__name__)


def sort_components(definitions: Mapping[str, Definition], *, ascending: bool = True) -> list[str]:
    """Order component names so every dependency precedes its dependants.

    Edges pointing at names missing from `definitions` are ignored here; they
    are checked per edge when dependencies are resolved. The descending order
    is the exact reverse of the ascending one.
    """
    sorter: TopologicalSorter[str] = TopologicalSorter()
    for name, definition in definitions.items():
        sorter.add(name, *(dep.component for dep in definition.dependencies if dep.component in definitions))

    try:
        ordered = list(sorter.static_order())
    except CycleError as exc:
        raise CyclicDependencyError(list(exc.args[1])) from exc

    if not ascending:
        ordered.reverse()

    logger.debug("Sorted components (%s): %s", "ascending" if ascending else "descending", ordered)
    return ordered
