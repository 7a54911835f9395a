"""Parameter validation for graph generators.

Every generator validates its parameters through these helpers before it
touches the graph, so a rejected call leaves the store unchanged.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import TYPE_CHECKING

from graphw.exceptions import (
    DuplicateLabelError,
    NegativeSizeError,
    ParameterConstraintError,
)

if TYPE_CHECKING:
    from graphw.graph.core import Graph


def require_non_negative(**params: int) -> None:
    """Raise NegativeSizeError for the first negative keyword argument."""
    for name, value in params.items():
        if value < 0:
            raise NegativeSizeError(name, value)


def require_all_non_negative(name: str, values: Iterable[int]) -> list[int]:
    """Validate every element of a size list; returns it as a list."""
    sizes = list(values)
    for index, value in enumerate(sizes):
        if value < 0:
            raise NegativeSizeError(f"{name}[{index}]", value)
    return sizes


def require_at_least(name: str, value: int, minimum: int) -> None:
    """Minimum-value constraint (e.g. a clique needs at least two nodes)."""
    if value < minimum:
        raise ParameterConstraintError(name, value, f"{name} >= {minimum}")


def require_in_range(name: str, value: int, low: int, high: int) -> None:
    """Relational constraint ``low <= value <= high``."""
    if not low <= value <= high:
        raise ParameterConstraintError(name, value, f"{low} <= {name} <= {high}")


def require_free_labels(graph: Graph, count: int) -> None:
    """Generated nodes are labelled by id; none of those labels may be taken.

    A caller-chosen label such as ``"3"`` on node 0 would otherwise make a
    generator fail halfway through.
    """
    start = graph.number_of_nodes()
    for node_id in range(start, start + count):
        label = str(node_id)
        if label in graph:
            raise DuplicateLabelError(label)
