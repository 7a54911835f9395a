"""Exceptions raised by graph construction and queries."""

from __future__ import annotations

from typing import Any


class GraphwError(Exception):
    """Base class for all graphw errors."""


class InvalidParameterError(GraphwError, ValueError):
    """A generator parameter failed validation.

    Raised before any mutation of the graph, so the store is left unchanged.

    Attributes:
        parameter: Name of the offending parameter
        value: The rejected value
        constraint: Human-readable constraint that was violated
        message: Human-readable error message
    """

    def __init__(
        self,
        parameter: str,
        value: Any,
        constraint: str,
        message: str | None = None,
    ) -> None:
        self.parameter = parameter
        self.value = value
        self.constraint = constraint
        self.message = message or self._default_message()
        super().__init__(self.message)

    def _default_message(self) -> str:
        return (
            f"Invalid value for '{self.parameter}': {self.value!r}\n\n"
            f"  -> Expected {self.constraint}"
        )


class NegativeSizeError(InvalidParameterError):
    """A size or count parameter is negative."""

    def __init__(self, parameter: str, value: Any) -> None:
        super().__init__(parameter, value, f"{parameter} >= 0")


class ParameterConstraintError(InvalidParameterError):
    """A parameter violates a minimum or relational constraint.

    Examples: ``r`` outside ``[1, n]`` for a Turan graph, fewer than two
    clique nodes for a barbell or lollipop.
    """


class DuplicateLabelError(GraphwError, ValueError):
    """A node with this label already exists in the graph.

    Attributes:
        label: The duplicated label
    """

    def __init__(self, label: str) -> None:
        self.label = label
        super().__init__(f"Duplicate node label: '{label}'")


class UnknownLabelError(GraphwError, KeyError):
    """A query referenced a label that is not in the graph.

    Attributes:
        label: The missing label
    """

    def __init__(self, label: str) -> None:
        self.label = label
        super().__init__(label)

    def __str__(self) -> str:
        return f"Unknown node label: '{self.label}'"


class EmptyGraphError(GraphwError):
    """A query is undefined on a graph without nodes."""

    def __init__(self, operation: str) -> None:
        self.operation = operation
        super().__init__(f"Cannot compute {operation} of an empty graph")
