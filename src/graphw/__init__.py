"""graphw - graph construction, classic generators and 2D layouts."""

from graphw.exceptions import (
    DuplicateLabelError,
    EmptyGraphError,
    GraphwError,
    InvalidParameterError,
    NegativeSizeError,
    ParameterConstraintError,
    UnknownLabelError,
)
from graphw.graph import Graph, Node, parse_adjacency_list
from graphw.viz import (
    ArcDiagram,
    Canvas,
    CircularLayout,
    ForceDirectedLayout,
    Point,
    RandomLayout,
    SpiralLayout,
    compute_layout,
)

__all__ = [
    # Graph
    "Graph",
    "Node",
    "parse_adjacency_list",
    # Layouts
    "ArcDiagram",
    "Canvas",
    "CircularLayout",
    "ForceDirectedLayout",
    "Point",
    "RandomLayout",
    "SpiralLayout",
    "compute_layout",
    # Errors
    "GraphwError",
    "InvalidParameterError",
    "NegativeSizeError",
    "ParameterConstraintError",
    "DuplicateLabelError",
    "UnknownLabelError",
    "EmptyGraphError",
]
