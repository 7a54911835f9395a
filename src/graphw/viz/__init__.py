"""Layout computation and drawing geometry for graphs."""

from graphw.viz.coordinates import Canvas, Point
from graphw.viz.geometry import (
    ArcGeometry,
    EdgeGeometry,
    NodeGeometry,
    arc_geometries,
    edge_geometries,
    node_geometries,
)
from graphw.viz.layouts import (
    ArcDiagram,
    CircularLayout,
    ForceDirectedLayout,
    LayoutConfig,
    RandomLayout,
    SpiralLayout,
    compute_layout,
)

__all__ = [
    "ArcDiagram",
    "ArcGeometry",
    "Canvas",
    "CircularLayout",
    "EdgeGeometry",
    "ForceDirectedLayout",
    "LayoutConfig",
    "NodeGeometry",
    "Point",
    "RandomLayout",
    "SpiralLayout",
    "arc_geometries",
    "compute_layout",
    "edge_geometries",
    "node_geometries",
]
