"""Geometry a renderer needs to draw a laid-out graph.

These dataclasses describe the shapes for nodes, straight edges and arc
diagram edges. They are computed from the graph's read interface and a
layout; drawing them is left to the caller.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from graphw.viz.coordinates import Canvas, Point
from graphw.viz.layouts import ArcDiagram, arc_positions

if TYPE_CHECKING:
    from graphw.graph.core import Graph


@dataclass(frozen=True)
class NodeGeometry:
    """Circle drawn for a node."""

    label: str
    center: Point
    radius: float

    def contains(self, point: Point) -> bool:
        return self.center.distance_to(point) <= self.radius


@dataclass(frozen=True)
class EdgeGeometry:
    """Straight segment between two node centers."""

    source: str
    target: str
    start: Point
    end: Point

    @property
    def length(self) -> float:
        return self.start.distance_to(self.end)


@dataclass(frozen=True)
class ArcGeometry:
    """Half circle joining two nodes of an arc diagram.

    Attributes:
        center: Midpoint between the two nodes, shifted off the node line
        radius: Half the horizontal distance between the nodes
        above: Side of the node line; True shifts the center by +radius in y
    """

    source: str
    target: str
    center: Point
    radius: float
    above: bool


def node_geometries(positions: dict[str, Point], radius: float) -> list[NodeGeometry]:
    """One circle per laid-out node."""
    return [NodeGeometry(label, center, radius) for label, center in positions.items()]


def edge_geometries(graph: Graph, positions: dict[str, Point]) -> list[EdgeGeometry]:
    """Segments for every stored edge (undirected edges once)."""
    segments = []
    for u, v in graph.edges():
        source = graph.label_of(u)
        target = graph.label_of(v)
        segments.append(EdgeGeometry(source, target, positions[source], positions[target]))
    return segments


def arc_geometries(graph: Graph, canvas: Canvas | None = None) -> list[ArcGeometry]:
    """Arcs for an arc diagram.

    The first half of the edges (by the edge counter) go on one side of the
    node line and the rest on the other.
    """
    canvas = canvas or Canvas()
    positions = arc_positions(graph, ArcDiagram(), canvas)
    n = graph.number_of_nodes()
    if n == 0:
        return []
    node_radius = (canvas.width / (n * 2)) / 2
    line_y = canvas.center.y
    total = graph.number_of_edges()

    arcs = []
    for index, (u, v) in enumerate(graph.edges()):
        above = index * 2 >= total
        start, end = positions[u], positions[v]
        center = Point((start.x + end.x) / 2, line_y + (node_radius if above else -node_radius))
        arcs.append(
            ArcGeometry(
                source=graph.label_of(u),
                target=graph.label_of(v),
                center=center,
                radius=abs(start.x - end.x) / 2,
                above=above,
            )
        )
    return arcs
