"""Node placement for graph presentation.

Layout kinds are plain configuration records; ``compute_layout`` reads a
graph through its public read interface and returns one ``Point`` per node
label, in id order. Nothing here draws or mutates the graph.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass
from typing import TYPE_CHECKING, Union

import networkx as nx

from graphw.viz.coordinates import Canvas, Point

if TYPE_CHECKING:
    from graphw.graph.core import Graph

logger = logging.getLogger(__name__)

# Called as on_iteration(done, total) while a layout iterates
IterationCallback = Callable[[int, int], None]

CIRCLE_PADDING = 5
# Side of the box force-directed positions are rescaled into, within the unit square
UNIT_BOX = 0.9


@dataclass(frozen=True)
class ArcDiagram:
    """Nodes on a horizontal line, edges drawn as half-circle arcs."""


@dataclass(frozen=True)
class CircularLayout:
    """Nodes evenly spaced on a circle."""

    node_radius: int = 20


@dataclass(frozen=True)
class RandomLayout:
    """Nodes placed uniformly at random; ``seed`` makes placement reproducible."""

    node_radius: int = 20
    seed: int | None = None


@dataclass(frozen=True)
class SpiralLayout:
    """Nodes along an Archimedean spiral.

    Attributes:
        node_radius: Radius of drawn nodes (sets the padding)
        resolution: Angle step between consecutive nodes, in radians
        equidistant: Keep consecutive nodes at a constant arc distance
    """

    node_radius: int = 10
    resolution: float = 0.35
    equidistant: bool = False


@dataclass(frozen=True)
class ForceDirectedLayout:
    """Fruchterman-Reingold spring layout from a seeded random start."""

    node_radius: int = 20
    iterations: int = 50
    seed: int | None = None


LayoutConfig = Union[ArcDiagram, CircularLayout, RandomLayout, SpiralLayout, ForceDirectedLayout]


def compute_layout(
    graph: Graph,
    config: LayoutConfig,
    canvas: Canvas | None = None,
    on_iteration: IterationCallback | None = None,
) -> dict[str, Point]:
    """Place every node of ``graph`` on ``canvas`` according to ``config``.

    Args:
        graph: Graph to lay out (read only)
        config: One of the layout configuration records
        canvas: Target surface, 640x480 by default
        on_iteration: Progress callback for iterative layouts

    Returns:
        Map of node label -> position, in node id order

    Example:
        >>> from graphw import Graph
        >>> g = Graph()
        >>> g.add_path(["a", "b"])
        >>> compute_layout(g, ArcDiagram())
        {'a': Point(x=160.0, y=240.0), 'b': Point(x=480.0, y=240.0)}
    """
    canvas = canvas or Canvas()
    if isinstance(config, ForceDirectedLayout):
        positions = force_directed_positions(graph, config, canvas, on_iteration)
    else:
        compute = _LAYOUTS.get(type(config))
        if compute is None:
            raise TypeError(f"Unsupported layout configuration: {type(config).__name__}")
        positions = compute(graph, config, canvas)
    labels = [node.label for node in graph.nodes]
    return dict(zip(labels, positions))


def arc_positions(graph: Graph, config: ArcDiagram, canvas: Canvas) -> list[Point]:
    """Evenly spaced nodes on the horizontal center line."""
    n = graph.number_of_nodes()
    if n == 0:
        return []
    node_radius = (canvas.width / (n * 2)) / 2
    y = canvas.center.y
    return [Point(2 * node_radius + i * 4 * node_radius, y) for i in range(n)]


def circular_positions(graph: Graph, config: CircularLayout, canvas: Canvas) -> list[Point]:
    """Nodes at equal angles on the largest circle that fits the canvas."""
    radius = canvas.min_dimension / 2 - CIRCLE_PADDING - config.node_radius
    center = canvas.center
    pos = nx.circular_layout(graph.to_networkx(), scale=radius, center=(center.x, center.y))
    return _points(graph, pos)


def spiral_positions(graph: Graph, config: SpiralLayout, canvas: Canvas) -> list[Point]:
    """Nodes along a spiral, scaled to fit the smaller canvas dimension."""
    scale = (canvas.min_dimension - 4 * config.node_radius) / 2
    center = canvas.center
    pos = nx.spiral_layout(
        graph.to_networkx(),
        scale=scale,
        center=(center.x, center.y),
        resolution=config.resolution,
        equidistant=config.equidistant,
    )
    return _points(graph, pos)


def random_positions(graph: Graph, config: RandomLayout, canvas: Canvas) -> list[Point]:
    """Uniform random placement inside the canvas margins."""
    pos = nx.random_layout(graph.to_networkx(), seed=config.seed)
    return [_to_canvas(p, canvas, config.node_radius) for p in _points(graph, pos)]


def force_directed_positions(
    graph: Graph,
    config: ForceDirectedLayout,
    canvas: Canvas,
    on_iteration: IterationCallback | None = None,
) -> list[Point]:
    """Fruchterman-Reingold spring layout.

    networkx runs the iterations in the unit square and rescales the result
    into a box of side 0.9 centred on (0.5, 0.5), which is then mapped onto
    the canvas. ``on_iteration`` is called once the iterations are done, as
    networkx does not report intermediate steps.
    """
    n = graph.number_of_nodes()
    if n == 0:
        return []

    logger.debug("Force-directed layout: %d nodes, %d iterations", n, config.iterations)
    pos = nx.spring_layout(
        graph.to_networkx(),
        iterations=config.iterations,
        seed=config.seed,
        scale=UNIT_BOX / 2,
        center=(0.5, 0.5),
    )
    if on_iteration is not None:
        on_iteration(config.iterations, config.iterations)
    return [_to_canvas(p, canvas, config.node_radius) for p in _points(graph, pos)]


def _points(graph: Graph, pos: dict) -> list[Point]:
    # networkx returns numpy arrays keyed by label
    return [Point(float(pos[node.label][0]), float(pos[node.label][1])) for node in graph.nodes]


def _to_canvas(unit: Point, canvas: Canvas, node_radius: int) -> Point:
    return Point(
        unit.x * (canvas.width - node_radius) + node_radius,
        unit.y * (canvas.height - node_radius) + node_radius,
    )


_LAYOUTS: dict[type, Callable[..., list[Point]]] = {
    ArcDiagram: arc_positions,
    CircularLayout: circular_positions,
    SpiralLayout: spiral_positions,
    RandomLayout: random_positions,
}
