"""Generators for classic graph families.

Each generator appends a new component to an existing graph. New nodes are
labelled by id, starting at the graph's current size, so generators compose:
calling two of them on one graph yields the disjoint union of both.

Parameters are validated before anything is added. Node ids inside a
generator are local (``0`` is the first node it creates); ``_Builder``
translates them to labels.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import TYPE_CHECKING

from graphw.graph.validation import (
    require_all_non_negative,
    require_at_least,
    require_free_labels,
    require_in_range,
    require_non_negative,
)

if TYPE_CHECKING:
    from graphw.graph.core import Graph

logger = logging.getLogger(__name__)


class _Builder:
    """Adds nodes and edges relative to the graph size at creation time."""

    def __init__(self, graph: Graph, count: int) -> None:
        require_free_labels(graph, count)
        self.graph = graph
        self.base = graph.number_of_nodes()
        for _ in range(count):
            graph.add_node()

    def label(self, local_id: int) -> str:
        return str(self.base + local_id)

    def edge(self, u: int, v: int) -> None:
        self.graph.add_edge(self.label(u), self.label(v))

    def path(self, local_ids: Iterable[int]) -> None:
        self.graph.add_path([self.label(i) for i in local_ids])

    def cycle(self, local_ids: Iterable[int]) -> None:
        self.graph.add_cycle([self.label(i) for i in local_ids])

    def clique(self, local_ids: range) -> None:
        for index, u in enumerate(local_ids):
            for v in local_ids[index + 1 :]:
                self.edge(u, v)


def empty(graph: Graph, n: int) -> None:
    """Add ``n`` isolated nodes."""
    require_non_negative(n=n)
    logger.debug("Adding empty graph: n=%d", n)
    _Builder(graph, n)


def complete(graph: Graph, n: int) -> None:
    """Add a clique on ``n`` nodes."""
    require_non_negative(n=n)
    logger.debug("Adding complete graph: n=%d", n)
    _Builder(graph, n).clique(range(n))


def star(graph: Graph, k: int) -> None:
    """Add a hub connected to ``k`` leaves (a single node when ``k == 0``)."""
    require_non_negative(k=k)
    logger.debug("Adding star graph: k=%d", k)
    builder = _Builder(graph, k + 1)
    for leaf in range(1, k + 1):
        builder.edge(0, leaf)


def wheel(graph: Graph, n: int) -> None:
    """Add a wheel on ``n`` nodes: a hub plus a cycle over ``n - 1`` spokes.

    The outer cycle is closed twice (``add_cycle`` plus an explicit edge from
    the last outer node to the first one), so the edge counter reads
    ``2 * (n - 1) + 1`` for ``n > 2``.
    """
    require_non_negative(n=n)
    logger.debug("Adding wheel graph: n=%d", n)
    if n == 0:
        return
    builder = _Builder(graph, n)
    for leaf in range(1, n):
        builder.edge(0, leaf)
    if n > 2:
        builder.cycle(range(1, n))
        builder.edge(n - 1, 1)


def _ladder(builder: _Builder, n: int) -> None:
    builder.path(range(n))
    builder.path(range(n, 2 * n))
    for rung in range(n):
        builder.edge(rung, rung + n)


def ladder(graph: Graph, n: int) -> None:
    """Add two rails of ``n`` nodes joined by ``n`` rungs."""
    require_non_negative(n=n)
    logger.debug("Adding ladder graph: n=%d", n)
    _ladder(_Builder(graph, 2 * n), n)


def circular_ladder(graph: Graph, n: int) -> None:
    """Add a ladder whose rails are closed into cycles.

    Rails of one or two nodes are left open; closing them would only repeat
    an existing rail edge or add a self-loop.
    """
    require_non_negative(n=n)
    logger.debug("Adding circular ladder graph: n=%d", n)
    builder = _Builder(graph, 2 * n)
    _ladder(builder, n)
    if n > 2:
        builder.edge(0, n - 1)
        builder.edge(n, 2 * n - 1)


def circulant(graph: Graph, n: int, offsets: Iterable[int]) -> None:
    """Add ``n`` nodes where node ``i`` links to ``(i + |offset|) mod n`` for each offset."""
    require_non_negative(n=n)
    offsets = [abs(offset) for offset in offsets]
    logger.debug("Adding circulant graph: n=%d, offsets=%s", n, offsets)
    builder = _Builder(graph, n)
    for i in range(n):
        for offset in offsets:
            builder.edge(i, (i + offset) % n)


def binomial_tree(graph: Graph, order: int) -> None:
    """Add a binomial tree with ``2 ** order`` nodes.

    Built by doubling: at step ``k`` every edge so far is copied shifted by
    ``2 ** k`` and the copy's root is attached to node 0. Orders below one
    give a single node.
    """
    logger.debug("Adding binomial tree: order=%d", order)
    if order < 1:
        _Builder(graph, 1)
        return

    builder = _Builder(graph, 2**order)
    tree_edges: list[tuple[int, int]] = []
    for k in range(order):
        shift = 2**k
        copied = [(u + shift, v + shift) for u, v in tree_edges]
        for u, v in copied:
            builder.edge(u, v)
        builder.edge(0, shift)
        tree_edges.extend(copied)
        tree_edges.append((0, shift))


def _mary_tree_edges(builder: _Builder, m: int, n: int) -> None:
    # Breadth-first numbering: parent p owns children p*m+1 .. p*m+m
    current_node = 0
    for parent in range(n):
        for _ in range(m):
            current_node += 1
            if current_node >= n:
                return
            builder.edge(parent, current_node)


def balanced_tree(graph: Graph, children: int, height: int) -> None:
    """Add a perfect tree where every internal node has ``children`` children."""
    require_non_negative(children=children, height=height)
    logger.debug("Adding balanced tree: children=%d, height=%d", children, height)
    if height == 0 or children == 0:
        _Builder(graph, 1)
        return
    if children == 1:
        _Builder(graph, height + 1).path(range(height + 1))
        return

    n = (children ** (height + 1) - 1) // (children - 1)
    _mary_tree_edges(_Builder(graph, n), children, n)


def full_mary_tree(graph: Graph, m: int, n: int) -> None:
    """Add a full ``m``-ary tree on ``n`` nodes, filled breadth-first."""
    require_non_negative(m=m, n=n)
    logger.debug("Adding full m-ary tree: m=%d, n=%d", m, n)
    _mary_tree_edges(_Builder(graph, n), m, n)


def barbell(graph: Graph, m1: int, m2: int) -> None:
    """Add two ``m1``-cliques joined by a path of ``m2`` nodes.

    With ``m2 == 0`` the cliques are joined by a single bridge edge.
    """
    require_at_least("m1", m1, 2)
    require_non_negative(m2=m2)
    logger.debug("Adding barbell graph: m1=%d, m2=%d", m1, m2)
    builder = _Builder(graph, 2 * m1 + m2)
    builder.clique(range(m1))
    builder.path(range(m1, m1 + m2))
    builder.clique(range(m1 + m2, 2 * m1 + m2))
    builder.edge(m1 - 1, m1)
    if m2 > 0:
        builder.edge(m1 + m2 - 1, m1 + m2)


def lollipop(graph: Graph, m: int, n: int) -> None:
    """Add an ``m``-clique with a path of ``n`` nodes hanging off its last node."""
    require_at_least("m", m, 2)
    require_non_negative(n=n)
    logger.debug("Adding lollipop graph: m=%d, n=%d", m, n)
    builder = _Builder(graph, m + n)
    builder.clique(range(m))
    builder.path(range(m, m + n))
    if n > 0:
        builder.edge(m - 1, m)


def complete_multipartite(graph: Graph, subset_sizes: Iterable[int]) -> None:
    """Add a complete multipartite graph with the given subset sizes.

    Nodes in different subsets are all connected; nodes in the same subset
    are not. Zero-sized subsets contribute nothing.
    """
    sizes = require_all_non_negative("subset_sizes", subset_sizes)
    logger.debug("Adding complete multipartite graph: sizes=%s", sizes)
    builder = _Builder(graph, sum(sizes))

    blocks = []
    start = 0
    for size in sizes:
        if size:
            blocks.append(range(start, start + size))
        start += size

    for index, block in enumerate(blocks):
        for other in blocks[index + 1 :]:
            for u in block:
                for v in other:
                    builder.edge(u, v)


def turan(graph: Graph, n: int, r: int) -> None:
    """Add the Turan graph T(n, r): ``n`` nodes in ``r`` near-equal subsets."""
    require_non_negative(n=n)
    require_in_range("r", r, 1, n)
    logger.debug("Adding Turan graph: n=%d, r=%d", n, r)
    q, remainder = divmod(n, r)
    sizes = [q] * (r - remainder) + [q + 1] * remainder
    complete_multipartite(graph, sizes)


def dorogovtsev_goltsev_mendes(graph: Graph, n: int) -> None:
    """Add the generation-``n`` Dorogovtsev-Goltsev-Mendes graph.

    Generation 0 is a single edge. Each following generation adds one node
    per existing edge, joined to both endpoints of that edge.
    """
    require_non_negative(n=n)
    logger.debug("Adding Dorogovtsev-Goltsev-Mendes graph: n=%d", n)
    builder = _Builder(graph, (3**n + 3) // 2)
    builder.edge(0, 1)
    added: list[tuple[int, int]] = [(0, 1)]
    new_node = 2
    for _ in range(n):
        for u, v in list(added):
            builder.edge(new_node, u)
            builder.edge(new_node, v)
            added.append((new_node, u))
            added.append((new_node, v))
            new_node += 1


def path_graph(graph: Graph, n: int) -> None:
    """Add a path over ``n`` new nodes."""
    require_non_negative(n=n)
    logger.debug("Adding path graph: n=%d", n)
    _Builder(graph, n).path(range(n))


def cycle_graph(graph: Graph, n: int) -> None:
    """Add a cycle over ``n`` new nodes."""
    require_non_negative(n=n)
    logger.debug("Adding cycle graph: n=%d", n)
    _Builder(graph, n).cycle(range(n))


def complete_bipartite(graph: Graph, n1: int, n2: int) -> None:
    """Add K(n1, n2)."""
    require_non_negative(n1=n1, n2=n2)
    complete_multipartite(graph, [n1, n2])


def grid_2d(graph: Graph, rows: int, cols: int) -> None:
    """Add a ``rows`` x ``cols`` lattice, numbered row-major."""
    require_non_negative(rows=rows, cols=cols)
    logger.debug("Adding 2D grid graph: rows=%d, cols=%d", rows, cols)
    builder = _Builder(graph, rows * cols)
    for row in range(rows):
        for col in range(cols):
            node = row * cols + col
            if col + 1 < cols:
                builder.edge(node, node + 1)
            if row + 1 < rows:
                builder.edge(node, node + cols)


def tadpole(graph: Graph, m: int, n: int) -> None:
    """Add a cycle of ``m`` nodes with a path of ``n`` nodes hanging off its last node."""
    require_at_least("m", m, 2)
    require_non_negative(n=n)
    logger.debug("Adding tadpole graph: m=%d, n=%d", m, n)
    builder = _Builder(graph, m + n)
    builder.cycle(range(m))
    builder.path(range(m, m + n))
    if n > 0:
        builder.edge(m - 1, m)
