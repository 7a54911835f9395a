"""Structural queries over a graph's adjacency lists."""

from __future__ import annotations

from typing import TYPE_CHECKING

from graphw.exceptions import EmptyGraphError

if TYPE_CHECKING:
    from graphw.graph.core import Graph


def degree(graph: Graph, label: str) -> int:
    """Number of entries in the node's adjacency list."""
    node = graph.get_node(label)
    return len(graph.neighbors_of(node.id))


def average_degree(graph: Graph) -> float:
    """Mean degree over all nodes.

    Raises:
        EmptyGraphError: If the graph has no nodes.
    """
    n = graph.number_of_nodes()
    if n == 0:
        raise EmptyGraphError("average degree")
    return sum(len(row) for _, row in graph.iter_adjacency()) / n


def density(graph: Graph) -> float:
    """Edge density from the raw edge counter; 0.0 for graphs with fewer than two nodes."""
    n = graph.number_of_nodes()
    if n <= 1:
        return 0.0
    edges = graph.number_of_edges()
    if graph.directed:
        return edges / (n * (n - 1))
    return 2 * edges / (n * (n - 1))


def get_neighbors(graph: Graph, label: str) -> list[str]:
    """Neighbor labels in insertion order."""
    node = graph.get_node(label)
    return [neighbor.label for neighbor in graph.neighbors_of(node.id)]


def get_non_neighbors(graph: Graph, label: str) -> list[str]:
    """Labels that are neither the node itself nor among its neighbors, in id order."""
    neighbors = set(get_neighbors(graph, label))
    return [
        other.label
        for other in graph.nodes
        if other.label != label and other.label not in neighbors
    ]


def get_common_neighbors(graph: Graph, label1: str, label2: str) -> list[str]:
    """Labels adjacent to both nodes, in the first node's neighbor order."""
    first = get_neighbors(graph, label1)
    second = set(get_neighbors(graph, label2))
    return [label for label in first if label in second]


def get_adjacency_list(graph: Graph, delimiter: str = " ") -> str:
    """Debug dump: one line per node in id order.

    Each field (the node label, then every neighbor label) is followed by
    the delimiter; each line ends with a newline.

    Example:
        >>> from graphw import Graph
        >>> g = Graph()
        >>> g.add_path(["a", "b", "c"])
        >>> g.get_adjacency_list()
        'a b \\nb a c \\nc b \\n'
    """
    lines = []
    for node, neighbors in graph.iter_adjacency():
        fields = [node.label, *(neighbor.label for neighbor in neighbors)]
        lines.append("".join(field + delimiter for field in fields) + "\n")
    return "".join(lines)


def parse_adjacency_list(text: str, delimiter: str = " ") -> dict[str, list[str]]:
    """Split an adjacency dump back into ``{label: [neighbor labels]}``.

    Only recovers the relation for comparison; it does not rebuild a Graph.
    """
    relation: dict[str, list[str]] = {}
    for line in text.splitlines():
        if not line:
            continue
        if line.endswith(delimiter):
            line = line[: -len(delimiter)]
        label, *neighbors = line.split(delimiter)
        relation[label] = neighbors
    return relation
