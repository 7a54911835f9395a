"""Graph store: nodes, labels and adjacency lists."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Union

import networkx as nx

from graphw.exceptions import DuplicateLabelError, UnknownLabelError
from graphw.graph import generators, queries

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Node:
    """A node reference: stable insertion id plus unique label."""

    id: int
    label: str


# Anything add_edge/add_path accept as an endpoint
Endpoint = Union[Node, str, int]


def _label_of(endpoint: Endpoint) -> str:
    """Labels are strings; a Node contributes only its label."""
    if isinstance(endpoint, Node):
        return endpoint.label
    return str(endpoint)


class Graph:
    """Adjacency-list graph keyed by unique string labels.

    Nodes get dense, stable ids in insertion order. Edges are only ever
    added; the whole store is reset with ``clear()``.

    Attributes:
        directed: Whether edges are stored one-way
        nodes: All nodes in id order
        adjacency: Neighbor nodes per id, in insertion order

    Example:
        >>> g = Graph()
        >>> g.add_edge("a", "b")
        >>> g.add_edge("b", "c")
        >>> g.get_neighbors("b")
        ['a', 'c']
        >>> g.number_of_nodes(), g.number_of_edges()
        (3, 2)
    """

    def __init__(self, directed: bool = False) -> None:
        self._directed = directed
        self._adjacency: list[list[Node]] = []
        self._labels: set[str] = set()
        self._identities: dict[str, int] = {}
        self._labels_vector: list[str] = []
        self._edges = 0

    def __repr__(self) -> str:
        kind = "directed" if self._directed else "undirected"
        return f"Graph({kind}, nodes={len(self._adjacency)}, edges={self._edges})"

    def __len__(self) -> int:
        return len(self._adjacency)

    def __contains__(self, label: object) -> bool:
        return isinstance(label, str) and label in self._labels

    def __iter__(self) -> Iterator[Node]:
        for node_id, label in enumerate(self._labels_vector):
            yield Node(node_id, label)

    # ------------------------------------------------------------------
    # Primitives
    # ------------------------------------------------------------------

    def add_node(self, label: str | int | None = None) -> Node:
        """Add a node and return it.

        Args:
            label: Unique label. Defaults to the new node's id as a string.

        Raises:
            DuplicateLabelError: If the label already exists.
        """
        node_id = len(self._adjacency)
        label = str(node_id) if label is None or label == "" else str(label)
        if label in self._labels:
            raise DuplicateLabelError(label)

        self._adjacency.append([])
        self._identities[label] = node_id
        self._labels_vector.append(label)
        self._labels.add(label)
        return Node(node_id, label)

    def add_edge(self, u: Endpoint, v: Endpoint) -> None:
        """Add an edge between two labels or nodes, creating missing endpoints.

        The edge counter increases on every call. When both endpoints already
        existed and are already adjacent, the adjacency lists stay unchanged.
        """
        label1 = _label_of(u)
        label2 = _label_of(v)
        existed = label1 in self._labels and label2 in self._labels

        self._require_creatable([label1, label2])
        node1 = self._get_or_add(label1)
        node2 = self._get_or_add(label2)
        self._edges += 1

        if existed and node2 in self._adjacency[node1.id]:
            logger.debug("Edge %r -> %r already present, not duplicated", label1, label2)
            return

        self._adjacency[node1.id].append(node2)
        if not self._directed:
            self._adjacency[node2.id].append(node1)

    def add_path(self, items: Iterable[Endpoint]) -> None:
        """Add an edge between each consecutive pair of labels or nodes."""
        previous: str | None = None
        for item in items:
            label = self._get_or_add(_label_of(item)).label
            if previous is not None:
                self.add_edge(previous, label)
            previous = label

    def add_cycle(self, items: Iterable[Endpoint]) -> None:
        """Add a path plus a closing edge from the last item to the first."""
        labels = [_label_of(item) for item in items]
        if not labels:
            return
        self.add_path(labels)
        self.add_edge(labels[-1], labels[0])

    def clear(self) -> None:
        """Remove all nodes and edges."""
        logger.debug("Clearing graph with %d nodes", len(self._adjacency))
        self._adjacency.clear()
        self._labels.clear()
        self._identities.clear()
        self._labels_vector.clear()
        self._edges = 0

    def _require_creatable(self, labels: list[str]) -> None:
        # Missing endpoints are created in order; an empty label takes the next id
        next_id = len(self._adjacency)
        created: set[str] = set()
        for label in labels:
            if label in self._identities or label in created:
                continue
            final = label or str(next_id)
            if final in self._labels or final in created:
                raise DuplicateLabelError(final)
            created.add(final)
            next_id += 1

    def _get_or_add(self, label: str) -> Node:
        node_id = self._identities.get(label)
        if node_id is None:
            return self.add_node(label)
        return Node(node_id, label)

    # ------------------------------------------------------------------
    # Read interface
    # ------------------------------------------------------------------

    def number_of_nodes(self) -> int:
        return len(self._adjacency)

    def number_of_edges(self) -> int:
        """Number of accepted add_edge calls (duplicates included)."""
        return self._edges

    @property
    def directed(self) -> bool:
        return self._directed

    @directed.setter
    def directed(self, value: bool) -> None:
        self._directed = value

    def set_directed(self, value: bool) -> None:
        """Switch between directed and undirected insertion for future edges."""
        self._directed = value

    @property
    def nodes(self) -> tuple[Node, ...]:
        """All nodes in id order."""
        return tuple(self)

    @property
    def adjacency(self) -> tuple[tuple[Node, ...], ...]:
        """Read-only copy of the adjacency lists, indexed by id."""
        return tuple(tuple(row) for row in self._adjacency)

    def neighbors_of(self, node_id: int) -> tuple[Node, ...]:
        """Neighbor nodes of one id, in insertion order."""
        return tuple(self._adjacency[node_id])

    def iter_adjacency(self) -> Iterator[tuple[Node, tuple[Node, ...]]]:
        """Iterate (node, neighbors) pairs in id order without copying the store."""
        for node_id, row in enumerate(self._adjacency):
            yield Node(node_id, self._labels_vector[node_id]), tuple(row)

    def edges(self) -> list[tuple[int, int]]:
        """Stored edges as id pairs, undirected edges reported once."""
        seen: set[tuple[int, int]] = set()
        result = []
        for node_id, row in enumerate(self._adjacency):
            for neighbor in row:
                key = (node_id, neighbor.id)
                if not self._directed:
                    key = (min(key), max(key))
                if key in seen:
                    continue
                seen.add(key)
                result.append((node_id, neighbor.id))
        return result

    def get_node(self, label: str) -> Node:
        """Look up a node by label.

        Raises:
            UnknownLabelError: If the label is not in the graph.
        """
        node_id = self._identities.get(label)
        if node_id is None:
            raise UnknownLabelError(label)
        return Node(node_id, label)

    def label_of(self, node_id: int) -> str:
        """Label of the node with the given id."""
        return self._labels_vector[node_id]

    def to_networkx(self) -> nx.Graph:
        """Build a NetworkX graph with the same nodes (by label) and edges."""
        result = nx.DiGraph() if self._directed else nx.Graph()
        result.add_nodes_from(self._labels_vector)
        result.add_edges_from(
            (self._labels_vector[u], self._labels_vector[v]) for u, v in self.edges()
        )
        return result

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def degree(self, label: str) -> int:
        return queries.degree(self, label)

    def average_degree(self) -> float:
        return queries.average_degree(self)

    def density(self) -> float:
        return queries.density(self)

    def get_neighbors(self, label: str) -> list[str]:
        return queries.get_neighbors(self, label)

    def get_non_neighbors(self, label: str) -> list[str]:
        return queries.get_non_neighbors(self, label)

    def get_common_neighbors(self, label1: str, label2: str) -> list[str]:
        return queries.get_common_neighbors(self, label1, label2)

    def get_adjacency_list(self, delimiter: str = " ") -> str:
        return queries.get_adjacency_list(self, delimiter)

    # ------------------------------------------------------------------
    # Generators
    # ------------------------------------------------------------------

    def add_empty(self, n: int) -> None:
        generators.empty(self, n)

    def add_complete(self, n: int) -> None:
        generators.complete(self, n)

    def add_star(self, k: int) -> None:
        generators.star(self, k)

    def add_wheel(self, n: int) -> None:
        generators.wheel(self, n)

    def add_ladder(self, n: int) -> None:
        generators.ladder(self, n)

    def add_circular_ladder(self, n: int) -> None:
        generators.circular_ladder(self, n)

    def add_circulant(self, n: int, offsets: Iterable[int]) -> None:
        generators.circulant(self, n, offsets)

    def add_binomial_tree(self, order: int) -> None:
        generators.binomial_tree(self, order)

    def add_balanced_tree(self, children: int, height: int) -> None:
        generators.balanced_tree(self, children, height)

    def add_full_mary_tree(self, m: int, n: int) -> None:
        generators.full_mary_tree(self, m, n)

    def add_barbell(self, m1: int, m2: int) -> None:
        generators.barbell(self, m1, m2)

    def add_lollipop(self, m: int, n: int) -> None:
        generators.lollipop(self, m, n)

    def add_complete_multipartite(self, subset_sizes: Iterable[int]) -> None:
        generators.complete_multipartite(self, subset_sizes)

    def add_turan(self, n: int, r: int) -> None:
        generators.turan(self, n, r)

    def add_dorogovtsev_goltsev_mendes(self, n: int) -> None:
        generators.dorogovtsev_goltsev_mendes(self, n)

    def add_path_graph(self, n: int) -> None:
        generators.path_graph(self, n)

    def add_cycle_graph(self, n: int) -> None:
        generators.cycle_graph(self, n)

    def add_complete_bipartite(self, n1: int, n2: int) -> None:
        generators.complete_bipartite(self, n1, n2)

    def add_grid_2d(self, rows: int, cols: int) -> None:
        generators.grid_2d(self, rows, cols)

    def add_tadpole(self, m: int, n: int) -> None:
        generators.tadpole(self, m, n)
