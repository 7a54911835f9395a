"""Graph package - store, generators and queries."""

from graphw.graph.core import Endpoint, Graph, Node
from graphw.graph.queries import parse_adjacency_list

__all__ = [
    "Endpoint",
    "Graph",
    "Node",
    "parse_adjacency_list",
]
