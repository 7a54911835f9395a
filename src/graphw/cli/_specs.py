"""Graph specs on the command line: ``kind:arg1,arg2,...``.

Examples:
    barbell:2,3
    complete-multipartite:1,2,3
    circulant:8,1,3        (n=8, offsets 1 and 3)
"""

from __future__ import annotations

from collections.abc import Callable, Iterable
from dataclasses import dataclass

from graphw.graph import Graph
from graphw.graph import generators


class GraphSpecError(ValueError):
    """A command-line graph spec could not be parsed."""


@dataclass(frozen=True)
class GeneratorKind:
    """A generator reachable from the CLI.

    Attributes:
        name: Spec name (hyphenated)
        build: Generator function taking the graph first
        params: Fixed integer parameters, in order
        variadic: Name of a trailing list parameter, if any
    """

    name: str
    build: Callable[..., None]
    params: tuple[str, ...]
    variadic: str | None = None

    @property
    def signature(self) -> str:
        names = list(self.params)
        if self.variadic:
            names.append(f"{self.variadic}...")
        return ",".join(names)

    def apply(self, graph: Graph, args: list[int]) -> None:
        fixed = len(self.params)
        if self.variadic is None and len(args) != fixed:
            raise GraphSpecError(f"'{self.name}' takes {fixed} argument(s) ({self.signature}), got {len(args)}")
        if self.variadic is not None and len(args) < fixed:
            raise GraphSpecError(f"'{self.name}' takes at least {fixed} argument(s) ({self.signature}), got {len(args)}")
        if self.variadic is None:
            self.build(graph, *args)
        else:
            self.build(graph, *args[:fixed], args[fixed:])


KINDS: dict[str, GeneratorKind] = {
    kind.name: kind
    for kind in [
        GeneratorKind("empty", generators.empty, ("n",)),
        GeneratorKind("complete", generators.complete, ("n",)),
        GeneratorKind("star", generators.star, ("k",)),
        GeneratorKind("wheel", generators.wheel, ("n",)),
        GeneratorKind("ladder", generators.ladder, ("n",)),
        GeneratorKind("circular-ladder", generators.circular_ladder, ("n",)),
        GeneratorKind("circulant", generators.circulant, ("n",), variadic="offsets"),
        GeneratorKind("binomial-tree", generators.binomial_tree, ("order",)),
        GeneratorKind("balanced-tree", generators.balanced_tree, ("children", "height")),
        GeneratorKind("full-mary-tree", generators.full_mary_tree, ("m", "n")),
        GeneratorKind("barbell", generators.barbell, ("m1", "m2")),
        GeneratorKind("lollipop", generators.lollipop, ("m", "n")),
        GeneratorKind("complete-multipartite", generators.complete_multipartite, (), variadic="subset_sizes"),
        GeneratorKind("turan", generators.turan, ("n", "r")),
        GeneratorKind("dorogovtsev-goltsev-mendes", generators.dorogovtsev_goltsev_mendes, ("n",)),
        GeneratorKind("path", generators.path_graph, ("n",)),
        GeneratorKind("cycle", generators.cycle_graph, ("n",)),
        GeneratorKind("complete-bipartite", generators.complete_bipartite, ("n1", "n2")),
        GeneratorKind("grid-2d", generators.grid_2d, ("rows", "cols")),
        GeneratorKind("tadpole", generators.tadpole, ("m", "n")),
    ]
}


def parse_spec(spec: str) -> tuple[GeneratorKind, list[int]]:
    """Split ``kind:1,2`` into the generator kind and its integer arguments."""
    name, _, raw_args = spec.partition(":")
    kind = KINDS.get(name.strip().replace("_", "-"))
    if kind is None:
        raise GraphSpecError(f"Unknown graph kind '{name}'. Run 'graphw kinds' for the list.")
    args = []
    for raw in filter(None, (part.strip() for part in raw_args.split(","))):
        try:
            args.append(int(raw))
        except ValueError:
            raise GraphSpecError(f"Argument '{raw}' in '{spec}' is not an integer") from None
    return kind, args


def build_graph(specs: Iterable[str], directed: bool = False) -> Graph:
    """Apply each spec in order to one graph (the result is their disjoint union)."""
    graph = Graph(directed=directed)
    for spec in specs:
        kind, args = parse_spec(spec)
        kind.apply(graph, args)
    return graph
