"""Graph CLI commands: generate, info, kinds.

Registered as top-level commands on the `graphw` app.
"""

from __future__ import annotations

from typing import Annotated

import typer

from graphw.cli._config import load_config
from graphw.cli._format import format_number, print_json, print_lines, print_table
from graphw.cli._specs import KINDS, GraphSpecError, build_graph
from graphw.exceptions import GraphwError
from graphw.graph import Graph

SpecsArgument = Annotated[list[str], typer.Argument(help="Graph specs as 'kind:arg1,arg2' (applied in order)")]
DirectedFlag = Annotated[bool, typer.Option("--directed", help="Build a directed graph")]
JsonFlag = Annotated[bool, typer.Option("--json", help="Output as JSON")]
OutputOption = Annotated[str | None, typer.Option("--output", help="Write JSON to file")]


def load_specs(specs: list[str], directed: bool) -> Graph:
    """Build a graph from specs, turning library errors into a CLI exit."""
    try:
        return build_graph(specs, directed=directed)
    except (GraphSpecError, GraphwError) as e:
        print(f"Error: {e}")
        raise typer.Exit(1) from e


def graph_summary(graph: Graph) -> dict[str, object]:
    """Counts and density figures for a graph."""
    n = graph.number_of_nodes()
    return {
        "nodes": n,
        "edges": graph.number_of_edges(),
        "directed": graph.directed,
        "density": graph.density(),
        "average_degree": graph.average_degree() if n else 0.0,
    }


def _summary_line(doc: str | None) -> str:
    lines = (doc or "").strip().splitlines()
    return lines[0] if lines else ""


def register_commands(app: typer.Typer) -> None:
    """Register `generate`, `info` and `kinds` as top-level commands on the app."""

    @app.command("generate")
    def generate_cmd(
        specs: SpecsArgument,
        directed: DirectedFlag = False,
        delimiter: Annotated[str | None, typer.Option("--delimiter", help="Field separator in the dump")] = None,
        as_json: JsonFlag = False,
        output: OutputOption = None,
    ):
        """Build a graph and print its adjacency list."""
        graph = load_specs(specs, directed)

        if as_json:
            data = {
                "specs": specs,
                "directed": graph.directed,
                "nodes": [node.label for node in graph.nodes],
                "adjacency": {
                    node.label: [neighbor.label for neighbor in neighbors]
                    for node, neighbors in graph.iter_adjacency()
                },
                "edge_count": graph.number_of_edges(),
            }
            print_json("generate", data, output)
            return

        if delimiter is None:
            delimiter = load_config().delimiter
        print(graph.get_adjacency_list(delimiter), end="")

    @app.command("info")
    def info_cmd(
        specs: SpecsArgument,
        directed: DirectedFlag = False,
        as_json: JsonFlag = False,
        output: OutputOption = None,
    ):
        """Show node/edge counts, density and average degree."""
        graph = load_specs(specs, directed)
        summary = graph_summary(graph)

        if as_json:
            print_json("info", {"specs": specs, **summary}, output)
            return

        print(f"\nGraph: {' + '.join(specs)}\n")
        rows = [
            ["Nodes", str(summary["nodes"])],
            ["Edges", str(summary["edges"])],
            ["Directed", "yes" if summary["directed"] else "no"],
            ["Density", format_number(summary["density"])],
            ["Average degree", format_number(summary["average_degree"])],
        ]
        print_lines(print_table(["Property", "Value"], rows))

    @app.command("kinds")
    def kinds_cmd(as_json: JsonFlag = False):
        """List graph kinds usable in specs."""
        if as_json:
            print_json("kinds", {name: kind.signature for name, kind in KINDS.items()})
            return

        rows = [[name, kind.signature or "—", _summary_line(kind.build.__doc__)] for name, kind in KINDS.items()]
        print(f"\n  Graph kinds ({len(KINDS)}):\n")
        print_lines(print_table(["Kind", "Arguments", "Description"], rows))
