"""graphw CLI: generate graphs and compute layouts.

Entry point for the `graphw` command. Requires ``pip install graphw[cli]``.

Commands:
    generate    Build a graph from specs and print its adjacency list
    info        Show node/edge counts, density and average degree
    kinds       List graph kinds usable in specs
    layout      Compute node positions (arc, circular, spiral, random, force)
"""

from __future__ import annotations


def _require_typer():
    """Check that typer is available."""
    try:
        import typer  # noqa: F401
    except ImportError:
        import sys

        print("Error: typer is required for the CLI. Install with: pip install graphw[cli]", file=sys.stderr)
        raise SystemExit(1) from None


def create_app():
    """Create the Typer app with all commands."""
    _require_typer()

    import typer

    from graphw.cli import graph_cmd, layout_cmd

    app = typer.Typer(
        name="graphw",
        help="Build classic graphs, inspect them and lay them out.",
        no_args_is_help=True,
    )
    graph_cmd.register_commands(app)
    layout_cmd.register_commands(app)

    return app


def main():
    """CLI entry point."""
    app = create_app()
    app()
