"""CLI command for computing node positions.

Provides `graphw layout KIND SPEC...` as a top-level command.
"""

from __future__ import annotations

from enum import Enum
from typing import Annotated

import typer

from graphw.cli._config import load_config
from graphw.cli._format import print_json, print_lines, print_table
from graphw.cli.graph_cmd import DirectedFlag, JsonFlag, OutputOption, SpecsArgument, load_specs
from graphw.viz import (
    ArcDiagram,
    Canvas,
    CircularLayout,
    ForceDirectedLayout,
    LayoutConfig,
    RandomLayout,
    SpiralLayout,
    compute_layout,
)


class LayoutKind(str, Enum):
    arc = "arc"
    circular = "circular"
    spiral = "spiral"
    random = "random"
    force = "force"


def make_config(
    kind: LayoutKind,
    *,
    seed: int | None,
    iterations: int,
    equidistant: bool = False,
    resolution: float = 0.35,
) -> LayoutConfig:
    """Layout configuration record for a CLI layout kind."""
    if kind is LayoutKind.arc:
        return ArcDiagram()
    if kind is LayoutKind.circular:
        return CircularLayout()
    if kind is LayoutKind.spiral:
        return SpiralLayout(resolution=resolution, equidistant=equidistant)
    if kind is LayoutKind.random:
        return RandomLayout(seed=seed)
    return ForceDirectedLayout(iterations=iterations, seed=seed)


def register_commands(app: typer.Typer) -> None:
    """Register `layout` as a top-level command on the app."""

    @app.command("layout")
    def layout_cmd(
        kind: Annotated[LayoutKind, typer.Argument(help="Layout kind")],
        specs: SpecsArgument,
        directed: DirectedFlag = False,
        width: Annotated[int | None, typer.Option("--width", help="Canvas width in pixels")] = None,
        height: Annotated[int | None, typer.Option("--height", help="Canvas height in pixels")] = None,
        seed: Annotated[int | None, typer.Option("--seed", help="Random seed (random/force)")] = None,
        iterations: Annotated[int | None, typer.Option("--iterations", help="Force-directed iterations")] = None,
        equidistant: Annotated[bool, typer.Option("--equidistant", help="Equidistant spiral")] = False,
        resolution: Annotated[float, typer.Option("--resolution", help="Spiral angle step")] = 0.35,
        progress: Annotated[bool, typer.Option("--progress", help="Show a progress bar (requires rich)")] = False,
        as_json: JsonFlag = False,
        output: OutputOption = None,
    ):
        """Compute node positions for a generated graph."""
        config = load_config()
        graph = load_specs(specs, directed)
        canvas = Canvas(width=width or config.width, height=height or config.height)
        layout = make_config(
            kind,
            seed=seed if seed is not None else config.seed,
            iterations=iterations if iterations is not None else config.iterations,
            equidistant=equidistant,
            resolution=resolution,
        )

        if progress and kind is LayoutKind.force:
            from graphw.viz.progress import RichLayoutProgress

            with RichLayoutProgress("Force-directed layout") as bar:
                positions = compute_layout(graph, layout, canvas, on_iteration=bar.on_iteration)
        else:
            positions = compute_layout(graph, layout, canvas)

        if as_json:
            data = {
                "layout": kind.value,
                "canvas": {"width": canvas.width, "height": canvas.height},
                "positions": {label: {"x": p.x, "y": p.y} for label, p in positions.items()},
            }
            print_json("layout", data, output)
            return

        print(f"\n{kind.value} layout | {len(positions)} nodes | {canvas.width}x{canvas.height}\n")
        rows = [[label, f"{p.x:.1f}", f"{p.y:.1f}"] for label, p in positions.items()]
        print_lines(print_table(["Node", "X", "Y"], rows))
