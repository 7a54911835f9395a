"""Rich progress bar for iterative layouts."""

from __future__ import annotations

from typing import Any


def _require_rich() -> None:
    """Raise a clear error if rich is not installed."""
    try:
        import rich  # noqa: F401
    except ImportError:
        raise ImportError(
            "The 'rich' package is required for RichLayoutProgress. Install it with: pip install 'graphw[progress]' or pip install rich"
        ) from None


class RichLayoutProgress:
    """Context manager exposing an ``on_iteration`` callback backed by Rich.

    Example:
        >>> with RichLayoutProgress("Force-directed") as progress:  # doctest: +SKIP
        ...     compute_layout(graph, ForceDirectedLayout(), on_iteration=progress.on_iteration)
    """

    def __init__(self, description: str = "Layout", *, transient: bool = True, console: Any = None) -> None:
        _require_rich()
        from rich.progress import BarColumn, MofNCompleteColumn, Progress, TextColumn

        self._progress = Progress(
            TextColumn("[bold]{task.description}"),
            BarColumn(),
            MofNCompleteColumn(),
            transient=transient,
            console=console,
        )
        self._description = description
        self._task_id: Any = None

    def __enter__(self) -> RichLayoutProgress:
        self._progress.start()
        return self

    def __exit__(self, *exc_info: object) -> None:
        self._progress.stop()

    def on_iteration(self, done: int, total: int) -> None:
        if self._task_id is None:
            self._task_id = self._progress.add_task(self._description, total=total)
        self._progress.update(self._task_id, completed=done)

    @property
    def completed(self) -> int:
        """Iterations reported so far."""
        if self._task_id is None:
            return 0
        return int(self._progress.tasks[0].completed)
