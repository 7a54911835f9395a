"""Project-level configuration from pyproject.toml.

Reads the [tool.graphw] section to provide default settings for the CLI.
"""

from __future__ import annotations

import logging
import sys
from dataclasses import dataclass, fields
from pathlib import Path

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class GraphwConfig:
    """Configuration from [tool.graphw] in pyproject.toml."""

    delimiter: str = " "
    width: int = 640
    height: int = 480
    seed: int | None = None
    iterations: int = 50


def find_pyproject(start: Path | None = None) -> Path | None:
    """Walk up from start directory to find pyproject.toml."""
    current = (start or Path.cwd()).resolve()
    for directory in (current, *current.parents):
        candidate = directory / "pyproject.toml"
        if candidate.is_file():
            return candidate
    return None


def load_config(start: Path | None = None) -> GraphwConfig:
    """Load [tool.graphw] from the nearest pyproject.toml.

    Returns default config if no pyproject.toml or no [tool.graphw] section.
    """
    path = find_pyproject(start)
    if path is None:
        return GraphwConfig()

    if sys.version_info >= (3, 11):
        import tomllib
    else:
        try:
            import tomli as tomllib
        except ImportError:
            return GraphwConfig()

    with open(path, "rb") as f:
        data = tomllib.load(f)

    section = data.get("tool", {}).get("graphw", {})
    if not section:
        return GraphwConfig()

    known = {f.name for f in fields(GraphwConfig)}
    unknown = sorted(set(section) - known)
    if unknown:
        logger.warning("Ignoring unknown [tool.graphw] keys in %s: %s", path, ", ".join(unknown))

    return GraphwConfig(**{key: value for key, value in section.items() if key in known})
