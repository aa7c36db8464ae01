"""vocabdrill: terminal vocabulary drills for multi-byte scripts."""

from __future__ import annotations

import tomllib
from importlib.metadata import PackageNotFoundError, version
from pathlib import Path

__all__ = ["__version__"]


def _source_tree_version() -> str | None:
    """Return the [project] version of the nearest pyproject.toml, if any."""
    for base in Path(__file__).resolve().parents:
        pyproject = base / "pyproject.toml"
        if not pyproject.is_file():
            continue
        try:
            data = tomllib.loads(pyproject.read_text(encoding="utf-8"))
        except (OSError, tomllib.TOMLDecodeError):
            return None
        project = data.get("project", {})
        if project.get("name") != "vocabdrill":
            return None
        value = project.get("version")
        return str(value) if value else None
    return None


def _resolve_version() -> str:
    local = _source_tree_version()
    if local is not None:
        return local
    try:
        return version("vocabdrill")
    except PackageNotFoundError:
        return "0+unknown"


__version__ = _resolve_version()
