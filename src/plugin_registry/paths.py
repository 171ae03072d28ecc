"""Filesystem path helpers used during plugin resolution."""
from __future__ import annotations

import inspect
import os

DEPENDENCY_DIRNAME = "node_modules"

_PACKAGE_DIR = os.path.dirname(os.path.abspath(__file__))


def is_absolute_path(path: str | os.PathLike[str]) -> bool:
    """Return True if ``path`` is an absolute filesystem path."""
    return os.path.isabs(os.fspath(path))


def fallback_tool_path() -> str:
    """Return the directory two levels above this package."""
    return os.path.abspath(os.path.join(_PACKAGE_DIR, "..", ".."))


def infer_tool_path() -> str:
    """Guess the tool path from the call stack.

    The tool path is taken to be the directory of the nearest caller whose
    source file lives outside this package. Frames without a real source
    file (``<frozen importlib._bootstrap>``, ``<string>``) are skipped.
    """
    for frame_info in inspect.stack(context=0)[1:]:
        filename = frame_info.filename
        if filename.startswith("<"):
            continue
        directory = os.path.dirname(os.path.abspath(filename))
        if directory == _PACKAGE_DIR or directory.startswith(_PACKAGE_DIR + os.sep):
            continue
        return directory
    return fallback_tool_path()


def candidate_paths(name: str, tool_path: str, project_path: str) -> list[str]:
    """Return the ordered locations searched for a plugin called ``name``.

    1. the tool's own dependencies,
    2. the project's dependencies,
    3. a sibling directory of the tool (a global installation).
    """
    return [
        os.path.abspath(os.path.join(tool_path, DEPENDENCY_DIRNAME, name)),
        os.path.abspath(os.path.join(project_path, DEPENDENCY_DIRNAME, name)),
        os.path.abspath(os.path.join(tool_path, os.pardir, name)),
    ]


__all__ = [
    "DEPENDENCY_DIRNAME",
    "candidate_paths",
    "fallback_tool_path",
    "infer_tool_path",
    "is_absolute_path",
]
