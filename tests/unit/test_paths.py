"""Unit tests for plugin_registry.paths."""
from __future__ import annotations

import os
from pathlib import Path

import plugin_registry
from plugin_registry.paths import (
    DEPENDENCY_DIRNAME,
    candidate_paths,
    fallback_tool_path,
    infer_tool_path,
    is_absolute_path,
)


class TestIsAbsolutePath:
    def test_absolute(self, tmp_path: Path) -> None:
        assert is_absolute_path(str(tmp_path))

    def test_relative(self) -> None:
        assert not is_absolute_path("./relative/path")
        assert not is_absolute_path("relative")

    def test_accepts_path_objects(self, tmp_path: Path) -> None:
        assert is_absolute_path(tmp_path)


class TestCandidatePaths:
    def test_order_is_tool_project_global(self) -> None:
        tool = os.path.abspath("/opt/tool")
        project = os.path.abspath("/home/me/project")
        assert candidate_paths("foo", tool, project) == [
            os.path.join(tool, DEPENDENCY_DIRNAME, "foo"),
            os.path.join(project, DEPENDENCY_DIRNAME, "foo"),
            os.path.join(os.path.dirname(tool), "foo"),
        ]

    def test_paths_are_normalized(self) -> None:
        paths = candidate_paths("foo", os.path.abspath("/opt/tool"), os.path.abspath("/srv"))
        assert all(os.pardir not in Path(p).parts for p in paths)
        assert all(os.path.isabs(p) for p in paths)

    def test_always_three_candidates(self) -> None:
        tool = os.path.abspath("/same")
        assert len(candidate_paths("x", tool, tool)) == 3


class TestToolPathInference:
    def test_infers_directory_of_calling_file(self) -> None:
        assert infer_tool_path() == os.path.dirname(os.path.abspath(__file__))

    def test_fallback_is_ancestor_of_package(self) -> None:
        package_dir = os.path.dirname(os.path.abspath(plugin_registry.__file__))
        assert fallback_tool_path() == os.path.abspath(os.path.join(package_dir, "..", ".."))
