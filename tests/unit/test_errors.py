"""Unit tests for plugin_registry.errors — messages, attributes and bases."""
from __future__ import annotations

import pytest

from plugin_registry.errors import (
    ContextAlreadySetError,
    InvalidArgumentError,
    InvalidBasePathError,
    MissingCategoryError,
    MissingNameError,
    ModuleLoadFailedError,
    PluginNotFoundError,
    PluginRegistryError,
    RelativePathRejectedError,
    ResolvedPathNotAbsoluteError,
)


# ===========================================================================
# Hierarchy
# ===========================================================================


class TestErrorHierarchy:
    @pytest.mark.parametrize(
        "error",
        [
            InvalidArgumentError("Invalid context"),
            ContextAlreadySetError("foo"),
            MissingNameError(),
            MissingCategoryError("x"),
            RelativePathRejectedError("x", "./x"),
            InvalidBasePathError("tool", "tool"),
            PluginNotFoundError("x", []),
            ModuleLoadFailedError("x", "/x"),
            ResolvedPathNotAbsoluteError("x", "x"),
        ],
    )
    def test_all_errors_share_base(self, error: Exception) -> None:
        assert isinstance(error, PluginRegistryError)

    def test_invalid_argument_is_value_error(self) -> None:
        with pytest.raises(ValueError):
            raise InvalidArgumentError("Invalid name for registry")

    def test_plugin_not_found_is_lookup_error(self) -> None:
        with pytest.raises(LookupError):
            raise PluginNotFoundError("x", ["/a"])

    def test_module_load_failed_is_import_error(self) -> None:
        with pytest.raises(ImportError):
            raise ModuleLoadFailedError("x", "/a")

    def test_missing_name_is_value_error(self) -> None:
        assert isinstance(MissingNameError(), ValueError)


# ===========================================================================
# Messages and attributes
# ===========================================================================


class TestContextAlreadySetError:
    def test_message_names_registry(self) -> None:
        error = ContextAlreadySetError("foo")
        assert str(error) == "Can only set context once for registry foo"

    def test_has_registry_name_attribute(self) -> None:
        assert ContextAlreadySetError("foo").registry_name == "foo"


class TestDefinitionErrors:
    def test_missing_name_message(self) -> None:
        assert str(MissingNameError()) == "Plugins should have a name"

    def test_missing_category_message(self) -> None:
        error = MissingCategoryError("task-name")
        assert str(error) == "Plugins should have a category"
        assert error.plugin_name == "task-name"

    def test_relative_path_message(self) -> None:
        error = RelativePathRejectedError("task-name", "./relative/path")
        assert str(error) == "Require path specified should be an absolute path"
        assert error.require_path == "./relative/path"


class TestInvalidBasePathError:
    def test_tool_message(self) -> None:
        assert str(InvalidBasePathError("tool", "rel")) == "Tool path should be an absolute path"

    def test_project_message(self) -> None:
        error = InvalidBasePathError("project", "rel")
        assert str(error) == "Project path should be an absolute path"
        assert error.path == "rel"


class TestPluginNotFoundError:
    def test_message_lists_every_failed_path(self) -> None:
        error = PluginNotFoundError("foo", ["/a/foo", "/b/foo", "/c/foo"])
        assert str(error) == (
            "Unable to find require path for plugin named foo:\n"
            "\t/a/foo\n"
            "\t/b/foo\n"
            "\t/c/foo"
        )

    def test_failed_paths_attribute_is_tuple(self) -> None:
        error = PluginNotFoundError("foo", ["/a/foo"])
        assert error.failed_paths == ("/a/foo",)
        assert error.plugin_name == "foo"


class TestModuleLoadErrors:
    def test_module_load_failed_mentions_path(self) -> None:
        error = ModuleLoadFailedError("foo", "/opt/foo")
        assert "/opt/foo" in str(error)
        assert error.plugin_name == "foo"

    def test_resolved_path_not_absolute_message(self) -> None:
        error = ResolvedPathNotAbsoluteError("foo", "foo")
        assert str(error) == "Require path should resolve to an absolute path"
