"""Shared test fixtures for plugin-registry.

Fixtures defined here are available to all tests in the suite without
needing an explicit import. Add project-wide fixtures here; keep
domain-specific fixtures close to the tests that use them.
"""
from __future__ import annotations

from collections.abc import Callable, Iterator
from pathlib import Path

import pytest

import plugin_registry
from plugin_registry import RegistryStore

_PLUGIN_TEMPLATE = '''\
"""Example plugin generated for tests."""
NAME = {name!r}
CATEGORY = {category!r}
LOCATION = {location!r}


def run() -> str:
    return NAME
'''


@pytest.fixture()
def package_name() -> str:
    """Return the importable package name for assertions."""
    return "plugin_registry"


@pytest.fixture()
def expected_version() -> str:
    """Return the current expected version string.

    Update this fixture when cutting a release so that the version
    test immediately catches stale ``__version__`` values.
    """
    return "0.1.0"


@pytest.fixture(autouse=True)
def _reset_default_store() -> Iterator[None]:
    """Keep the process-wide store from leaking registries between tests."""
    yield
    plugin_registry.reset()


@pytest.fixture()
def store() -> RegistryStore:
    """Return a fresh, empty registry store."""
    return RegistryStore()


PluginFactory = Callable[..., Path]


@pytest.fixture()
def make_plugin() -> PluginFactory:
    """Return a factory writing a plugin package to a directory.

    The factory takes the plugin directory and optional ``name``,
    ``category`` and ``location`` values that end up as module constants.
    """

    def factory(
        directory: Path,
        name: str = "example-plugin",
        category: str = "task",
        location: str = "",
    ) -> Path:
        directory.mkdir(parents=True, exist_ok=True)
        (directory / "__init__.py").write_text(
            _PLUGIN_TEMPLATE.format(name=name, category=category, location=location),
            encoding="utf-8",
        )
        return directory

    return factory


@pytest.fixture()
def layout(tmp_path: Path) -> dict[str, Path]:
    """Return tool and project directories under a temporary root.

    ``<root>/tool`` is the tool path, ``<root>/project`` the project path,
    and ``<root>`` itself is where globally installed plugins live.
    """
    tool = tmp_path / "tool"
    project = tmp_path / "project"
    tool.mkdir()
    project.mkdir()
    return {"root": tmp_path, "tool": tool, "project": project}
