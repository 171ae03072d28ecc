"""Error types for plugin-registry.

Every error raised by this package derives from :class:`PluginRegistryError`
and additionally from the closest built-in exception, so callers can catch
either ``PluginRegistryError`` or e.g. ``ValueError``.
"""
from __future__ import annotations

from collections.abc import Sequence


class PluginRegistryError(Exception):
    """Base class for all plugin-registry errors."""


class InvalidArgumentError(PluginRegistryError, ValueError):
    """Raised for a bad registry name or an empty context."""


class ContextAlreadySetError(PluginRegistryError, RuntimeError):
    """Raised when ``set_context`` is called twice on the same registry."""

    def __init__(self, registry_name: str) -> None:
        self.registry_name = registry_name
        super().__init__(f"Can only set context once for registry {registry_name}")


class InvalidDefinitionError(PluginRegistryError, ValueError):
    """Raised when a plugin reference is structurally invalid."""


class MissingNameError(InvalidDefinitionError):
    """Raised when a plugin reference has no usable name."""

    def __init__(self) -> None:
        super().__init__("Plugins should have a name")


class MissingCategoryError(InvalidDefinitionError):
    """Raised when a plugin reference has no usable category."""

    def __init__(self, plugin_name: str) -> None:
        self.plugin_name = plugin_name
        super().__init__("Plugins should have a category")


class RelativePathRejectedError(InvalidDefinitionError):
    """Raised when an explicit ``require_path`` is not absolute."""

    def __init__(self, plugin_name: str, require_path: str) -> None:
        self.plugin_name = plugin_name
        self.require_path = require_path
        super().__init__("Require path specified should be an absolute path")


class InvalidBasePathError(PluginRegistryError, ValueError):
    """Raised when the tool path or project path is not absolute."""

    def __init__(self, kind: str, path: str) -> None:
        self.kind = kind
        self.path = path
        super().__init__(f"{kind.capitalize()} path should be an absolute path")


class PluginNotFoundError(PluginRegistryError, LookupError):
    """Raised when none of the candidate paths for a plugin could be loaded.

    The message lists every candidate that was tried, one per line.
    """

    def __init__(self, plugin_name: str, failed_paths: Sequence[str]) -> None:
        self.plugin_name = plugin_name
        self.failed_paths = tuple(failed_paths)
        lines = [f"Unable to find require path for plugin named {plugin_name}:"]
        lines.extend(f"\t{path}" for path in self.failed_paths)
        super().__init__("\n".join(lines))


class ModuleLoadFailedError(PluginRegistryError, ImportError):
    """Raised when a plugin with an explicit ``require_path`` fails to load."""

    def __init__(self, plugin_name: str, require_path: str) -> None:
        self.plugin_name = plugin_name
        self.require_path = require_path
        super().__init__(
            f"Unable to load plugin named {plugin_name} from require path {require_path}"
        )


class ResolvedPathNotAbsoluteError(PluginRegistryError, RuntimeError):
    """Raised if a resolved ``require_path`` is somehow not absolute."""

    def __init__(self, plugin_name: str, require_path: str) -> None:
        self.plugin_name = plugin_name
        self.require_path = require_path
        super().__init__("Require path should resolve to an absolute path")


class ConfigError(PluginRegistryError, ValueError):
    """Raised when a registry configuration file cannot be used."""


__all__ = [
    "ConfigError",
    "ContextAlreadySetError",
    "InvalidArgumentError",
    "InvalidBasePathError",
    "InvalidDefinitionError",
    "MissingCategoryError",
    "MissingNameError",
    "ModuleLoadFailedError",
    "PluginNotFoundError",
    "PluginRegistryError",
    "RelativePathRejectedError",
    "ResolvedPathNotAbsoluteError",
]
