"""plugin-registry — find, load and register plugins by name.

Public API
----------
The stable public surface is everything exported from this module.
Anything inside submodules not re-exported here is considered private
and may change without notice.

Example
-------
::

    import plugin_registry

    # Same name, same registry
    registry = plugin_registry.get("my-tool")
    assert registry is plugin_registry.get("my-tool")

    # Context may be set once; plugins are looked up in
    #   <tool_path>/node_modules/<name>
    #   <project_path>/node_modules/<name>
    #   <tool_path>/../<name>
    registry.set_context({"tool_path": "/opt/my-tool"}).add(
        "lint-plugin",
        {"name": "deploy", "category": "command"},
    )

    registry.get_all_of_category("task")

    plugin_registry.__version__
    '0.1.0'
"""
from __future__ import annotations

__version__: str = "0.1.0"

from plugin_registry.context import DEFAULT_PLUGIN_CATEGORY, RegistryContext
from plugin_registry.definitions import (
    PluginDefinition,
    PluginReference,
    ResolvedPluginDefinition,
)
from plugin_registry.errors import (
    ConfigError,
    ContextAlreadySetError,
    InvalidArgumentError,
    InvalidBasePathError,
    InvalidDefinitionError,
    MissingCategoryError,
    MissingNameError,
    ModuleLoadFailedError,
    PluginNotFoundError,
    PluginRegistryError,
    RelativePathRejectedError,
    ResolvedPathNotAbsoluteError,
)
from plugin_registry.loader import FileModuleLoader, ModuleLoader, is_loadable
from plugin_registry.registry import (
    DEFAULT_REGISTRY_NAME,
    ContextState,
    Registry,
    RegistryStore,
    get,
    reset,
)
from plugin_registry.resolver import (
    candidate_paths,
    fill_base_paths,
    resolve_in_context,
    resolve_plugin_definition,
)
from plugin_registry.config import RegistryConfig, load_config

__all__ = [
    "__version__",
    "get",
    "reset",
    "load_config",
    "candidate_paths",
    "fill_base_paths",
    "resolve_in_context",
    "resolve_plugin_definition",
    # Registries
    "DEFAULT_REGISTRY_NAME",
    "ContextState",
    "Registry",
    "RegistryConfig",
    "RegistryStore",
    # Definitions and context
    "DEFAULT_PLUGIN_CATEGORY",
    "PluginDefinition",
    "PluginReference",
    "RegistryContext",
    "ResolvedPluginDefinition",
    # Loading
    "FileModuleLoader",
    "ModuleLoader",
    "is_loadable",
    # Errors
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
