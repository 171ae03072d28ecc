"""YAML registry configuration files.

A configuration file names a registry, its context and the plugins to add::

    registry: my-tool
    context:
      default_plugin_category: task
      tool_path: /opt/my-tool
      project_path: .
    plugins:
      - lint-plugin
      - name: deploy
        category: command

Relative ``tool_path`` and ``project_path`` values are resolved against the
directory containing the file.
"""
from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml

from plugin_registry.errors import ConfigError
from plugin_registry.registry import Registry, RegistryStore, default_store

_BASE_PATH_KEYS = ("tool_path", "project_path")


@dataclass(frozen=True)
class RegistryConfig:
    """A parsed registry configuration.

    Parameters
    ----------
    registry:
        Registry name, or ``None`` for the default registry.
    context:
        Context mapping handed to ``Registry.set_context``. Empty means the
        context is left unset.
    plugins:
        Plugin references to add, in order.
    """

    registry: str | None = None
    context: dict[str, Any] = field(default_factory=dict)
    plugins: list[Any] = field(default_factory=list)

    def apply(self, store: RegistryStore | None = None) -> Registry:
        """Get the configured registry, set its context and add its plugins."""
        registry = (store if store is not None else default_store()).get(self.registry)
        if self.context:
            registry.set_context(self.context)
        return registry.add(self.plugins)


def parse_config(data: Any, base_dir: str | os.PathLike[str] | None = None) -> RegistryConfig:
    """Validate a decoded configuration document.

    Raises
    ------
    ConfigError
        If the document or one of its sections has the wrong shape.
    """
    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ConfigError("Registry configuration must be a mapping")

    registry = data.get("registry")
    if registry is not None and not isinstance(registry, str):
        raise ConfigError("'registry' must be a string")

    context = data.get("context") or {}
    if not isinstance(context, dict):
        raise ConfigError("'context' must be a mapping")
    context = dict(context)
    if base_dir is not None:
        for key in _BASE_PATH_KEYS:
            value = context.get(key)
            if isinstance(value, str) and value and not os.path.isabs(value):
                context[key] = os.path.abspath(os.path.join(base_dir, value))

    plugins = data.get("plugins") or []
    if not isinstance(plugins, list):
        raise ConfigError("'plugins' must be a list")
    for entry in plugins:
        if not isinstance(entry, (str, dict)):
            raise ConfigError(f"Invalid plugin entry {entry!r}: expected a name or a mapping")

    return RegistryConfig(registry=registry, context=context, plugins=list(plugins))


def load_config(path: str | os.PathLike[str]) -> RegistryConfig:
    """Read and validate a YAML registry configuration file.

    Raises
    ------
    ConfigError
        If the file cannot be read, is not valid YAML, or has the wrong shape.
    """
    config_path = Path(path)
    try:
        text = config_path.read_text(encoding="utf-8")
    except OSError as exc:
        raise ConfigError(f"Cannot read {config_path}: {exc}") from exc
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigError(f"Invalid YAML in {config_path}: {exc}") from exc
    return parse_config(data, base_dir=config_path.resolve().parent)


__all__ = ["RegistryConfig", "load_config", "parse_config"]
