"""Registry context: the settings that steer plugin path inference."""
from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any

DEFAULT_PLUGIN_CATEGORY = "task"

_KEY_ALIASES = {
    "defaultPluginCategory": "default_plugin_category",
    "toolPath": "tool_path",
    "projectPath": "project_path",
}
_KNOWN_KEYS = frozenset({"default_plugin_category", "tool_path", "project_path"})


@dataclass(frozen=True)
class RegistryContext:
    """Options consumed by the definition resolver.

    Parameters
    ----------
    default_plugin_category:
        Category assigned to plugins referenced by bare name. Falls back to
        ``"task"`` when unset.
    tool_path:
        Absolute path of the tool that hosts the plugins. Inferred from the
        first caller outside this package when unset.
    project_path:
        Absolute path of the project the tool runs in. Defaults to the
        current working directory when unset.
    options:
        Any further keys; kept for callers, ignored by the resolver.

    Contexts are immutable. A registry that infers ``tool_path`` or
    ``project_path`` stores a copy with those fields filled in, so every
    later resolution in the same registry searches the same locations.
    """

    default_plugin_category: str | None = None
    tool_path: str | None = None
    project_path: str | None = None
    options: Mapping[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "options", MappingProxyType(dict(self.options)))

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "RegistryContext":
        """Build a context from a mapping, keeping unknown keys in ``options``.

        The camelCase spellings ``defaultPluginCategory``, ``toolPath`` and
        ``projectPath`` are accepted as aliases.
        """
        values = {_KEY_ALIASES.get(key, key): value for key, value in data.items()}
        return cls(
            default_plugin_category=values.get("default_plugin_category"),
            tool_path=values.get("tool_path"),
            project_path=values.get("project_path"),
            options={k: v for k, v in values.items() if k not in _KNOWN_KEYS},
        )

    @property
    def plugin_category(self) -> str:
        """The category used for bare-name references."""
        return self.default_plugin_category or DEFAULT_PLUGIN_CATEGORY


__all__ = ["DEFAULT_PLUGIN_CATEGORY", "RegistryContext"]
