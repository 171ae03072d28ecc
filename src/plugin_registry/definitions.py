"""Plugin definition records.

A plugin is referenced either by a bare name, by a :class:`PluginDefinition`
or by a plain mapping with the same keys. Resolution turns a reference into
a :class:`ResolvedPluginDefinition`, which additionally carries the absolute
path the plugin was loaded from and the loaded module itself.
"""
from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import ModuleType
from typing import Any, Union

_KEY_ALIASES = {"requirePath": "require_path"}
_KNOWN_KEYS = frozenset({"name", "category", "require_path"})


@dataclass
class PluginDefinition:
    """An unresolved plugin definition.

    Parameters
    ----------
    name:
        Identifier of the plugin; also the directory name searched on disk.
    category:
        Grouping key inside a registry, e.g. ``"task"``.
    require_path:
        Optional absolute path to load the plugin from. When given, no
        candidate searching takes place.
    extras:
        Any further keys supplied by the caller. They are carried through
        to the resolved definition untouched.
    """

    name: Any
    category: Any = None
    require_path: Any = None
    extras: dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "PluginDefinition":
        """Build a definition from a mapping, keeping unknown keys in ``extras``.

        ``requirePath`` is accepted as an alias of ``require_path``; when both
        are present ``require_path`` wins.
        """
        values = {_KEY_ALIASES.get(key, key): value for key, value in data.items()}
        if "require_path" in data:
            values["require_path"] = data["require_path"]
        return cls(
            name=values.get("name"),
            category=values.get("category"),
            require_path=values.get("require_path"),
            extras={k: v for k, v in values.items() if k not in _KNOWN_KEYS},
        )


@dataclass(frozen=True)
class ResolvedPluginDefinition:
    """A plugin definition whose module has been located and loaded."""

    name: str
    category: str
    require_path: str
    module: ModuleType
    extras: Mapping[str, Any] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        """Return the definition as a plain dict, module included."""
        result: dict[str, Any] = dict(self.extras)
        result.update(
            name=self.name,
            category=self.category,
            require_path=self.require_path,
            module=self.module,
        )
        return result


PluginReference = Union[str, PluginDefinition, Mapping[str, Any]]

__all__ = ["PluginDefinition", "PluginReference", "ResolvedPluginDefinition"]
