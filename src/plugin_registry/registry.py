"""Named plugin registries and the store that hands them out.

Registries are multitons: asking a :class:`RegistryStore` for the same name
twice returns the same :class:`Registry` instance. The module-level
:func:`get` and :func:`reset` operate on a process-wide default store.

Example
-------
::

    import plugin_registry

    registry = (
        plugin_registry.get("my-tool")
        .set_context({"tool_path": "/opt/my-tool"})
        .add("lint-plugin", {"name": "deploy", "category": "command"})
    )
    registry.get_all_of_category("command")
"""
from __future__ import annotations

import logging
import threading
from collections.abc import Iterable, Mapping
from enum import Enum, auto
from typing import Any, Union

from plugin_registry.context import RegistryContext
from plugin_registry.definitions import PluginReference, ResolvedPluginDefinition
from plugin_registry.errors import ContextAlreadySetError, InvalidArgumentError
from plugin_registry.loader import ModuleLoader
from plugin_registry.resolver import resolve_in_context

logger = logging.getLogger(__name__)

DEFAULT_REGISTRY_NAME = "DEFAULT_REGISTRY"


class ContextState(Enum):
    """Whether a registry's context has been set.

    UNSET
        The registry still uses its default, empty context.
    SET
        ``set_context`` has been called; the context can no longer change.
    """

    UNSET = auto()
    SET = auto()


class Registry:
    """A named, category-indexed collection of resolved plugins.

    Mutating methods return the registry itself so calls can be chained.

    Parameters
    ----------
    name:
        The registry name, used in error messages.
    loader:
        Module loading capability passed through to the resolver.
    """

    def __init__(self, name: str, loader: ModuleLoader | None = None) -> None:
        self._name = name
        self._loader = loader
        self._context = RegistryContext()
        self._context_state = ContextState.UNSET
        self._category_index: dict[str, list[ResolvedPluginDefinition]] = {}
        self._lock = threading.RLock()

    @property
    def name(self) -> str:
        return self._name

    @property
    def context_state(self) -> ContextState:
        return self._context_state

    # ------------------------------------------------------------------
    # Mutation
    # ------------------------------------------------------------------

    def set_context(
        self, new_context: Union[RegistryContext, Mapping[str, Any], None]
    ) -> "Registry":
        """Set the context used to resolve plugins. May only be called once.

        Raises
        ------
        InvalidArgumentError
            If ``new_context`` is ``None`` or neither a mapping nor a
            ``RegistryContext``. An empty mapping is valid and sets the
            default context.
        ContextAlreadySetError
            If the context of this registry was already set.
        """
        if isinstance(new_context, RegistryContext):
            context = new_context
        elif isinstance(new_context, Mapping):
            context = RegistryContext.from_mapping(new_context)
        else:
            raise InvalidArgumentError("Invalid context")

        with self._lock:
            if self._context_state is ContextState.SET:
                raise ContextAlreadySetError(self._name)
            self._context = context
            self._context_state = ContextState.SET
        logger.debug("Context set for registry %r", self._name)
        return self

    def add(
        self, *references: Union[PluginReference, Iterable[PluginReference]]
    ) -> "Registry":
        """Resolve plugins and add them to their categories.

        Each argument is either a single reference or a list/tuple of
        references. Plugins are resolved and appended in order; the first
        failure propagates and plugins added before it stay registered.
        """
        flattened: list[PluginReference] = []
        for argument in references:
            if isinstance(argument, (list, tuple)):
                flattened.extend(argument)
            else:
                flattened.append(argument)

        with self._lock:
            for reference in flattened:
                resolved, self._context = resolve_in_context(
                    reference, self._context, self._loader
                )
                self._category_index.setdefault(resolved.category, []).append(resolved)
                logger.debug(
                    "Registered plugin %r in category %r of registry %r",
                    resolved.name,
                    resolved.category,
                    self._name,
                )
        return self

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def get_all_of_category(self, category: str) -> tuple[ResolvedPluginDefinition, ...]:
        """Return all plugins of ``category``, or an empty tuple."""
        with self._lock:
            return tuple(self._category_index.get(category, ()))

    def get_full_registry(self) -> dict[str, tuple[ResolvedPluginDefinition, ...]]:
        """Return a snapshot of every category and its plugins."""
        with self._lock:
            return {
                category: tuple(plugins)
                for category, plugins in self._category_index.items()
            }

    def get_context(self) -> RegistryContext:
        """Return the current context, which may still be the default one.

        Contexts are immutable; base paths inferred while adding plugins show
        up in the context returned after the ``add`` call.
        """
        return self._context

    def categories(self) -> list[str]:
        """Return the populated categories in insertion order."""
        with self._lock:
            return list(self._category_index)

    def __len__(self) -> int:
        """Return the total number of registered plugin entries."""
        with self._lock:
            return sum(len(plugins) for plugins in self._category_index.values())

    def __repr__(self) -> str:
        return (
            f"Registry(name={self._name!r}, "
            f"context={self._context_state.name}, "
            f"categories={self.categories()})"
        )


class RegistryStore:
    """Hands out one :class:`Registry` per name.

    Parameters
    ----------
    loader:
        Module loading capability given to every registry this store creates.
    """

    def __init__(self, loader: ModuleLoader | None = None) -> None:
        self._loader = loader
        self._registries: dict[str, Registry] = {}
        self._lock = threading.RLock()

    def get(self, registry_name: str | None = None) -> Registry:
        """Return the registry called ``registry_name``, creating it if needed.

        Parameters
        ----------
        registry_name:
            Name of the registry. ``None`` selects ``"DEFAULT_REGISTRY"``.

        Raises
        ------
        InvalidArgumentError
            If ``registry_name`` is given but is not a non-empty string.
        """
        if registry_name is None:
            registry_name = DEFAULT_REGISTRY_NAME
        if not isinstance(registry_name, str) or len(registry_name) < 1:
            raise InvalidArgumentError("Invalid name for registry")

        with self._lock:
            registry = self._registries.get(registry_name)
            if registry is None:
                registry = Registry(registry_name, loader=self._loader)
                self._registries[registry_name] = registry
                logger.debug("Created registry %r", registry_name)
            return registry

    def reset(self) -> None:
        """Forget all registries and their plugins."""
        with self._lock:
            self._registries = {}
        logger.debug("Registry store reset")

    def names(self) -> list[str]:
        """Return the names of all registries created since the last reset."""
        with self._lock:
            return list(self._registries)

    def __contains__(self, registry_name: object) -> bool:
        return registry_name in self._registries

    def __len__(self) -> int:
        return len(self._registries)


_default_store = RegistryStore()


def default_store() -> RegistryStore:
    """Return the process-wide store behind :func:`get` and :func:`reset`."""
    return _default_store


def get(registry_name: str | None = None) -> Registry:
    """Return the named registry from the process-wide store."""
    return _default_store.get(registry_name)


def reset() -> None:
    """Forget every registry in the process-wide store."""
    _default_store.reset()


__all__ = [
    "DEFAULT_REGISTRY_NAME",
    "ContextState",
    "Registry",
    "RegistryStore",
    "default_store",
    "get",
    "reset",
]
