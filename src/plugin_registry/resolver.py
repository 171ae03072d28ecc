"""Definition resolver: turns plugin references into loaded plugins.

If the reference is a string, a plugin with that name in the context's
default category is assumed. Otherwise it should be a
:class:`~plugin_registry.definitions.PluginDefinition` or a mapping with a
``name`` and a ``category``, and optionally an absolute ``require_path``.

Without an explicit ``require_path`` the plugin is looked for in

- the tool's own dependencies,
- the project's own dependencies,
- a sibling directory of the tool, which is where a globally installed
  tool finds its globally installed plugins.

The first location that loads wins.
"""
from __future__ import annotations

import dataclasses
import logging
import os
from collections.abc import Mapping
from types import ModuleType

from plugin_registry.context import RegistryContext
from plugin_registry.definitions import (
    PluginDefinition,
    PluginReference,
    ResolvedPluginDefinition,
)
from plugin_registry.errors import (
    InvalidBasePathError,
    MissingCategoryError,
    MissingNameError,
    ModuleLoadFailedError,
    PluginNotFoundError,
    RelativePathRejectedError,
    ResolvedPathNotAbsoluteError,
)
from plugin_registry.loader import FileModuleLoader, ModuleLoader
from plugin_registry.paths import candidate_paths, infer_tool_path, is_absolute_path

logger = logging.getLogger(__name__)

_default_loader = FileModuleLoader()


def normalize_reference(
    reference: PluginReference, context: RegistryContext
) -> PluginDefinition:
    """Coerce any accepted reference form into a :class:`PluginDefinition`.

    Validation happens in :func:`resolve_plugin_definition`; this only
    changes the shape.
    """
    if isinstance(reference, str):
        return PluginDefinition(name=reference, category=context.plugin_category)
    if isinstance(reference, PluginDefinition):
        return reference
    if isinstance(reference, Mapping):
        return PluginDefinition.from_mapping(reference)
    raise TypeError(
        f"Cannot use {reference!r} as a plugin reference: "
        "expected a name, a PluginDefinition or a mapping."
    )


def _is_non_empty_str(value: object) -> bool:
    return isinstance(value, str) and len(value) > 0


def fill_base_paths(context: RegistryContext) -> RegistryContext:
    """Return ``context`` with a missing tool or project path filled in.

    The tool path is inferred from the caller, the project path is the
    current working directory. ``context`` itself is never modified; when
    nothing is missing it is returned as is.
    """
    changes: dict[str, str] = {}
    if not context.tool_path:
        changes["tool_path"] = infer_tool_path()
        logger.debug("Inferred tool path %s", changes["tool_path"])
    if not context.project_path:
        changes["project_path"] = os.path.abspath(".")
        logger.debug("Inferred project path %s", changes["project_path"])
    return dataclasses.replace(context, **changes) if changes else context


def _as_path(value: object) -> str | None:
    if isinstance(value, (str, os.PathLike)):
        return os.fspath(value)
    return None


def _base_paths(context: RegistryContext) -> tuple[str, str]:
    """Return the validated tool and project paths of a filled-in ``context``."""
    tool_path = _as_path(context.tool_path)
    project_path = _as_path(context.project_path)
    if tool_path is None or not is_absolute_path(tool_path):
        raise InvalidBasePathError("tool", str(context.tool_path))
    if project_path is None or not is_absolute_path(project_path):
        raise InvalidBasePathError("project", str(context.project_path))
    return tool_path, project_path


def _first_loadable(
    name: str, paths: list[str], loader: ModuleLoader
) -> tuple[str, ModuleType]:
    failed_paths: list[str] = []
    for path in paths:
        try:
            module = loader(path)
        except Exception as exc:  # noqa: BLE001
            logger.debug("Plugin %r not loadable from %s: %s", name, path, exc)
            failed_paths.append(path)
            continue
        return path, module
    raise PluginNotFoundError(name, failed_paths)


def resolve_in_context(
    reference: PluginReference,
    context: RegistryContext,
    loader: ModuleLoader | None = None,
) -> tuple[ResolvedPluginDefinition, RegistryContext]:
    """Resolve ``reference`` and return it with the context it was resolved in.

    The returned context equals ``context`` unless the candidate locations
    had to be searched and a base path was missing; then it is a copy with
    the inferred ``tool_path``/``project_path`` filled in. Registries keep
    that copy so later resolutions reuse the inferred paths.

    Raises the same errors as :func:`resolve_plugin_definition`.
    """
    load = loader if loader is not None else _default_loader
    definition = normalize_reference(reference, context)

    name = definition.name
    if not _is_non_empty_str(name):
        raise MissingNameError()
    if not _is_non_empty_str(definition.category):
        raise MissingCategoryError(name)

    explicit_path = _as_path(definition.require_path)
    if explicit_path is not None:
        require_path = explicit_path
        if not is_absolute_path(require_path):
            raise RelativePathRejectedError(name, require_path)
        try:
            module = load(require_path)
        except Exception as exc:
            raise ModuleLoadFailedError(name, require_path) from exc
    else:
        context = fill_base_paths(context)
        tool_path, project_path = _base_paths(context)
        require_path, module = _first_loadable(
            name, candidate_paths(name, tool_path, project_path), load
        )

    if not is_absolute_path(require_path):
        raise ResolvedPathNotAbsoluteError(name, require_path)

    logger.debug("Resolved plugin %r (%s) to %s", name, definition.category, require_path)
    resolved = ResolvedPluginDefinition(
        name=name,
        category=definition.category,
        require_path=require_path,
        module=module,
        extras=dict(definition.extras),
    )
    return resolved, context


def resolve_plugin_definition(
    reference: PluginReference,
    context: RegistryContext,
    loader: ModuleLoader | None = None,
) -> ResolvedPluginDefinition:
    """Locate and load the plugin described by ``reference``.

    Parameters
    ----------
    reference:
        A bare plugin name, a ``PluginDefinition`` or a mapping.
    context:
        The context to resolve in. It is never modified; missing base paths
        are inferred for this call only (see :func:`resolve_in_context`).
    loader:
        Module loading capability; defaults to :class:`FileModuleLoader`.

    Returns
    -------
    ResolvedPluginDefinition
        The definition together with the path it loaded from and the module.

    Raises
    ------
    MissingNameError, MissingCategoryError
        If the reference lacks a non-empty name or category.
    RelativePathRejectedError
        If an explicit ``require_path`` is not absolute. A ``require_path``
        that is neither a string nor path-like is ignored and the candidate
        locations are searched instead.
    ModuleLoadFailedError
        If an explicit ``require_path`` cannot be loaded.
    InvalidBasePathError
        If the tool or project path is not absolute.
    PluginNotFoundError
        If no candidate location could be loaded.
    """
    resolved, _ = resolve_in_context(reference, context, loader)
    return resolved


__all__ = [
    "candidate_paths",
    "fill_base_paths",
    "normalize_reference",
    "resolve_in_context",
    "resolve_plugin_definition",
]
