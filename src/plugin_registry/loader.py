"""Module loading by absolute filesystem path.

The resolver only needs a callable that takes an absolute path and either
returns a module or raises. :class:`FileModuleLoader` is the default; tests
and embedding applications may pass any other :class:`ModuleLoader`.

A path is loadable when it is

- a package directory (``<path>/__init__.py`` exists),
- a Python source file, or
- a path that becomes a Python source file once ``.py`` is appended.

Loaded modules are cached in ``sys.modules`` under a name derived from the
path, so loading the same path twice returns the same module object.
"""
from __future__ import annotations

import hashlib
import importlib.util
import logging
import os
import sys
from types import ModuleType
from typing import Protocol

logger = logging.getLogger(__name__)

_MODULE_PREFIX = "_plugin_registry_"


class ModuleLoader(Protocol):
    """Load the module found at an absolute path, raising if there is none."""

    def __call__(self, path: str) -> ModuleType: ...


def module_name_for(path: str) -> str:
    """Return the ``sys.modules`` key used for the module at ``path``."""
    digest = hashlib.sha1(path.encode("utf-8")).hexdigest()[:16]
    return f"{_MODULE_PREFIX}{digest}"


def module_source(path: str) -> str | None:
    """Return the file a module at ``path`` would be executed from, or ``None``.

    ``None`` means ``path`` is not loadable: neither a package directory
    with ``__init__.py``, nor a ``.py`` file, nor a path that names one
    once ``.py`` is appended.
    """
    init_file = os.path.join(path, "__init__.py")
    if os.path.isdir(path) and os.path.isfile(init_file):
        return init_file
    if path.endswith(".py") and os.path.isfile(path):
        return path
    if os.path.isfile(path + ".py"):
        return path + ".py"
    return None


def is_loadable(path: str) -> bool:
    """Return whether :class:`FileModuleLoader` would find a module at ``path``."""
    return module_source(os.path.abspath(path)) is not None


class FileModuleLoader:
    """Load plugins from package directories and ``.py`` files."""

    def __call__(self, path: str) -> ModuleType:
        path = os.path.abspath(path)
        module_name = module_name_for(path)
        cached = sys.modules.get(module_name)
        if cached is not None:
            return cached

        source = module_source(path)
        if source is None:
            raise ModuleNotFoundError(f"No loadable module at {path}", path=path)
        if os.path.isdir(path):
            spec = importlib.util.spec_from_file_location(
                module_name, source, submodule_search_locations=[path]
            )
        else:
            spec = importlib.util.spec_from_file_location(module_name, source)

        if spec is None or spec.loader is None:
            raise ImportError(f"Cannot build an import spec for {path}", path=path)

        module = importlib.util.module_from_spec(spec)
        sys.modules[module_name] = module
        try:
            spec.loader.exec_module(module)
        except BaseException:
            del sys.modules[module_name]
            raise
        logger.debug("Loaded module %s from %s", module_name, path)
        return module


def unload(path: str) -> None:
    """Drop the cached module for ``path``, if any."""
    sys.modules.pop(module_name_for(os.path.abspath(path)), None)


__all__ = [
    "FileModuleLoader",
    "ModuleLoader",
    "is_loadable",
    "module_name_for",
    "module_source",
    "unload",
]
