#!/usr/bin/env python3
"""Example: Quickstart — plugin-registry

Minimal working example: lay out a tool with plugins in the three searched
locations, register them, and query the registry.

Usage:
    python examples/01_quickstart.py

Requirements:
    pip install plugin-registry
"""
from __future__ import annotations

import tempfile
from pathlib import Path

import plugin_registry


def _write_plugin(directory: Path, location: str) -> None:
    directory.mkdir(parents=True, exist_ok=True)
    (directory / "__init__.py").write_text(f"LOCATION = {location!r}\n", encoding="utf-8")


def main() -> None:
    print(f"plugin-registry version: {plugin_registry.__version__}")

    with tempfile.TemporaryDirectory() as root_dir:
        root = Path(root_dir)
        tool = root / "my-tool"
        project = root / "my-project"

        # Step 1: Install plugins where the resolver looks for them
        _write_plugin(tool / "node_modules" / "bundled", "tool")
        _write_plugin(project / "node_modules" / "local", "project")
        _write_plugin(root / "global", "global")

        # Step 2: Get a registry and set its context once
        registry = plugin_registry.get("my-tool").set_context(
            {"tool_path": str(tool), "project_path": str(project)}
        )

        # Step 3: Add plugins by name or by definition
        registry.add("bundled", ["local", {"name": "global", "category": "command"}])

        # Step 4: Query
        for category, plugins in registry.get_full_registry().items():
            print(f"{category}:")
            for plugin in plugins:
                print(f"  {plugin.name:<8} {plugin.module.LOCATION:<8} {plugin.require_path}")

        # Step 5: A missing plugin reports every location it tried
        try:
            registry.add("missing")
        except plugin_registry.PluginNotFoundError as exc:
            print(exc)


if __name__ == "__main__":
    main()
