"""CLI entry point for plugin-registry.

Invoked as::

    plugin-registry [OPTIONS] COMMAND [ARGS]...

or, during development::

    python -m plugin_registry.cli.main

Commands
--------
candidates  Show where a plugin would be looked for
resolve     Locate and load a single plugin
load        Build a registry from a YAML configuration file
version     Show version information
"""
from __future__ import annotations

import os
import sys
from typing import TYPE_CHECKING, Any

import click
from rich.console import Console
from rich.table import Table

if TYPE_CHECKING:
    from plugin_registry import Registry, ResolvedPluginDefinition

console = Console()
err_console = Console(stderr=True)


def _context_options(tool_path: str | None, project_path: str | None) -> dict[str, Any]:
    """Build a context mapping from CLI options; both paths default to the cwd."""
    return {
        "tool_path": os.path.abspath(tool_path or "."),
        "project_path": os.path.abspath(project_path or "."),
    }


def _plugin_table(title: str, plugins: "list[ResolvedPluginDefinition]") -> Table:
    table = Table(title=title, show_lines=True)
    table.add_column("Category", style="bold", min_width=10)
    table.add_column("Name", min_width=10)
    table.add_column("Require path")
    table.add_column("Module", style="dim")
    for plugin in plugins:
        table.add_row(plugin.category, plugin.name, plugin.require_path, plugin.module.__name__)
    return table


def _print_registry(registry: "Registry") -> None:
    full = registry.get_full_registry()
    if not full:
        console.print(f"[yellow]Registry {registry.name!r} is empty.[/yellow]")
        return
    plugins = [plugin for category_plugins in full.values() for plugin in category_plugins]
    console.print(_plugin_table(f"Registry: {registry.name}", plugins))
    console.print(
        f"\n[bold]{len(plugins)}[/bold] plugin(s) in {len(full)} categor"
        f"{'y' if len(full) == 1 else 'ies'}"
    )


# ---------------------------------------------------------------------------
# CLI group
# ---------------------------------------------------------------------------


@click.group()
@click.version_option(package_name="plugin-registry")
def cli() -> None:
    """Find, load and register plugins by name."""


# ---------------------------------------------------------------------------
# version command
# ---------------------------------------------------------------------------


@cli.command(name="version")
def version_command() -> None:
    """Show detailed version information."""
    from plugin_registry import __version__

    table = Table(show_header=False, box=None)
    table.add_row("[bold]plugin-registry[/bold]", f"v{__version__}")
    table.add_row("Python", f"{sys.version_info.major}.{sys.version_info.minor}.{sys.version_info.micro}")
    table.add_row("Platform", sys.platform)
    console.print(table)


# ---------------------------------------------------------------------------
# candidates command
# ---------------------------------------------------------------------------


@cli.command(name="candidates")
@click.argument("name")
@click.option("--tool-path", default=None, help="Tool path (defaults to the current directory)")
@click.option("--project-path", default=None, help="Project path (defaults to the current directory)")
def candidates_command(name: str, tool_path: str | None, project_path: str | None) -> None:
    """Show the locations searched for a plugin, in order.

    NAME is the plugin name.
    """
    from plugin_registry import candidate_paths, is_loadable

    context = _context_options(tool_path, project_path)

    table = Table(title=f"Candidates: {name}", show_lines=True)
    table.add_column("#", min_width=2)
    table.add_column("Location", min_width=10)
    table.add_column("Path")
    table.add_column("Loadable")

    paths = candidate_paths(name, context["tool_path"], context["project_path"])
    labels = ("tool", "project", "global")
    for index, (label, path) in enumerate(zip(labels, paths), start=1):
        found = is_loadable(path)
        table.add_row(str(index), label, path, "[green]yes[/green]" if found else "[dim]no[/dim]")

    console.print(table)


# ---------------------------------------------------------------------------
# resolve command
# ---------------------------------------------------------------------------


@cli.command(name="resolve")
@click.argument("reference")
@click.option("--category", default=None, help="Plugin category (defaults to 'task')")
@click.option("--require-path", default=None, help="Explicit absolute path to load the plugin from")
@click.option("--tool-path", default=None, help="Tool path (defaults to the current directory)")
@click.option("--project-path", default=None, help="Project path (defaults to the current directory)")
def resolve_command(
    reference: str,
    category: str | None,
    require_path: str | None,
    tool_path: str | None,
    project_path: str | None,
) -> None:
    """Locate and load a single plugin.

    REFERENCE is the plugin name.

    Examples:

    \b
        plugin-registry resolve lint-plugin
        plugin-registry resolve deploy --category command --tool-path /opt/my-tool
    """
    from plugin_registry import PluginRegistryError, RegistryStore

    context = _context_options(tool_path, project_path)
    if category:
        context["default_plugin_category"] = category

    registry = RegistryStore().get()
    registry.set_context(context)

    plugin: Any = reference
    if require_path is not None:
        plugin = {
            "name": reference,
            "category": registry.get_context().plugin_category,
            "require_path": require_path,
        }

    try:
        registry.add(plugin)
    except PluginRegistryError as exc:
        err_console.print(f"[red]Error:[/red] {exc}")
        sys.exit(1)

    _print_registry(registry)


# ---------------------------------------------------------------------------
# load command
# ---------------------------------------------------------------------------


@cli.command(name="load")
@click.argument("config", type=click.Path(exists=False))
def load_command(config: str) -> None:
    """Build a registry from a YAML configuration file and show it.

    CONFIG is the path to the configuration file.
    """
    from plugin_registry import PluginRegistryError, RegistryStore, load_config

    try:
        registry_config = load_config(config)
        registry = registry_config.apply(RegistryStore())
    except PluginRegistryError as exc:
        err_console.print(f"[red]Error:[/red] {exc}")
        sys.exit(1)

    _print_registry(registry)


if __name__ == "__main__":
    cli()
