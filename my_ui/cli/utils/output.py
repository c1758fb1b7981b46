# my_ui/cli/utils/output.py
"""Output formatting utilities"""

import json
from typing import Any, Iterable, List, Optional

import yaml
from rich import box
from rich.console import Console
from rich.panel import Panel
from rich.syntax import Syntax
from rich.table import Table

from ...constants import (
    EMOJI_CLIPBOARD,
    EMOJI_SUCCESS,
    EMOJI_WARNING,
    TEST_FRAMEWORK_INSTALL_COMMANDS,
)
from ...core.setup_tests import frameworks_for
from ...models import CopyResult, FileStatus, InstallEntry, RegistryItem

console = Console()


def format_item_table(items: Iterable[RegistryItem],
                      title: str,
                      style: str = "green") -> None:
    """Display one bucket of registry items"""
    items = list(items)
    if not items:
        console.print(f"[yellow]No {title.lower()} found[/yellow]\n")
        return

    table = Table(title=title, box=box.SIMPLE, title_justify="left")
    table.add_column("Name", style=style, no_wrap=True)
    table.add_column("Description", style="dim")
    table.add_column("Since", justify="right")

    for item in items:
        name = item.name
        if item.is_deprecated:
            name = f"{name} [yellow](deprecated)[/yellow]"
        table.add_row(name, item.description, item.meta.since)

    console.print(table)


def format_item_info(item: RegistryItem) -> None:
    """Display details of a single item"""
    lines = [
        f"[dim]{item.description}[/dim]",
        "",
        f"[bold cyan]Category:[/bold cyan] {item.category.value}",
        f"[bold cyan]Since:[/bold cyan] {item.meta.since}",
    ]

    if item.meta.deprecated:
        lines.append(f"[bold yellow]Deprecated:[/bold yellow] {item.meta.deprecated}")

    if item.meta.breaking:
        lines.append(f"[bold red]Breaking:[/bold red] {item.meta.breaking}")

    lines.append("[bold cyan]Files:[/bold cyan]")
    for file in item.files:
        lines.append(f"  • {file}")

    if item.dependencies:
        lines.append("[bold cyan]Dependencies:[/bold cyan]")
        for dependency in item.dependencies:
            lines.append(f"  • {dependency}")

    panel = Panel(
        "\n".join(lines),
        title=item.name,
        border_style="cyan"
    )
    console.print(panel)


def format_install_plan(plan: List[InstallEntry]) -> None:
    """Display the items an add operation is about to copy"""
    console.print(f"\n[cyan]{EMOJI_CLIPBOARD} Will be added:[/cyan]\n")
    for entry in plan:
        label = " [dim](dependency)[/dim]" if entry.is_dependency else ""
        console.print(f"  [green]•[/green] {entry.name}{label}")
    console.print()


def format_copy_result(result: CopyResult) -> None:
    """Display per-file outcome of a copy operation"""
    for outcome in result.files:
        if outcome.status is FileStatus.COPIED:
            console.print(f"  [green]{EMOJI_SUCCESS} {outcome.destination}[/green]")
        elif outcome.status is FileStatus.REPLACED:
            console.print(f"  [green]{EMOJI_SUCCESS} {outcome.destination} (replaced)[/green]")

    for advisory in result.advisories:
        console.print(f"  [yellow]{EMOJI_WARNING} {advisory.message}[/yellow]")


def print_install_hints(framework: str) -> None:
    """Show the npm command installing each chosen framework's packages"""
    console.print("\n[cyan]Install the required dependencies:[/cyan]\n")
    for fw in frameworks_for(framework):
        console.print(f"[bold]For {fw.capitalize()}:[/bold]")
        console.print(f"[dim]{TEST_FRAMEWORK_INSTALL_COMMANDS[fw]}[/dim]\n")


def format_json(data: Any, title: Optional[str] = None) -> None:
    """Format and display JSON data with syntax highlighting"""
    json_str = json.dumps(data, indent=2, ensure_ascii=False, default=str)
    syntax = Syntax(json_str, "json", theme="monokai", line_numbers=False)

    if title:
        panel = Panel(syntax, title=title, border_style="blue")
        console.print(panel)
    else:
        console.print(syntax)


def format_yaml(data: Any, title: Optional[str] = None) -> None:
    """Format and display YAML data with syntax highlighting"""
    yaml_str = yaml.safe_dump(data, default_flow_style=False, sort_keys=False, allow_unicode=True)
    syntax = Syntax(yaml_str, "yaml", theme="monokai", line_numbers=False)

    if title:
        panel = Panel(syntax, title=title, border_style="blue")
        console.print(panel)
    else:
        console.print(syntax)


def print_error(message: str, error: Optional[Exception] = None) -> None:
    """Print error message"""
    if error:
        console.print(f"[red]Error:[/red] {message}: {str(error)}")
    else:
        console.print(f"[red]Error:[/red] {message}")


def print_warning(message: str) -> None:
    """Print warning message"""
    console.print(f"[yellow]{EMOJI_WARNING} {message}[/yellow]")


def print_success(message: str) -> None:
    """Print success message"""
    console.print(f"[green]{EMOJI_SUCCESS} {message}[/green]")
