"""Pattern discovery and inspection commands."""

from typing import Optional

import typer
from rich.markup import escape
from typing_extensions import Annotated

from pattern_spine.app.commands.patterns import (
    DescribePatternCommand,
    DescribePatternRequest,
    ListPatternsCommand,
    ListPatternsRequest,
)
from pattern_spine.app.models import ErrorCode

from ..console import console
from ..ui import create_pattern_table, render_error_panel


def list_patterns_cmd(
    category: Annotated[
        Optional[str],
        typer.Option("--category", "-c", help="Filter by category (solid, creational, structural, behavioral)"),
    ] = None,
    plain: Annotated[
        bool,
        typer.Option("--plain", help="Print one name per line"),
    ] = False,
) -> None:
    """List all registered pattern examples in registration order."""
    result = ListPatternsCommand().execute(ListPatternsRequest(category=category))

    if result.failed():
        render_error_panel(result.error.code.value, result.error.message)
        raise typer.Exit(1)

    if plain:
        for pattern in result.patterns:
            console.print(pattern.name, markup=False, highlight=False)
        return

    if not result.patterns:
        if category:
            console.print(f"[yellow]No patterns found in category: {escape(category)}[/yellow]")
        else:
            console.print("[yellow]No patterns registered[/yellow]")
        return

    rows = [(p.name, p.category, p.description) for p in result.patterns]
    console.print(create_pattern_table(rows))
    console.print(f"\n[dim]Found {len(result.patterns)} pattern(s)[/dim]")


def describe_pattern_cmd(
    name: Annotated[str, typer.Argument(help="Pattern name to describe")],
) -> None:
    """Show details about one pattern example."""
    result = DescribePatternCommand().execute(DescribePatternRequest(name=name))

    if result.failed():
        details = None
        if result.error.code == ErrorCode.NOT_FOUND:
            details = ["Use 'pattern-spine list' to see available patterns."]
        render_error_panel(result.error.code.value, result.error.message, details=details)
        raise typer.Exit(1)

    detail = result.pattern
    console.print(f"\n[bold cyan]Pattern:[/bold cyan] {detail.name}")
    console.print(f"[bold cyan]Category:[/bold cyan] {detail.category}")
    console.print(f"[bold cyan]Description:[/bold cyan] {detail.description}\n")

    if detail.parameters:
        console.print("[bold]Parameters:[/bold]")
        for param in detail.parameters:
            console.print(f"  • [cyan]{param}[/cyan]")
        console.print(f"\n  pattern-spine run {detail.name} {detail.parameters[0]}=<value>")
    else:
        console.print("[dim]No parameters defined[/dim]")
