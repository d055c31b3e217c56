"""Rich UI components for panels, tables, and demonstration output."""

from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from pattern_spine.models import DemonstrationResult

from .console import console


def create_pattern_table(patterns: list[tuple[str, str, str]]) -> Table:
    """Create a table of (name, category, description) rows."""
    table = Table(title="Pattern Examples", show_header=True, header_style="bold cyan")
    table.add_column("Name", style="green", no_wrap=True)
    table.add_column("Category", style="magenta")
    table.add_column("Description", style="dim")

    for name, category, description in patterns:
        table.add_row(name, category, description)

    return table


def print_lines(lines: list[str] | tuple[str, ...], prefix: str = "") -> None:
    """Print demonstration output verbatim (no markup, no highlighting)."""
    for line in lines:
        console.print(f"{prefix}{line}", markup=False, highlight=False, soft_wrap=True)


def render_result(result: DemonstrationResult, show_timing: bool = False) -> None:
    """Render one run-all entry, every line prefixed by the pattern name."""
    prefix = f"{result.name}: "
    if result.succeeded:
        print_lines(result.lines, prefix=prefix)
    else:
        print_lines([f"{result.error_code}: {result.error}"], prefix=prefix)
    if show_timing:
        console.print(f"[dim]{result.name}: {result.duration_seconds * 1000:.2f}ms[/dim]")


def render_summary_panel(total: int, failed: int) -> None:
    """Render run-all summary panel."""
    lines = [
        f"Ran: {total}",
        f"Completed: {total - failed}",
        f"Failed: {failed}",
    ]
    panel = Panel(
        "\n".join(lines),
        title="Summary",
        border_style="green" if failed == 0 else "yellow",
    )
    console.print(panel)


def render_error_panel(title: str, message: str, details: list[str] | None = None) -> None:
    """
    Render an error as ``<title>: <message>`` followed by a hints panel.

    The message often echoes user input, so it is printed as plain text on
    one unwrapped line rather than parsed as markup or folded into a box.
    """
    console.print(Text.assemble((f"{title}: ", "bold red"), message), soft_wrap=True)

    if details:
        hints = Text("\n".join(f"• {detail}" for detail in details))
        console.print(Panel(hints, title=title, border_style="red"))
