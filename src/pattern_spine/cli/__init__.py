"""Command-line interface for pattern-spine using Typer."""

from typing import Optional

import typer
from typing_extensions import Annotated

# Configure logging FIRST, before any imports that trigger pattern registration
from pattern_spine.logging import configure_logging

configure_logging()

from pattern_spine import __version__  # noqa: E402

from .commands import list_, run  # noqa: E402
from .console import console  # noqa: E402
from .logging_config import LogFormat, LogLevel, configure_cli_logging  # noqa: E402

app = typer.Typer(
    name="pattern-spine",
    help="pattern-spine - SOLID principles and classic design patterns, runnable",
    add_completion=False,
    no_args_is_help=True,
    rich_markup_mode="rich",
)

app.command("list")(list_.list_patterns_cmd)
app.command("describe")(list_.describe_pattern_cmd)
app.command(
    "run",
    context_settings={"allow_extra_args": True, "ignore_unknown_options": True},
)(run.run_pattern_cmd)
app.command("run-all")(run.run_all_cmd)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"pattern-spine, version {__version__}")
        raise typer.Exit()


@app.callback()
def main_callback(
    version: Annotated[
        Optional[bool],
        typer.Option("--version", callback=version_callback, is_eager=True, help="Show version and exit"),
    ] = None,
    log_level: Annotated[
        Optional[LogLevel],
        typer.Option("--log-level", case_sensitive=False, help="Logging level"),
    ] = None,
    log_format: Annotated[
        Optional[LogFormat],
        typer.Option("--log-format", help="Log format"),
    ] = None,
    quiet: Annotated[
        bool,
        typer.Option("--quiet", "-q", help="Only log errors"),
    ] = False,
) -> None:
    """
    pattern-spine - SOLID principles and classic design patterns.

    Logs go to stderr; demonstration output goes to stdout.
    """
    configure_cli_logging(log_level=log_level, log_format=log_format, quiet=quiet)


def cli_main() -> None:
    """Console script entry point."""
    app()


if __name__ == "__main__":
    cli_main()
