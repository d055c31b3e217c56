"""Demonstration execution commands."""

from typing import Optional

import typer
from typing_extensions import Annotated

from pattern_spine.app.commands.executions import (
    RunAllPatternsCommand,
    RunAllPatternsRequest,
    RunPatternCommand,
    RunPatternRequest,
)
from pattern_spine.app.models import ErrorCode
from pattern_spine.config import get_settings

from ..params import ParamParser
from ..ui import print_lines, render_error_panel, render_result, render_summary_panel


def run_pattern_cmd(
    ctx: typer.Context,
    name: Annotated[str, typer.Argument(help="Pattern name (e.g., factory)")],
    param: Annotated[
        Optional[list[str]],
        typer.Option("-p", "--param", help="Parameter as key=value (repeatable)"),
    ] = None,
) -> None:
    """
    Run one pattern example and print its output.

    Parameters can be given as -p key=value flags or as trailing
    key=value arguments, e.g. ``pattern-spine run factory kind=cat``.
    """
    try:
        params = ParamParser.merge_params(
            param_flags=param or [],
            extra_args=tuple(ctx.args) if ctx.args else (),
        )
    except ValueError as e:
        render_error_panel(ErrorCode.INVALID_PARAMS.value, str(e))
        raise typer.Exit(1)

    result = RunPatternCommand().execute(RunPatternRequest(name=name, params=params))

    if result.failed():
        error = result.error
        details: list[str] = []
        if error.code == ErrorCode.NOT_FOUND:
            details.append("Use 'pattern-spine list' to see available patterns.")
        elif error.code == ErrorCode.INVALID_PARAMS:
            details.append(f"Run 'pattern-spine describe {name}' to see accepted parameters.")
        render_error_panel(error.code.value, error.message, details=details or None)
        raise typer.Exit(1)

    print_lines(result.lines)


def run_all_cmd(
    category: Annotated[
        Optional[str],
        typer.Option("--category", "-c", help="Only run patterns in this category"),
    ] = None,
    fail_fast: Annotated[
        bool,
        typer.Option("--fail-fast", help="Stop after the first failed demonstration"),
    ] = False,
    timing: Annotated[
        Optional[bool],
        typer.Option("--timing/--no-timing", help="Show per-pattern durations"),
    ] = None,
) -> None:
    """Run every pattern example; failures are reported inline."""
    result = RunAllPatternsCommand().execute(
        RunAllPatternsRequest(category=category, fail_fast=fail_fast)
    )

    if result.failed():
        render_error_panel(result.error.code.value, result.error.message)
        raise typer.Exit(1)

    show_timing = timing if timing is not None else get_settings().show_timing
    for outcome in result.results:
        render_result(outcome, show_timing=show_timing)

    render_summary_panel(total=len(result.results), failed=result.failed_count)
