"""Bridge between typer commands and StageResult-returning cmd functions."""

import functools
from collections.abc import Callable

import click

from a11yfix.api.StageResult import StageResult

from ._run_single_execution import _run_single_execution
from .display import CLIDisplay

DISPLAY_FORMATS = ("json", "yaml")


def _display_format() -> str:
    """Output format chosen with the root ``--display`` option (yaml by default)."""
    ctx = click.get_current_context(silent=True)
    while ctx is not None:
        if isinstance(ctx.obj, dict) and ctx.obj.get("display_format") in DISPLAY_FORMATS:
            return ctx.obj["display_format"]
        ctx = ctx.parent
    return "yaml"


def _handle_stage_result(
    func: Callable[..., StageResult],
    result_printer: Callable[[dict], None] | None = None,
) -> Callable[..., None]:
    """Return a callable that runs ``func`` and renders its stages on the terminal.

    Args:
        func: cmd function returning a StageResult
        result_printer: Prints the output of a successful run instead of the
            YAML/JSON dump (``diff`` uses it to print the rendered diff)
    """

    @functools.wraps(func)
    def run(*args, **kwargs) -> None:
        _run_single_execution(func, args, kwargs, CLIDisplay(), _display_format(), result_printer)

    return run
