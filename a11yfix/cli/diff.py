"""Diff command."""

from typing import Annotated

import typer

from a11yfix.api.patch.cmd_diff import cmd_diff
from a11yfix.cli._handle_stage_result import _handle_stage_result
from a11yfix.cli.display import CLIDisplay


def diff(
    file_a: Annotated[str, typer.Argument(help="Original file")],
    file_b: Annotated[str, typer.Argument(help="Suggested file")],
    chars: Annotated[bool, typer.Option("--chars", "-c", help="Character diff instead of a patch")] = False,
    color: Annotated[
        bool | None, typer.Option("--color/--no-color", help="Override the configured color setting")
    ] = None,
) -> None:
    """Render a unified patch (or character diff) between two files."""

    def print_diff(output: dict) -> None:
        CLIDisplay().text_output(output["diff"])

    _handle_stage_result(cmd_diff, result_printer=print_diff)(file_a, file_b, "chars" if chars else "patch", color)
