"""Apply command."""

from typing import Annotated

import typer

from a11yfix.api.patch.cmd_apply import cmd_apply
from a11yfix.cli._handle_stage_result import _handle_stage_result


def apply(
    target: Annotated[str, typer.Argument(help="File to fix")],
    suggestion: Annotated[str, typer.Argument(help="File holding the suggestion")],
    patch: Annotated[bool, typer.Option("--patch", "-p", help="Suggestion is a unified patch, not a replacement")] = False,
    write: Annotated[bool, typer.Option("--write", "-w", help="Write the result back to the target")] = False,
) -> None:
    """Apply a replacement or patch suggestion to a target file."""
    _handle_stage_result(cmd_apply)(target, suggestion, patch, write)
