"""Retarget command."""

from typing import Annotated

import typer

from a11yfix.api.patch.cmd_retarget import cmd_retarget
from a11yfix.cli._handle_stage_result import _handle_stage_result


def retarget(
    original: Annotated[str, typer.Argument(help="Full original file")],
    processed: Annotated[str, typer.Argument(help="Excerpt sent to the model")],
    suggestion: Annotated[str, typer.Argument(help="Model's replacement for the excerpt")],
    write: Annotated[bool, typer.Option("--write", "-w", help="Write the result back to the original")] = False,
) -> None:
    """Patch the original file with the edit made on its excerpt."""
    _handle_stage_result(cmd_retarget)(original, processed, suggestion, write)
