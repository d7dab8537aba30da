"""Drive a StageResult through its four display stages."""

import sys
from collections.abc import Callable
from datetime import datetime
from typing import Any

from a11yfix.api.StageResult import StageResult


def _run_single_execution(
    func: Callable[..., StageResult],
    args: tuple,
    kwargs: dict,
    display: Any,
    display_format: str,
    result_printer: Callable[[dict], None] | None = None,
) -> None:
    """Announce, report progress, report the result, print the output, then exit.

    Exits 0 when the command succeeded and 1 otherwise. Command functions
    report their own failures through ``output["errors"]``.
    """
    stage = func(*args, **kwargs)
    display.status(stage.announce)

    for fraction, message in stage.progress_callback(stage):
        clock = datetime.now().strftime("%H:%M:%S")
        display.info(f"[dim]{clock}[/dim] Progress: {message} ({fraction:.1%})")

    if not stage.result or not stage.output:
        raise ValueError(f"{getattr(func, '__name__', func)} finished without calling StageResult.finish")

    if stage.success:
        display.success(stage.result)
    else:
        display.error(stage.result, details="; ".join(stage.output.get("errors", [])))

    if stage.success and result_printer is not None:
        result_printer(stage.output)
    else:
        display.json_output(stage.output, format=display_format)

    sys.exit(0 if stage.success else 1)
