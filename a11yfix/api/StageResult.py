"""Command result carried through announce, progress, result and output stages."""

from collections.abc import Callable, Iterator
from dataclasses import dataclass, field
from typing import Any

ProgressCallback = Callable[["StageResult"], Iterator[tuple[float, str]]]


@dataclass
class StageResult:
    """What a ``cmd_*`` function hands to its caller.

    ``progress_callback`` is a generator yielding ``(fraction, message)``
    pairs; before it returns it must call :meth:`finish` so that ``result``,
    ``output`` and ``success`` describe the outcome.
    """

    announce: str
    progress_callback: ProgressCallback
    result: str = ""
    output: dict[str, Any] = field(default_factory=dict)
    success: bool = False

    def finish(self, result: str, output: dict[str, Any], success: bool) -> None:
        """Record the outcome of the command."""
        self.result = result
        self.output = output
        self.success = success
