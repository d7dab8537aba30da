"""Rich-based terminal display for command stages and results."""

import json
import sys
from datetime import datetime
from typing import Any

import yaml
from rich.console import Console
from rich.syntax import Syntax

_MARKS = {
    "status": "[blue]i[/blue]",
    "success": "[green]✓[/green]",
    "error": "[red]✗[/red]",
}


class CLIDisplay:
    """Stage messages go to stderr; command output and diffs go to stdout."""

    def __init__(self):
        self.console = Console(file=sys.stdout)
        self.stderr_console = Console(file=sys.stderr)

    def _stamped(self, kind: str, message: str) -> None:
        clock = datetime.now().strftime("%H:%M:%S")
        self.stderr_console.print(f"[dim]{clock}[/dim] {_MARKS[kind]} {message}")

    def status(self, message: str, **kwargs) -> None:  # noqa: ARG002
        self._stamped("status", message)

    def success(self, message: str, **kwargs) -> None:  # noqa: ARG002
        self._stamped("success", message)

    def error(self, message: str, **kwargs) -> None:
        self._stamped("error", message)
        if kwargs.get("details"):
            self.stderr_console.print(f"  [dim]{kwargs['details']}[/dim]")

    def info(self, message: str, **kwargs) -> None:  # noqa: ARG002
        self.stderr_console.print(message)

    def text_output(self, text: str) -> None:
        """Print pre-rendered text (may hold ANSI codes) to stdout verbatim."""
        print(text, flush=True)

    def json_output(self, data: Any, **kwargs) -> None:
        """Print ``data`` as YAML (default) or JSON, highlighted only on a terminal."""
        if kwargs.get("format", "yaml") == "json":
            text, lexer = json.dumps(data, indent=kwargs.get("indent", 2), ensure_ascii=False), "json"
        else:
            text, lexer = yaml.dump(data, default_flow_style=False, sort_keys=False, allow_unicode=True), "yaml"

        if sys.stdout.isatty():
            self.console.print(Syntax(text, lexer, theme="monokai", line_numbers=False))
            return
        print(text.rstrip("\n"), flush=True)
