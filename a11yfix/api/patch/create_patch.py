"""Create unified diff text for one file."""

from ._DEFAULTS import DEFAULT_CONTEXT_LINES
from .format_patch import format_patch
from .structured_patch import structured_patch


def create_patch(file_name: str, before: str, after: str, context_lines: int = DEFAULT_CONTEXT_LINES) -> str:
    """Create a unified patch (with ``Index:`` header) from ``before`` to ``after``."""
    return format_patch(structured_patch(file_name, file_name, before, after, context_lines))
