"""Unified patch text for display or model consumption."""

import re

from ._DEFAULTS import DEFAULT_CONTEXT_LINES
from ._render_styled import DELETION_STYLE, HUNK_HEADER_STYLE, INSERTION_STYLE, MARKER_STYLE, _render_styled
from .create_patch import create_patch

_SEPARATOR = re.compile(r"={10,}")


def generate_patch_diff(
    file: str,
    before: str,
    after: str,
    colorize: bool = True,
    context_lines: int = DEFAULT_CONTEXT_LINES,
    color_system: str = "standard",
) -> str:
    """Create a unified patch between two versions of ``file``.

    The ``Index:`` block is dropped, so the text starts at the ``---`` file
    line and can be fed back to ``apply_patch_diff``.

    Args:
        file: File label written in the patch
        before: Original text
        after: Suggested text
        colorize: Style each line by its first character
        context_lines: Unchanged lines kept around each change
        color_system: "standard", "256" or "truecolor"

    Returns:
        Patch text stripped of surrounding whitespace
    """
    parts = _SEPARATOR.split(create_patch(file, before, after, context_lines), maxsplit=1)
    diff = parts[1].strip() if len(parts) > 1 else ""

    if colorize:
        lines = diff.split("\n")
        segments = []
        for number, line in enumerate(lines):
            segments.append((line, _line_style(line)))
            if number < len(lines) - 1:
                segments.append(("\n", None))
        diff = _render_styled(segments, color_system=color_system).strip()

    return diff


def _line_style(line: str) -> str | None:
    """Style for a patch line, keyed on its first character."""
    first = line[:1]
    if first == "+":
        return None if line.startswith("+++") else INSERTION_STYLE
    if first == "-":
        return None if line.startswith("---") else DELETION_STYLE
    if first == "@":
        return HUNK_HEADER_STYLE
    if first == "\\":
        return MARKER_STYLE
    return None
