"""Colored character-level diff for terminal and report display."""

from ._render_styled import DELETION_STYLE, INSERTION_STYLE, _render_styled
from .diff_chars import diff_chars


def generate_colored_diff(before: str, after: str, color: bool = True, color_system: str = "standard") -> str:
    """Render the character differences between two texts as one string.

    Added spans use the insertion style, removed spans the deletion style and
    unchanged spans pass through verbatim. The result is stripped of
    surrounding whitespace.

    Args:
        before: Original text
        after: Suggested text
        color: Emit ANSI styling (False renders the plain concatenation)
        color_system: "standard", "256" or "truecolor"

    Returns:
        Rendered diff
    """
    segments = []
    for op in diff_chars(before, after):
        if op.added:
            segments.append((op.value, INSERTION_STYLE))
        elif op.removed:
            segments.append((op.value, DELETION_STYLE))
        else:
            segments.append((op.value, None))
    return _render_styled(segments, color=color, color_system=color_system).strip()
