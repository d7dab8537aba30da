"""Render styled text segments as an ANSI string."""

from collections.abc import Iterable

from rich.color import ColorSystem
from rich.style import Style

INSERTION_STYLE = "green"
DELETION_STYLE = "red"
HUNK_HEADER_STYLE = "cyan"
MARKER_STYLE = "dim"

_COLOR_SYSTEMS = {
    "standard": ColorSystem.STANDARD,
    "256": ColorSystem.EIGHT_BIT,
    "truecolor": ColorSystem.TRUECOLOR,
}


def _render_styled(
    segments: Iterable[tuple[str, str | None]],
    color: bool = True,
    color_system: str = "standard",
) -> str:
    """Concatenate (text, style) segments, wrapping styled ones in ANSI codes.

    Text is emitted verbatim (no wrapping, no tab expansion).

    Raises:
        ValueError: If color_system is unknown
    """
    if color_system not in _COLOR_SYSTEMS:
        raise ValueError(f"Unknown color system: {color_system!r} (expected: {', '.join(_COLOR_SYSTEMS)})")
    system = _COLOR_SYSTEMS[color_system]

    parts: list[str] = []
    for text, style in segments:
        if color and style and text:
            parts.append(Style.parse(style).render(text, color_system=system))
        else:
            parts.append(text)
    return "".join(parts)
