"""Render a UnifiedPatch as unified diff text."""

from ._DEFAULTS import INDEX_SEPARATOR
from .UnifiedPatch import UnifiedPatch


def format_patch(patch: UnifiedPatch) -> str:
    """Render a patch as newline-terminated unified diff text.

    The text starts with an ``Index:`` line and a separator when the patch
    has an index, followed by the ``---``/``+++`` file lines and the hunks.
    """
    lines: list[str] = []
    if patch.index is not None:
        lines.append(f"Index: {patch.index}")
        lines.append(INDEX_SEPARATOR)
    lines.append(_file_line("---", patch.old_file_name, patch.old_header))
    lines.append(_file_line("+++", patch.new_file_name, patch.new_header))
    for hunk in patch.hunks:
        lines.append(hunk.header)
        lines.extend(hunk.lines)
    return "\n".join(lines) + "\n"


def _file_line(marker: str, file_name: str | None, header: str | None) -> str:
    line = f"{marker} {file_name or ''}"
    if header:
        line += f"\t{header}"
    return line
