"""Build a structured unified patch between two texts."""

from difflib import SequenceMatcher

from ._DEFAULTS import DEFAULT_CONTEXT_LINES, NO_NEWLINE_MARKER
from ._split_lines import _split_lines
from .Hunk import Hunk
from .UnifiedPatch import UnifiedPatch


def structured_patch(
    old_file_name: str,
    new_file_name: str,
    before: str,
    after: str,
    context_lines: int = DEFAULT_CONTEXT_LINES,
    old_header: str | None = None,
    new_header: str | None = None,
) -> UnifiedPatch:
    """Compute a unified patch from ``before`` to ``after``.

    Lines are compared including their newline, so a last line without one
    differs from the same line with one. Such a line is followed by the
    ``\\ No newline at end of file`` marker in the hunk.

    Args:
        old_file_name: Label of the old version
        new_file_name: Label of the new version
        before: Old text
        after: New text
        context_lines: Unchanged lines kept around each change
        old_header: Optional header written after the old file name
        new_header: Optional header written after the new file name

    Returns:
        UnifiedPatch (without hunks when the texts are identical)

    Raises:
        ValueError: If context_lines is negative
    """
    if context_lines < 0:
        raise ValueError(f"context_lines must be non-negative (found: {context_lines})")

    old = _split_lines(before)
    new = _split_lines(after)
    matcher = SequenceMatcher(None, old, new, autojunk=False)

    hunks: list[Hunk] = []
    for group in matcher.get_grouped_opcodes(context_lines):
        if all(tag == "equal" for tag, *_ in group):
            continue

        lines: list[str] = []
        for tag, i1, i2, j1, j2 in group:
            if tag == "equal":
                _extend(lines, " ", old[i1:i2])
                continue
            if tag in ("replace", "delete"):
                _extend(lines, "-", old[i1:i2])
            if tag in ("replace", "insert"):
                _extend(lines, "+", new[j1:j2])

        old_begin, old_end = group[0][1], group[-1][2]
        new_begin, new_end = group[0][3], group[-1][4]
        old_lines = old_end - old_begin
        new_lines = new_end - new_begin
        # An empty range starts at the line before it (0 at the top)
        hunks.append(
            Hunk(
                old_start=old_begin + 1 if old_lines else old_begin,
                old_lines=old_lines,
                new_start=new_begin + 1 if new_lines else new_begin,
                new_lines=new_lines,
                lines=tuple(lines),
            )
        )

    return UnifiedPatch(
        old_file_name=old_file_name,
        new_file_name=new_file_name,
        hunks=tuple(hunks),
        index=old_file_name if old_file_name == new_file_name else None,
        old_header=old_header,
        new_header=new_header,
    )


def _extend(lines: list[str], prefix: str, source: list[str]) -> None:
    for line in source:
        if line.endswith("\n"):
            lines.append(prefix + line[:-1])
        else:
            lines.append(prefix + line)
            lines.append(NO_NEWLINE_MARKER)
