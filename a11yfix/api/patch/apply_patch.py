"""Fuzzy application of one unified patch."""

from ...utils.logger import get_logger
from ._DEFAULTS import DEFAULT_FUZZ_FACTOR
from ._place_hunk import _place_hunk
from ._split_lines import _split_lines
from .Hunk import Hunk
from .PatchApplyError import PatchApplyError
from .UnifiedPatch import UnifiedPatch

logger = get_logger("patch")


def apply_patch(source: str, patch: UnifiedPatch, fuzz_factor: int = DEFAULT_FUZZ_FACTOR) -> str:
    """Apply a unified patch to ``source``, tolerating drift between texts.

    Every hunk is placed against the untouched source first; the source is only
    rewritten once all hunks are placed, so a patch applies fully or not at all.
    A hunk may sit at any offset from the line its header names (nearest wins)
    and up to ``fuzz_factor`` of its context lines may differ from the target.
    Removed lines must match exactly.

    Lines are compared without their ``\\n`` or ``\\r\\n`` ending. Kept lines
    keep their own ending; added lines take the ending of the target line they
    replace or follow.

    Args:
        source: Text to patch
        patch: Patch to apply
        fuzz_factor: Mismatching context lines tolerated per hunk

    Returns:
        Patched text

    Raises:
        ValueError: If fuzz_factor is negative
        PatchApplyError: If a hunk cannot be placed
    """
    if fuzz_factor < 0:
        raise ValueError(f"fuzz_factor must be non-negative (found: {fuzz_factor})")

    lines = _split_lines(source)
    targets = [_strip_ending(line) for line in lines]
    default_ending = next((_ending(line) for line in lines if _ending(line)), "\n")

    placements: list[tuple[int, list[tuple[str, str, bool]]]] = []
    min_pos = 0
    drift = 0
    for number, hunk in enumerate(patch.hunks, start=1):
        items = _hunk_items(hunk)
        old_side = [(operation, _strip_cr(text)) for operation, text, _ in items if operation != "+"]
        base = hunk.old_start - 1 if old_side else hunk.old_start

        placed = _place_hunk(targets, old_side, base + drift, min_pos, fuzz_factor)
        if placed is None:
            raise PatchApplyError(f"Hunk #{number} ({hunk.header}) does not match the target text")

        pos, errors = placed
        logger.debug("Placed hunk #%d at line %d (offset %d, fuzz %d)", number, pos + 1, pos - base, errors)
        placements.append((pos, items))
        drift = pos - base
        min_pos = pos + len(old_side)

    result: list[str] = []
    cursor = 0
    for pos, items in placements:
        result.extend(lines[cursor:pos])
        cursor = pos
        # Ending of the last target line this hunk consumed, else of its neighbours
        ending = _neighbour_ending(lines, pos) or default_ending
        for operation, text, newline in items:
            if operation == " ":
                # Fuzzed context keeps the target's own text
                result.append(lines[cursor])
                ending = _ending(lines[cursor]) or ending
                cursor += 1
            elif operation == "-":
                ending = _ending(lines[cursor]) or ending
                cursor += 1
            elif not newline:
                result.append(text)
            elif text.endswith("\r"):
                result.append(text + "\n")
            else:
                result.append(text + ending)
    result.extend(lines[cursor:])

    for i in range(len(result) - 1):
        if not _ending(result[i]):
            result[i] += default_ending
    return "".join(result)


def _hunk_items(hunk: Hunk) -> list[tuple[str, str, bool]]:
    """Turn hunk lines into (operation, text, has_newline) triples."""
    items: list[tuple[str, str, bool]] = []
    for line in hunk.lines:
        if line.startswith("\\"):
            if items:
                operation, text, _ = items[-1]
                items[-1] = (operation, text, False)
            continue
        items.append((line[:1], line[1:], True))
    return items


def _ending(line: str) -> str:
    if line.endswith("\r\n"):
        return "\r\n"
    if line.endswith("\n"):
        return "\n"
    return ""


def _strip_ending(line: str) -> str:
    return line[: len(line) - len(_ending(line))]


def _strip_cr(text: str) -> str:
    return text[:-1] if text.endswith("\r") else text


def _neighbour_ending(lines: list[str], pos: int) -> str:
    """Ending of the line at pos, or of the line before it."""
    if pos < len(lines) and _ending(lines[pos]):
        return _ending(lines[pos])
    if pos > 0:
        return _ending(lines[pos - 1])
    return ""
