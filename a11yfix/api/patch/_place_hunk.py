"""Find where a hunk's old side sits in the target lines."""

from collections.abc import Iterator


def _place_hunk(
    targets: list[str],
    old_side: list[tuple[str, str]],
    anchor: int,
    min_pos: int,
    fuzz_factor: int,
) -> tuple[int, int] | None:
    """Locate the best position for a hunk.

    Args:
        targets: Target line texts (without newlines)
        old_side: (operation, text) pairs for the hunk's context and removed lines
        anchor: Position the hunk header points at, after drift
        min_pos: First position not taken by an earlier hunk
        fuzz_factor: Mismatching context lines tolerated

    Returns:
        (position, errors) with the fewest errors, nearest to the anchor on ties,
        or None when the hunk fits nowhere
    """
    max_pos = len(targets) - len(old_side)
    if max_pos < min_pos:
        return None
    anchor = min(max(anchor, min_pos), max_pos)

    best: tuple[int, int] | None = None
    for pos in _nearest_first(anchor, min_pos, max_pos):
        errors = _count_errors(targets, pos, old_side, fuzz_factor)
        if errors is None:
            continue
        if best is None or errors < best[1]:
            best = (pos, errors)
            if errors == 0:
                break
    return best


def _nearest_first(anchor: int, low: int, high: int) -> Iterator[int]:
    """Yield positions in [low, high] by distance from anchor, forward first."""
    yield anchor
    distance = 1
    while anchor + distance <= high or anchor - distance >= low:
        if anchor + distance <= high:
            yield anchor + distance
        if anchor - distance >= low:
            yield anchor - distance
        distance += 1


def _count_errors(targets: list[str], pos: int, old_side: list[tuple[str, str]], fuzz_factor: int) -> int | None:
    """Count mismatching context lines at pos, or None if the hunk cannot sit there.

    Removed lines must match exactly and at least one old-side line must match.
    """
    errors = 0
    matched = 0
    for offset, (operation, text) in enumerate(old_side):
        if targets[pos + offset] == text:
            matched += 1
            continue
        if operation == "-":
            return None
        errors += 1
        if errors > fuzz_factor:
            return None
    if old_side and not matched:
        return None
    return errors
