"""Character-level diff."""

from difflib import SequenceMatcher

from .DiffOp import DiffOp


def diff_chars(before: str, after: str) -> list[DiffOp]:
    """Compute character-level differences between two texts.

    Args:
        before: Old text
        after: New text

    Returns:
        Ordered spans; unchanged and removed spans concatenate to ``before``,
        unchanged and added spans concatenate to ``after``. A replaced span
        yields its removed op before its added op.
    """
    matcher = SequenceMatcher(None, before, after, autojunk=False)
    ops: list[DiffOp] = []
    for tag, i1, i2, j1, j2 in matcher.get_opcodes():
        if tag == "equal":
            _push(ops, DiffOp(before[i1:i2]))
            continue
        if tag in ("replace", "delete"):
            _push(ops, DiffOp(before[i1:i2], removed=True))
        if tag in ("replace", "insert"):
            _push(ops, DiffOp(after[j1:j2], added=True))
    return ops


def _push(ops: list[DiffOp], op: DiffOp) -> None:
    """Append op, merging it into the previous op of the same kind."""
    if not op.value:
        return
    if ops and ops[-1].tag == op.tag:
        ops[-1] = DiffOp(ops[-1].value + op.value, added=op.added, removed=op.removed)
        return
    ops.append(op)
