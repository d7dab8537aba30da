"""Character diff operation dataclass."""

from dataclasses import dataclass


@dataclass(frozen=True)
class DiffOp:
    """One span of a character-level comparison.

    A span is either added (only in the new text), removed (only in the old
    text) or unchanged (in both). Never both added and removed.
    """

    value: str
    added: bool = False
    removed: bool = False

    def __post_init__(self):
        if self.added and self.removed:
            raise ValueError("DiffOp cannot be both added and removed")

    @property
    def tag(self) -> str:
        """Return 'added', 'removed' or 'unchanged'."""
        if self.added:
            return "added"
        if self.removed:
            return "removed"
        return "unchanged"
