"""Parsed patch collection."""

from collections.abc import Iterator
from dataclasses import dataclass, field

from .UnifiedPatch import UnifiedPatch


@dataclass(frozen=True)
class PatchSet:
    """Ordered unified patches parsed from one text blob (may be empty)."""

    patches: tuple[UnifiedPatch, ...] = field(default_factory=tuple)

    def __iter__(self) -> Iterator[UnifiedPatch]:
        return iter(self.patches)

    def __len__(self) -> int:
        return len(self.patches)
