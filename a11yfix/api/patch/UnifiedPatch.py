"""Unified patch dataclass."""

from dataclasses import dataclass, field

from .Hunk import Hunk


@dataclass(frozen=True)
class UnifiedPatch:
    """File-scoped edit script between two text versions."""

    old_file_name: str | None = None
    new_file_name: str | None = None
    hunks: tuple[Hunk, ...] = field(default_factory=tuple)
    index: str | None = None
    old_header: str | None = None
    new_header: str | None = None
