"""Unified diff hunk dataclass."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Hunk:
    """A single hunk of a unified patch.

    ``lines`` keep their one-character prefix: ``' '`` context, ``'-'`` removed,
    ``'+'`` added, ``'\\'`` no-newline marker for the preceding line.
    """

    old_start: int
    old_lines: int
    new_start: int
    new_lines: int
    lines: tuple[str, ...]

    @property
    def header(self) -> str:
        """Hunk range header (``@@ -a,b +c,d @@``)."""
        return f"@@ -{self.old_start},{self.old_lines} +{self.new_start},{self.new_lines} @@"
