"""UTF-8 file helpers that keep line endings untouched."""

from pathlib import Path


def _read_text(path: Path) -> str:
    """Read a UTF-8 file without newline translation."""
    with path.open(encoding="utf-8", newline="") as fh:
        return fh.read()


def _write_text(path: Path, content: str) -> None:
    """Write a UTF-8 file without newline translation."""
    with path.open("w", encoding="utf-8", newline="") as fh:
        fh.write(content)
