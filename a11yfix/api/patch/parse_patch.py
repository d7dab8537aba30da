"""Parse unified diff text into a PatchSet."""

import re

from .Hunk import Hunk
from .PatchParseError import PatchParseError
from .PatchSet import PatchSet
from .UnifiedPatch import UnifiedPatch

_INDEX_LINE = re.compile(r"^(?:Index:|diff(?: -r \w+)+)\s+(.+?)\s*$")
_FILE_LINE = re.compile(r"^(---|\+\+\+)\s+(.*?)\r?$")
_HEADER_START = re.compile(r"^(---|\+\+\+|@@)\s")
_PATCH_END = re.compile(r"^(Index:\s|diff\s|---\s|\+\+\+\s|={10,})")
_HUNK_HEADER = re.compile(r"^@@ -(\d+)(?:,(\d+))? \+(\d+)(?:,(\d+))? @@")


def parse_patch(text: str) -> PatchSet:
    """Parse one or more unified patches from arbitrary text.

    Parsing is lenient: lines outside headers and hunks (commentary, code
    fences) are skipped. Blocks with neither a file header nor a hunk are
    not patches and are dropped, so text without any patch yields an empty
    PatchSet.

    Args:
        text: Text that may contain unified patches

    Returns:
        PatchSet in the order the patches appear

    Raises:
        PatchParseError: If a hunk header is malformed
    """
    lines = re.split(r"\r\n|\n", text)
    patches: list[UnifiedPatch] = []
    i = 0
    while i < len(lines):
        patch, i = _parse_index(lines, i)
        if patch.old_file_name is not None or patch.new_file_name is not None or patch.hunks:
            patches.append(patch)
    return PatchSet(tuple(patches))


def _parse_index(lines: list[str], i: int) -> tuple[UnifiedPatch, int]:
    """Parse one file's metadata, file header and hunks starting at line i."""
    index: str | None = None
    while i < len(lines):
        if _HEADER_START.match(lines[i]):
            break
        match = _INDEX_LINE.match(lines[i])
        if match:
            index = match.group(1)
        i += 1

    files: dict[str, tuple[str, str | None]] = {}
    for _ in range(2):
        match = _FILE_LINE.match(lines[i]) if i < len(lines) else None
        if not match:
            break
        name, _, header = match.group(2).partition("\t")
        name = name.replace("\\\\", "\\")
        if len(name) > 1 and name.startswith('"') and name.endswith('"'):
            name = name[1:-1]
        files[match.group(1)] = (name, header.strip() or None)
        i += 1

    hunks: list[Hunk] = []
    while i < len(lines):
        line = lines[i]
        if _PATCH_END.match(line):
            break
        if line.startswith("@@"):
            hunk, i = _parse_hunk(lines, i)
            hunks.append(hunk)
        else:
            i += 1

    old_name, old_header = files.get("---", (None, None))
    new_name, new_header = files.get("+++", (None, None))
    patch = UnifiedPatch(
        old_file_name=old_name,
        new_file_name=new_name,
        hunks=tuple(hunks),
        index=index,
        old_header=old_header,
        new_header=new_header,
    )
    return patch, i


def _parse_hunk(lines: list[str], i: int) -> tuple[Hunk, int]:
    """Parse the hunk whose header is at line i."""
    header_number = i + 1
    match = _HUNK_HEADER.match(lines[i])
    if not match:
        raise PatchParseError(f"Unknown hunk header at line {header_number}: {lines[i]!r}")

    old_start = int(match.group(1))
    old_lines = 1 if match.group(2) is None else int(match.group(2))
    new_start = int(match.group(3))
    new_lines = 1 if match.group(4) is None else int(match.group(4))
    i += 1

    body: list[str] = []
    removed = added = 0
    while i < len(lines) and (removed < old_lines or added < new_lines or lines[i].startswith("\\")):
        line = lines[i]
        if not line:
            if i == len(lines) - 1:
                break
            # Blank context lines often lose their leading space
            line = " "
        operation = line[:1]
        # Any line that is not a hunk line ends an overstated hunk
        if operation not in ("+", "-", " ", "\\") or _starts_file_header(lines, i):
            break
        body.append(line)
        if operation == "+":
            added += 1
        elif operation == "-":
            removed += 1
        elif operation == " ":
            added += 1
            removed += 1
        i += 1

    hunk = Hunk(
        old_start=old_start,
        old_lines=removed,
        new_start=new_start,
        new_lines=added,
        lines=tuple(body),
    )
    return hunk, i


def _starts_file_header(lines: list[str], i: int) -> bool:
    return (
        lines[i].startswith("--- ")
        and i + 2 < len(lines)
        and lines[i + 1].startswith("+++ ")
        and lines[i + 2].startswith("@@")
    )
