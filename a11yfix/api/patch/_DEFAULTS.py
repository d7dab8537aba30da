"""Patch engine constants."""

# Mismatching context lines tolerated per hunk
DEFAULT_FUZZ_FACTOR = 1000
DEFAULT_CONTEXT_LINES = 3

PATCH_FILE_MARKER = "---"
NO_NEWLINE_MARKER = "\\ No newline at end of file"
INDEX_SEPARATOR = "=" * 67
