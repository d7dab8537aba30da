"""Patch parse error."""

from .PatchError import PatchError


class PatchParseError(PatchError):
    """Raised when text holds no recognisable unified patch or a malformed hunk."""
