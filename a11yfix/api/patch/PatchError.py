"""Base patch error."""


class PatchError(Exception):
    """Raised when a patch suggestion cannot be turned into content."""
