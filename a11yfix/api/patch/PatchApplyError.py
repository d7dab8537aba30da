"""Patch apply error."""

from .PatchError import PatchError


class PatchApplyError(PatchError):
    """Raised when a valid patch cannot be matched against the target text.

    Attributes:
        applied: Number of patches applied before the failure
        partial_content: Content as it stood when the failure happened, or
            None when not applicable
    """

    def __init__(self, message: str, applied: int = 0, partial_content: str | None = None):
        self.applied = applied
        self.partial_content = partial_content
        super().__init__(message)
