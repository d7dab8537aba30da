"""Retarget an edit made on an excerpt onto the full original content."""

from ...utils.logger import get_logger
from ._DEFAULTS import DEFAULT_CONTEXT_LINES, DEFAULT_FUZZ_FACTOR
from .apply_patch import apply_patch
from .PatchApplyError import PatchApplyError
from .structured_patch import structured_patch

logger = get_logger("patch")


def patch_original_content(
    file: str,
    content: str,
    processed_content: str,
    suggestion: str,
    fuzz_factor: int = DEFAULT_FUZZ_FACTOR,
    context_lines: int = DEFAULT_CONTEXT_LINES,
) -> str:
    """Apply the edit from ``processed_content`` to ``suggestion`` onto ``content``.

    The model only sees a processed excerpt of a file. The patch between that
    excerpt and the model's suggestion is applied to the full original, so
    only the fragment that was sent needs to be correct.

    Args:
        file: File label
        content: Full original content
        processed_content: Excerpt that was sent to the model
        suggestion: Model's replacement for the excerpt
        fuzz_factor: Mismatching context lines tolerated per hunk
        context_lines: Unchanged lines kept around each change

    Returns:
        Patched original content

    Raises:
        PatchApplyError: If the edit cannot be located in the original content
    """
    patch = structured_patch(file, file, processed_content, suggestion, context_lines)
    try:
        return apply_patch(content, patch, fuzz_factor=fuzz_factor)
    except PatchApplyError as exc:
        logger.debug("Retargeting %s failed: %s", file, exc)
        raise PatchApplyError("Could not patch original content with suggestion") from exc
