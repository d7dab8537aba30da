"""Apply a model suggestion that is either a replacement or a patch."""

from ...utils.logger import get_logger
from ._DEFAULTS import DEFAULT_FUZZ_FACTOR, PATCH_FILE_MARKER
from .apply_patch import apply_patch
from .parse_patch import parse_patch
from .PatchApplyError import PatchApplyError
from .PatchParseError import PatchParseError
from .PatchSet import PatchSet

logger = get_logger("patch")


def apply_patch_diff(
    content: str,
    suggestion: str,
    is_patch: bool = False,
    fuzz_factor: int = DEFAULT_FUZZ_FACTOR,
    atomic: bool = False,
) -> str:
    """Produce the content resulting from a model suggestion.

    A replacement suggestion is returned as is. A patch suggestion is repaired
    (anything before the first ``---`` is dropped, since models like to
    prefix patches with commentary or code fences), parsed, and its patches
    applied in sequence, each one patching the previous one's output.

    When a patch in the sequence fails, the remaining patches are skipped.
    With ``atomic=False`` the error's ``partial_content`` holds the content as
    patched so far; with ``atomic=True`` it holds the untouched ``content``.

    Args:
        content: Current content
        suggestion: Replacement text or unified patch text
        is_patch: Treat the suggestion as a patch
        fuzz_factor: Mismatching context lines tolerated per hunk
        atomic: Discard earlier patches of the sequence when one fails

    Returns:
        Resulting content

    Raises:
        PatchParseError: If no patch can be parsed from the suggestion
        PatchApplyError: If a parsed patch cannot be applied
    """
    if not is_patch:
        return suggestion

    if not suggestion.startswith(PATCH_FILE_MARKER):
        logger.debug("Received patch needs fixing")
        start = suggestion.find(PATCH_FILE_MARKER)
        suggestion = suggestion[start:] if start >= 0 else ""

    try:
        patches = parse_patch(suggestion)
    except PatchParseError as exc:
        logger.debug("Patch parsing failed: %s", exc)
        raise PatchParseError("Could not parse patch suggestion") from exc

    logger.debug("Found %d patch(es) to apply", len(patches))
    if not patches:
        raise PatchParseError("Could not parse patch suggestion")

    return _apply_sequence(content, suggestion, patches, fuzz_factor, atomic)


def _apply_sequence(content: str, suggestion: str, patches: PatchSet, fuzz_factor: int, atomic: bool) -> str:
    patched = content
    for applied, patch in enumerate(patches):
        try:
            patched = apply_patch(patched, patch, fuzz_factor=fuzz_factor)
        except PatchApplyError as exc:
            logger.debug("Original code:------------------\n%s", content)
            logger.debug("Suggestion:---------------------\n%s", suggestion)
            raise PatchApplyError(
                "Could not apply patch suggestion: invalid format",
                applied=applied,
                partial_content=content if atomic else patched,
            ) from exc
        logger.debug("Applied patch")
    return patched
