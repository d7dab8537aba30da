"""Patch module - reconcile model suggestions with source content."""

from .apply_patch import apply_patch
from .apply_patch_diff import apply_patch_diff
from .create_patch import create_patch
from .diff_chars import diff_chars
from .DiffOp import DiffOp
from .format_patch import format_patch
from .generate_colored_diff import generate_colored_diff
from .generate_patch_diff import generate_patch_diff
from .Hunk import Hunk
from .parse_patch import parse_patch
from .patch_original_content import patch_original_content
from .PatchApplyError import PatchApplyError
from .PatchError import PatchError
from .PatchParseError import PatchParseError
from .PatchSet import PatchSet
from .structured_patch import structured_patch
from .UnifiedPatch import UnifiedPatch

__all__ = [
    "DiffOp",
    "Hunk",
    "PatchApplyError",
    "PatchError",
    "PatchParseError",
    "PatchSet",
    "UnifiedPatch",
    "apply_patch",
    "apply_patch_diff",
    "create_patch",
    "diff_chars",
    "format_patch",
    "generate_colored_diff",
    "generate_patch_diff",
    "parse_patch",
    "patch_original_content",
    "structured_patch",
]
