"""Apply suggestion command."""

from collections.abc import Iterator
from pathlib import Path
from typing import Any

from ..config.A11yConfig import A11yConfig
from ..StageResult import StageResult
from ._read_text import _read_text, _write_text
from .apply_patch_diff import apply_patch_diff
from .PatchApplyError import PatchApplyError
from .PatchError import PatchError


def cmd_apply(target: str, suggestion_file: str, is_patch: bool = False, write: bool = False) -> StageResult:
    """Apply a model suggestion (replacement or patch) to a target file.

    Args:
        target: File the suggestion applies to
        suggestion_file: File holding the suggestion text
        is_patch: The suggestion is a unified patch rather than a replacement
        write: Write the result back to the target when it changed
    """

    def build_output(errors: list[str], content: str = "", changed: bool = False, written: bool = False) -> dict[str, Any]:
        return {
            "status": "failure" if errors else "success",
            "target": target,
            "is_patch": is_patch,
            "changed": changed,
            "written": written,
            "content": content,
            "errors": errors,
        }

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        yield (0.1, "Loading configuration")
        try:
            config = A11yConfig.load()
        except ValueError as exc:
            yield (1.0, "Failed")
            result_obj.finish("Apply failed due to invalid configuration.", build_output([str(exc)]), False)
            return

        yield (0.3, "Reading files")
        target_path = Path(target)
        try:
            content = _read_text(target_path)
            suggestion = _read_text(Path(suggestion_file))
        except (OSError, UnicodeDecodeError) as exc:
            yield (1.0, "Failed")
            result_obj.finish(f"Apply failed: {exc}", build_output([str(exc)]), False)
            return

        yield (0.5, "Applying patch" if is_patch else "Applying replacement")
        try:
            patched = apply_patch_diff(
                content,
                suggestion,
                is_patch=is_patch,
                fuzz_factor=config.patch.fuzz_factor,
                atomic=config.patch.atomic,
            )
        except PatchError as exc:
            errors = [str(exc)]
            if exc.__cause__ is not None:
                errors.append(str(exc.__cause__))
            if isinstance(exc, PatchApplyError):
                errors.append(f"{exc.applied} patch(es) applied before the failure")
            yield (1.0, "Failed")
            result_obj.finish(f"Apply failed: {exc}", build_output(errors), False)
            return

        changed = patched != content
        written = False
        if write and changed:
            yield (0.8, f"Writing {target}")
            try:
                _write_text(target_path, patched)
            except OSError as exc:
                yield (1.0, "Failed")
                result_obj.finish(f"Apply failed: {exc}", build_output([str(exc)], patched, changed), False)
                return
            written = True

        yield (1.0, "Complete")
        result_obj.finish(
            "Suggestion applied." if changed else "Suggestion made no changes.",
            build_output([], patched, changed, written),
            True,
        )

    return StageResult(
        announce=f"Applying {suggestion_file} to {target}...",
        progress_callback=do_work,
    )
