"""Retarget command."""

from collections.abc import Iterator
from pathlib import Path
from typing import Any

from ..config.A11yConfig import A11yConfig
from ..StageResult import StageResult
from ._read_text import _read_text, _write_text
from .patch_original_content import patch_original_content
from .PatchError import PatchError


def cmd_retarget(original: str, processed_file: str, suggestion_file: str, write: bool = False) -> StageResult:
    """Carry the edit between an excerpt and its suggestion over to the original file.

    Args:
        original: Full original file
        processed_file: File holding the excerpt sent to the model
        suggestion_file: File holding the model's replacement for the excerpt
        write: Write the result back to the original when it changed
    """

    def build_output(errors: list[str], content: str = "", changed: bool = False, written: bool = False) -> dict[str, Any]:
        return {
            "status": "failure" if errors else "success",
            "original": original,
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
            result_obj.finish("Retarget failed due to invalid configuration.", build_output([str(exc)]), False)
            return

        yield (0.3, "Reading files")
        original_path = Path(original)
        try:
            content = _read_text(original_path)
            processed = _read_text(Path(processed_file))
            suggestion = _read_text(Path(suggestion_file))
        except (OSError, UnicodeDecodeError) as exc:
            yield (1.0, "Failed")
            result_obj.finish(f"Retarget failed: {exc}", build_output([str(exc)]), False)
            return

        yield (0.5, "Patching original content")
        try:
            patched = patch_original_content(
                original,
                content,
                processed,
                suggestion,
                fuzz_factor=config.patch.fuzz_factor,
                context_lines=config.patch.context_lines,
            )
        except PatchError as exc:
            errors = [str(exc)]
            if exc.__cause__ is not None:
                errors.append(str(exc.__cause__))
            yield (1.0, "Failed")
            result_obj.finish(f"Retarget failed: {exc}", build_output(errors), False)
            return

        changed = patched != content
        written = False
        if write and changed:
            yield (0.8, f"Writing {original}")
            try:
                _write_text(original_path, patched)
            except OSError as exc:
                yield (1.0, "Failed")
                result_obj.finish(f"Retarget failed: {exc}", build_output([str(exc)], patched, changed), False)
                return
            written = True

        yield (1.0, "Complete")
        result_obj.finish(
            "Original content patched." if changed else "Suggestion made no changes.",
            build_output([], patched, changed, written),
            True,
        )

    return StageResult(
        announce=f"Retargeting {suggestion_file} onto {original}...",
        progress_callback=do_work,
    )
