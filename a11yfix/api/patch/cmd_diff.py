"""Diff command."""

from collections.abc import Iterator
from pathlib import Path
from typing import Any

from ..config.A11yConfig import A11yConfig
from ..StageResult import StageResult
from ._read_text import _read_text
from .generate_colored_diff import generate_colored_diff
from .generate_patch_diff import generate_patch_diff

DIFF_MODES = ("patch", "chars")


def cmd_diff(file_a: str, file_b: str, mode: str = "patch", color: bool | None = None) -> StageResult:
    """Render the differences between two files.

    Args:
        file_a: Original file
        file_b: Suggested file
        mode: "patch" for a unified patch, "chars" for an inline character diff
        color: Override the configured color setting
    """

    def build_output(errors: list[str], diff: str = "", identical: bool = False) -> dict[str, Any]:
        return {
            "status": "failure" if errors else "success",
            "file_a": file_a,
            "file_b": file_b,
            "mode": mode,
            "identical": identical,
            "diff": diff,
            "errors": errors,
        }

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        yield (0.1, "Validating inputs")
        errors: list[str] = []
        if mode not in DIFF_MODES:
            errors.append(f"mode must be one of {','.join(DIFF_MODES)} (found: {mode!r})")

        config = None
        try:
            config = A11yConfig.load()
        except ValueError as exc:
            errors.append(str(exc))

        if errors or config is None:
            yield (1.0, "Failed")
            result_obj.finish("Diff failed due to invalid inputs.", build_output(errors), False)
            return

        yield (0.3, "Reading files")
        try:
            before = _read_text(Path(file_a))
            after = _read_text(Path(file_b))
        except (OSError, UnicodeDecodeError) as exc:
            yield (1.0, "Failed")
            result_obj.finish(f"Diff failed: {exc}", build_output([str(exc)]), False)
            return

        yield (0.6, "Computing diff")
        use_color = config.patch.color if color is None else color
        if mode == "chars":
            diff = generate_colored_diff(before, after, color=use_color, color_system=config.patch.color_system)
        else:
            diff = generate_patch_diff(
                file_a,
                before,
                after,
                colorize=use_color,
                context_lines=config.patch.context_lines,
                color_system=config.patch.color_system,
            )

        yield (1.0, "Complete")
        identical = before == after
        result_obj.finish(
            "Files are identical." if identical else "Diff completed.",
            build_output([], diff=diff, identical=identical),
            True,
        )

    return StageResult(
        announce=f"Diffing {file_a} vs {file_b}...",
        progress_callback=do_work,
    )
