"""Show configuration command."""

from collections.abc import Iterator
from typing import Any

from ..StageResult import StageResult
from .A11yConfig import A11yConfig


def cmd_show(section: str = "") -> StageResult:
    """Show one configuration section, or every section when ``section`` is empty.

    Missing config files show the defaults.
    """
    config_path = str(A11yConfig.get_config_path())

    def build_output(errors: list[str], content: dict[str, Any] | None = None) -> dict[str, Any]:
        return {
            "errors": errors,
            "section": section,
            "content": content or {},
            "config_path": config_path,
        }

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        yield (0.3, f"Reading {config_path}")
        try:
            sections = A11yConfig.load().to_dict()
        except ValueError as exc:
            yield (1.0, "Failed")
            result_obj.finish("Configuration could not be loaded", build_output([str(exc)]), False)
            return

        if not section:
            yield (1.0, "Complete")
            result_obj.finish("Retrieved configuration", build_output([], sections), True)
            return

        yield (1.0, "Complete")
        if section not in sections:
            expected = ", ".join(sections)
            result_obj.finish(
                f"Section '{section}' not found",
                build_output([f"Unknown section: {section} (expected one of: {expected})"]),
                False,
            )
            return
        result_obj.finish(f"Retrieved configuration for '{section}'", build_output([], sections[section]), True)

    announce = f"Showing configuration for section '{section}'..." if section else "Showing configuration..."
    return StageResult(announce=announce, progress_callback=do_work)
