"""Set or reset one configuration value by dotted key."""

import json
from collections.abc import Iterator
from typing import Any

from pydantic import ValidationError

from ..StageResult import StageResult
from .A11yConfig import A11yConfig, _first_error


def _parse_value(raw: str) -> Any:
    """JSON value when ``raw`` parses as one, else the raw string."""
    try:
        return json.loads(raw)
    except ValueError:
        return raw


def _deep_set(sections: dict[str, Any], keys: list[str], value: Any) -> None:
    for key in keys[:-1]:
        if not isinstance(sections.get(key), dict):
            sections[key] = {}
        sections = sections[key]
    sections[keys[-1]] = value


def _deep_delete(sections: dict[str, Any], keys: list[str]) -> bool:
    for key in keys[:-1]:
        if not isinstance(sections.get(key), dict):
            return False
        sections = sections[key]
    return sections.pop(keys[-1], _MISSING) is not _MISSING


_MISSING = object()


def _validate(sections: dict[str, Any]) -> tuple[A11yConfig | None, ValidationError | None]:
    try:
        return A11yConfig.model_validate(sections), None
    except ValidationError as exc:
        return None, exc


def cmd_set(key: str, value: str = "", delete: bool = False) -> StageResult:
    """Set ``key`` (e.g. ``patch.fuzz_factor``) to ``value``, or reset it to its default.

    The value is read as JSON when possible (``5``, ``true``), otherwise as a
    plain string. The updated configuration is validated before it is saved,
    so an invalid value leaves the config file untouched.
    """
    config_path = str(A11yConfig.get_config_path())

    def build_output(errors: list[str], stored: Any = None) -> dict[str, Any]:
        return {"errors": errors, "key": key, "value": stored, "config_path": config_path}

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        yield (0.1, f"Reading {config_path}")
        try:
            sections = A11yConfig.load().to_dict()
        except ValueError as exc:
            yield (1.0, "Failed")
            result_obj.finish("Configuration could not be loaded", build_output([str(exc)]), False)
            return

        keys = key.split(".")
        if len(keys) < 2 or not all(keys):
            yield (1.0, "Failed")
            result_obj.finish(
                f"Invalid key: {key}", build_output([f"Key must look like section.field (found: {key!r})"]), False
            )
            return

        if delete:
            yield (0.4, f"Resetting {key}")
            if not _deep_delete(sections, keys):
                yield (1.0, "Failed")
                result_obj.finish(f"Key not found: {key}", build_output([f"Key not found: {key}"]), False)
                return
            parsed = None
        else:
            parsed = _parse_value(value)
            yield (0.4, f"Setting {key}")
            _deep_set(sections, keys, parsed)

        yield (0.6, "Validating configuration")
        updated, error = _validate(sections)
        if error is not None and not delete and not isinstance(parsed, str):
            # "256" is a valid color_system only as a string
            _deep_set(sections, keys, value)
            updated, _ = _validate(sections)
        if updated is None:
            yield (1.0, "Failed")
            result_obj.finish(
                f"Validation failed for {key}",
                build_output([f"Configuration validation error: {_first_error(error)}"], parsed),
                False,
            )
            return

        yield (0.8, "Saving configuration")
        try:
            updated.save()
        except RuntimeError as exc:
            yield (1.0, "Failed")
            result_obj.finish(f"Could not save {key}", build_output([str(exc)], parsed), False)
            return

        stored: Any = updated.to_dict()[keys[0]]
        for part in keys[1:]:
            stored = stored[part]
        yield (1.0, "Complete")
        action = "Reset" if delete else "Set"
        result_obj.finish(f"{action} {key} = {json.dumps(stored)}", build_output([], stored), True)

    announce = f"Resetting {key}..." if delete else f"Updating {key}..."
    return StageResult(announce=announce, progress_callback=do_work)
