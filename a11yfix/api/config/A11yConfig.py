"""Top-level a11yfix configuration."""

import json
import os
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from ...utils.get_home_dir import get_home_dir
from .LogConfig import LogConfig
from .PatchConfig import PatchConfig


class A11yConfig(BaseModel):
    """Configuration stored in ``<A11YFIX_HOME>/config.json``.

    Every section is optional; omitted sections and fields take their defaults.
    """

    model_config = ConfigDict(extra="forbid")

    patch: PatchConfig = Field(default_factory=PatchConfig)
    log: LogConfig = Field(default_factory=LogConfig)

    @classmethod
    def get_config_path(cls) -> Path:
        return get_home_dir("config.json")

    @classmethod
    def load(cls) -> "A11yConfig":
        """Read the config file, or return the defaults when there is none.

        Raises:
            ValueError: If the file is not a JSON object or a value is invalid
        """
        path = cls.get_config_path()
        if not path.is_file():
            return cls()

        try:
            raw = json.loads(path.read_text(encoding="utf-8"))
        except json.JSONDecodeError as e:
            raise ValueError(f"Invalid JSON in config file {path}: {e}") from e
        if not isinstance(raw, dict):
            raise ValueError(f"Configuration in {path} must be a JSON object (found: {type(raw).__name__})")

        try:
            return cls.model_validate(raw)
        except ValidationError as e:
            raise ValueError(f"Configuration validation error: {_first_error(e)}") from e

    def to_dict(self) -> dict[str, Any]:
        return {name: getattr(self, name).model_dump() for name in type(self).model_fields}

    def save(self) -> None:
        """Write the config file through a temporary file so readers never see half of it.

        Raises:
            RuntimeError: If the file cannot be written
        """
        path = self.get_config_path()
        tmp = path.with_name(path.name + ".tmp")
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            tmp.write_text(json.dumps(self.to_dict(), indent=4) + "\n", encoding="utf-8")
            os.replace(tmp, path)
        except OSError as e:
            tmp.unlink(missing_ok=True)
            raise RuntimeError(f"Failed to save config to {path}: {e}") from e


def _first_error(error: ValidationError) -> str:
    """Render the first validation problem as ``dotted.field: message``."""
    problems = error.errors()
    if not problems:
        return str(error)
    location = ".".join(str(part) for part in problems[0].get("loc", ()))
    message = problems[0].get("msg", str(error))
    return f"{location}: {message}" if location else message
