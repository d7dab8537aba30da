"""Patch engine configuration."""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

from ..patch._DEFAULTS import DEFAULT_CONTEXT_LINES, DEFAULT_FUZZ_FACTOR


class PatchConfig(BaseModel):
    """Tolerances and rendering options for the patch engine."""

    model_config = ConfigDict(extra="forbid")

    fuzz_factor: int = Field(DEFAULT_FUZZ_FACTOR, ge=0, description="Mismatching context lines tolerated per hunk")
    context_lines: int = Field(DEFAULT_CONTEXT_LINES, ge=0, description="Unchanged lines kept around each change")
    atomic: bool = Field(False, description="Discard earlier patches of a suggestion when a later one fails")
    color: bool = Field(True, description="Colorize rendered diffs")
    color_system: Literal["standard", "256", "truecolor"] = Field("standard", description="ANSI color system")
