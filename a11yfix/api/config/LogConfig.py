"""Log configuration."""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field


class LogConfig(BaseModel):
    """Log file configuration."""

    model_config = ConfigDict(extra="forbid")

    level: Literal["DEBUG", "INFO", "WARN", "ERROR"] = Field("INFO", description="Logging level")
    max_bytes: int = Field(5 * 1024 * 1024, gt=0, description="Log file size before rotation")
    backup_count: int = Field(3, ge=0, description="Rotated log files to keep")

    @property
    def logging_level(self) -> str:
        """Level name understood by the logging module."""
        return "WARNING" if self.level == "WARN" else self.level
