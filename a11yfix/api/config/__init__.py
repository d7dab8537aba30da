"""Config API module."""

from .A11yConfig import A11yConfig
from .LogConfig import LogConfig
from .PatchConfig import PatchConfig

__all__ = ["A11yConfig", "LogConfig", "PatchConfig"]
