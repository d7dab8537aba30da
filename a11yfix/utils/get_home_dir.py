"""Get a11yfix home directory path or path under it."""

import os
from pathlib import Path

A11YFIX_HOME_EXT = ".a11yfix"


def get_home_dir(*parts: str) -> Path:
    """Get a11yfix home directory path or path under it.

    Checks the A11YFIX_HOME environment variable first, defaults to
    ~/.a11yfix if not set.

    Args:
        *parts: Optional path components to join (e.g., "config.json")

    Returns:
        Absolute path to the home directory or a subpath under it

    Examples:
        >>> get_home_dir()
        Path("/Users/user/.a11yfix")
        >>> get_home_dir("config.json")
        Path("/Users/user/.a11yfix/config.json")
    """
    home_env = os.environ.get("A11YFIX_HOME")
    if home_env:
        home = Path(home_env).expanduser().resolve()
    else:
        # HOME first so tests can redirect it
        user_home = os.environ.get("HOME")
        home = Path(user_home) / A11YFIX_HOME_EXT if user_home else Path.home() / A11YFIX_HOME_EXT

    return home / Path(*parts) if parts else home
