"""Installed a11yfix version."""

import functools
import importlib.metadata


@functools.cache
def get_package_version() -> str:
    """Return the installed distribution version, or "unknown" from a source checkout."""
    try:
        return importlib.metadata.version("a11yfix")
    except importlib.metadata.PackageNotFoundError:
        return "unknown"
