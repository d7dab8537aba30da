"""Shared helpers (logging, home directory)."""
