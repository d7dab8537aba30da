"""API layer - engine operations and cmd_* wrappers."""
