"""Unit test fixtures.

Most helpers are in tests/conftest.py.
"""

import json

import pytest

from tests.conftest import lines_text, run_cmd

__all__ = ["lines_text", "run_cmd", "write_config"]


@pytest.fixture
def write_config(isolated_home):
    """Write a config.json into the isolated home directory."""

    def _write(data: dict) -> None:
        isolated_home.mkdir(parents=True, exist_ok=True)
        (isolated_home / "config.json").write_text(json.dumps(data))

    return _write
