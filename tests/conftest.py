"""Shared pytest configuration and fixtures for all tests."""

import pytest


def pytest_configure(config):
    config.addinivalue_line("markers", "unit: fast isolated tests")


def pytest_collection_modifyitems(config, items):
    """Automatically apply markers based on test file location."""
    for item in items:
        path_str = str(item.fspath)
        if "/unit/" in path_str:
            item.add_marker(pytest.mark.unit)


@pytest.fixture(autouse=True)
def isolated_home(tmp_path, monkeypatch):
    """Point A11YFIX_HOME at a per-test directory and drop NO_COLOR."""
    home = tmp_path / "a11yfix_home"
    monkeypatch.setenv("A11YFIX_HOME", str(home))
    monkeypatch.delenv("NO_COLOR", raising=False)
    return home


def run_cmd(cmd_func, *args, **kwargs):
    """Execute a cmd function and return the result with progress_callback executed."""
    result = cmd_func(*args, **kwargs)
    list(result.progress_callback(result))
    return result


def lines_text(*lines: str) -> str:
    """Join lines into newline-terminated text."""
    return "".join(f"{line}\n" for line in lines)
