"""Unit tests for a11yfix.api.config.cmd_show."""

import pytest

from a11yfix.api.config.cmd_show import cmd_show
from tests.unit.conftest import run_cmd

pytestmark = pytest.mark.unit


class TestCmdShow:
    def test_all_sections(self):
        result = run_cmd(cmd_show, "")
        assert result.success
        assert set(result.output["content"]) == {"patch", "log"}
        assert result.output["config_path"].endswith("config.json")

    def test_single_section(self, write_config):
        write_config({"patch": {"fuzz_factor": 7}})
        result = run_cmd(cmd_show, "patch")
        assert result.success
        assert result.output["section"] == "patch"
        assert result.output["content"]["fuzz_factor"] == 7

    def test_unknown_section(self):
        result = run_cmd(cmd_show, "monitor")
        assert not result.success
        assert "Unknown section: monitor" in result.output["errors"][0]

    def test_invalid_config(self, isolated_home):
        isolated_home.mkdir(parents=True)
        (isolated_home / "config.json").write_text("{invalid json")
        result = run_cmd(cmd_show, "patch")
        assert result.success is False
        assert result.output["errors"]
