"""Unit tests for a11yfix.api.config.cmd_set."""

import json

import pytest

from a11yfix.api.config.A11yConfig import A11yConfig
from a11yfix.api.config.cmd_set import cmd_set
from tests.unit.conftest import run_cmd

pytestmark = pytest.mark.unit


class TestCmdSet:
    def test_set_int(self, isolated_home):
        result = run_cmd(cmd_set, "patch.fuzz_factor", "5")
        assert result.success
        assert result.output["value"] == 5
        assert A11yConfig.load().patch.fuzz_factor == 5
        saved = json.loads((isolated_home / "config.json").read_text())
        assert saved["patch"]["fuzz_factor"] == 5

    def test_set_bool(self):
        result = run_cmd(cmd_set, "patch.atomic", "true")
        assert result.success
        assert A11yConfig.load().patch.atomic is True

    def test_numeric_string_value(self):
        result = run_cmd(cmd_set, "patch.color_system", "256")
        assert result.success
        assert result.output["value"] == "256"
        assert A11yConfig.load().patch.color_system == "256"

    def test_invalid_value_leaves_config_unchanged(self, write_config):
        write_config({"patch": {"fuzz_factor": 7}})
        result = run_cmd(cmd_set, "patch.fuzz_factor", "-1")
        assert not result.success
        assert "patch.fuzz_factor" in result.output["errors"][0]
        assert A11yConfig.load().patch.fuzz_factor == 7

    def test_unknown_field(self, isolated_home):
        result = run_cmd(cmd_set, "patch.bogus", "1")
        assert not result.success
        assert result.output["errors"]
        assert not (isolated_home / "config.json").exists()

    @pytest.mark.parametrize("key", ["patch", "patch.", ".fuzz_factor"])
    def test_invalid_key(self, key):
        result = run_cmd(cmd_set, key, "1")
        assert not result.success
        assert "section.field" in result.output["errors"][0]

    def test_delete_resets_default(self, write_config):
        write_config({"patch": {"fuzz_factor": 7}})
        result = run_cmd(cmd_set, "patch.fuzz_factor", delete=True)
        assert result.success
        assert result.output["value"] == 1000
        assert A11yConfig.load().patch.fuzz_factor == 1000

    def test_delete_unknown_key(self):
        result = run_cmd(cmd_set, "patch.bogus", delete=True)
        assert not result.success
        assert result.output["errors"] == ["Key not found: patch.bogus"]

    def test_invalid_config_file(self, isolated_home):
        isolated_home.mkdir(parents=True)
        (isolated_home / "config.json").write_text("{invalid json")
        result = run_cmd(cmd_set, "patch.fuzz_factor", "5")
        assert not result.success
        assert "Invalid JSON" in result.output["errors"][0]
