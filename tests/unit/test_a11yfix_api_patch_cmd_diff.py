"""Unit tests for a11yfix.api.patch.cmd_diff."""

import pytest

from a11yfix.api.patch.cmd_diff import cmd_diff
from tests.unit.conftest import run_cmd

pytestmark = pytest.mark.unit


@pytest.fixture
def files(tmp_path):
    file_a = tmp_path / "a.html"
    file_b = tmp_path / "b.html"
    file_a.write_text("<html>\n<img src=x>\n</html>\n")
    file_b.write_text("<html>\n<img src=x alt=Logo>\n</html>\n")
    return file_a, file_b


class TestCmdDiff:
    def test_patch_mode(self, files):
        file_a, file_b = files
        result = run_cmd(cmd_diff, str(file_a), str(file_b), "patch", False)
        assert result.success
        assert result.output["status"] == "success"
        assert result.output["identical"] is False
        assert result.output["diff"].startswith(f"--- {file_a}\n+++ {file_a}\n@@ -1,3 +1,3 @@")
        assert "+<img src=x alt=Logo>" in result.output["diff"]

    def test_chars_mode(self, files):
        file_a, file_b = files
        result = run_cmd(cmd_diff, str(file_a), str(file_b), "chars", True)
        assert result.success
        assert "\x1b[32m alt=Logo\x1b[0m" in result.output["diff"]

    def test_color_follows_config(self, files, write_config):
        write_config({"patch": {"color": False}})
        file_a, file_b = files
        result = run_cmd(cmd_diff, str(file_a), str(file_b))
        assert result.success
        assert "\x1b[" not in result.output["diff"]

    def test_identical_files(self, tmp_path):
        file_a = tmp_path / "a.html"
        file_a.write_text("same\n")
        result = run_cmd(cmd_diff, str(file_a), str(file_a), "patch", False)
        assert result.success
        assert result.output["identical"] is True
        assert result.result == "Files are identical."

    def test_invalid_mode(self, files):
        file_a, file_b = files
        result = run_cmd(cmd_diff, str(file_a), str(file_b), "words")
        assert not result.success
        assert "mode must be one of" in result.output["errors"][0]

    def test_missing_file(self, tmp_path):
        result = run_cmd(cmd_diff, str(tmp_path / "nope.html"), str(tmp_path / "nope2.html"))
        assert not result.success
        assert result.output["status"] == "failure"
        assert result.output["errors"]

    def test_invalid_config(self, files, write_config):
        write_config({"patch": {"context_lines": -1}})
        file_a, file_b = files
        result = run_cmd(cmd_diff, str(file_a), str(file_b))
        assert not result.success
        assert "patch.context_lines" in result.output["errors"][0]
