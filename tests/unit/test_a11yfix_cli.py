"""CLI tests for the a11yfix Typer app."""

import json

import pytest
import yaml
from typer.testing import CliRunner

from a11yfix.api.patch.generate_patch_diff import generate_patch_diff
from a11yfix.cli import main
from a11yfix.cli._create_app import _create_app

pytestmark = pytest.mark.unit

runner = CliRunner()

CONTENT = "<html>\n<img src=x>\n</html>\n"
FIXED = "<html>\n<img src=x alt=Logo>\n</html>\n"


@pytest.fixture
def page(tmp_path):
    path = tmp_path / "index.html"
    path.write_text(CONTENT)
    return path


def test_no_command_shows_help():
    result = runner.invoke(_create_app(), [])
    assert result.exit_code == 0
    assert "diff" in result.stdout
    assert "retarget" in result.stdout


def test_invalid_display_format():
    result = runner.invoke(_create_app(), ["--display", "xml", "config", "show"])
    assert result.exit_code == 1


def test_diff_prints_patch(page, tmp_path):
    fixed = tmp_path / "fixed.html"
    fixed.write_text(FIXED)
    result = runner.invoke(_create_app(), ["diff", "--no-color", str(page), str(fixed)])
    assert result.exit_code == 0
    assert "-<img src=x>" in result.stdout
    assert "+<img src=x alt=Logo>" in result.stdout
    assert "\x1b[" not in result.stdout


def test_diff_chars(page, tmp_path):
    fixed = tmp_path / "fixed.html"
    fixed.write_text(FIXED)
    result = runner.invoke(_create_app(), ["diff", "--chars", str(page), str(fixed)])
    assert result.exit_code == 0
    assert "\x1b[32m alt=Logo\x1b[0m" in result.stdout


def test_diff_missing_file(page, tmp_path):
    result = runner.invoke(_create_app(), ["diff", str(page), str(tmp_path / "missing.html")])
    assert result.exit_code == 1


def test_apply_patch_json(page, tmp_path):
    suggestion = tmp_path / "fix.patch"
    suggestion.write_text("```diff\n" + generate_patch_diff("index.html", CONTENT, FIXED, colorize=False) + "\n```\n")
    result = runner.invoke(_create_app(), ["--display", "json", "apply", "--patch", str(page), str(suggestion)])
    assert result.exit_code == 0
    output = json.loads(result.stdout)
    assert output["status"] == "success"
    assert output["content"] == FIXED


def test_apply_write(page, tmp_path):
    suggestion = tmp_path / "fixed.html"
    suggestion.write_text(FIXED)
    result = runner.invoke(_create_app(), ["apply", "--write", str(page), str(suggestion)])
    assert result.exit_code == 0
    assert page.read_text() == FIXED


def test_apply_bad_patch_fails(page, tmp_path):
    suggestion = tmp_path / "fix.patch"
    suggestion.write_text("No changes needed.")
    result = runner.invoke(_create_app(), ["apply", "-p", str(page), str(suggestion)])
    assert result.exit_code == 1
    output = yaml.safe_load(result.stdout)
    assert output["status"] == "failure"


def test_retarget(tmp_path):
    original = tmp_path / "page.html"
    processed = tmp_path / "excerpt.html"
    suggestion = tmp_path / "suggestion.html"
    original.write_text("A\nB\nC\nD\n")
    processed.write_text("B\nC\n")
    suggestion.write_text("B2\nC\n")
    result = runner.invoke(_create_app(), ["retarget", "-w", str(original), str(processed), str(suggestion)])
    assert result.exit_code == 0
    assert original.read_text() == "A\nB2\nC\nD\n"


def test_config_show_yaml():
    result = runner.invoke(_create_app(), ["config", "show", "patch"])
    assert result.exit_code == 0
    output = yaml.safe_load(result.stdout)
    assert output["content"]["fuzz_factor"] == 1000


def test_config_set_then_show():
    result = runner.invoke(_create_app(), ["--display", "json", "config", "set", "patch.fuzz_factor", "5"])
    assert result.exit_code == 0
    assert json.loads(result.stdout)["value"] == 5
    result = runner.invoke(_create_app(), ["config", "show", "patch"])
    assert yaml.safe_load(result.stdout)["content"]["fuzz_factor"] == 5


def test_config_set_invalid_value():
    result = runner.invoke(_create_app(), ["config", "set", "patch.fuzz_factor", "lots"])
    assert result.exit_code == 1


def test_config_set_requires_value():
    result = runner.invoke(_create_app(), ["config", "set", "patch.fuzz_factor"])
    assert result.exit_code == 1


def test_main_version(capsys):
    assert main(["--version"]) == 0
    assert capsys.readouterr().out.startswith("a11yfix ")


def test_main_exit_code(tmp_path):
    assert main(["diff", str(tmp_path / "a"), str(tmp_path / "b")]) == 1


def test_unfinished_command_is_rejected():
    from a11yfix.api.StageResult import StageResult
    from a11yfix.cli._run_single_execution import _run_single_execution
    from a11yfix.cli.display import CLIDisplay

    def cmd_unfinished():
        return StageResult(announce="Working", progress_callback=lambda _: iter([(1.0, "Complete")]))

    with pytest.raises(ValueError, match="StageResult.finish"):
        _run_single_execution(cmd_unfinished, (), {}, CLIDisplay(), "yaml")
