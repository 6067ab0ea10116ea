"""Integration tests for the testidentity CLI."""

import json

from click.testing import CliRunner

from testidentity.cli import cli
from testidentity.utils.exit_codes import ExitCodes


def test_help_lists_commands():
    runner = CliRunner()
    result = runner.invoke(cli, ["--help"])
    assert result.exit_code == 0
    for command in ("list", "show", "detect"):
        assert command in result.output


def test_list_json():
    runner = CliRunner()
    result = runner.invoke(cli, ["list", "--json"])
    assert result.exit_code == 0
    data = json.loads(result.output)
    assert [d["code_framework_name"] for d in data] == ["NUnit", "XUnit", "MSTest"]


def test_list_table():
    runner = CliRunner()
    result = runner.invoke(cli, ["list"])
    assert result.exit_code == 0
    assert result.output.strip()


def test_show_json_case_insensitive():
    runner = CliRunner()
    result = runner.invoke(cli, ["show", "XUNIT", "--json"])
    assert result.exit_code == 0
    data = json.loads(result.output)
    assert data["framework_name"] == "xUnit"
    assert data["attribute_namespace"] == "Xunit"
    assert data["test_class_attribute_name"] is None


def test_show_table():
    runner = CliRunner()
    result = runner.invoke(cli, ["show", "mstest"])
    assert result.exit_code == 0


def test_show_unknown_framework():
    runner = CliRunner()
    result = runner.invoke(cli, ["show", "junit"])
    assert result.exit_code == ExitCodes.UNKNOWN_FRAMEWORK
    assert "junit" in result.output


def test_detect_from_pyproject(write_pyproject):
    root = write_pyproject('[tool.testidentity]\nframework = "nunit"\n')
    runner = CliRunner()
    result = runner.invoke(cli, ["detect", "--project-path", str(root), "--json"])
    assert result.exit_code == 0
    assert json.loads(result.output)["inline_data_attribute_name"] == "TestCase"


def test_detect_nothing_configured(tmp_path):
    runner = CliRunner()
    result = runner.invoke(cli, ["detect", "--project-path", str(tmp_path)])
    assert result.exit_code == ExitCodes.UNKNOWN_FRAMEWORK


def test_detect_strict_failure_is_reported(write_pyproject, tmp_path, monkeypatch):
    root = write_pyproject('[tool.testidentity]\nframework = "junit"\nstrict = true\n')
    elsewhere = tmp_path / "elsewhere"
    elsewhere.mkdir()
    monkeypatch.chdir(elsewhere)
    runner = CliRunner()
    result = runner.invoke(cli, ["detect", "--project-path", str(root)])
    assert result.exit_code == 1
    assert "UnknownFrameworkError" in result.output
    assert (root / ".testidentity" / "error.log").exists()
    assert not (elsewhere / ".testidentity").exists()


def test_detect_tool_not_a_table(write_pyproject):
    root = write_pyproject('tool = "x"\n')
    runner = CliRunner()
    result = runner.invoke(cli, ["detect", "--project-path", str(root)])
    assert result.exit_code == ExitCodes.UNKNOWN_FRAMEWORK


def test_exit_code_descriptions():
    assert "not recognized" in ExitCodes.get_description(ExitCodes.UNKNOWN_FRAMEWORK)
    assert ExitCodes.get_description(99) == "Unknown exit code: 99"
