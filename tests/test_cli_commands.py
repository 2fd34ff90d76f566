"""Tests for CLI commands."""

import os
import tempfile
from pathlib import Path
from unittest.mock import patch

import pytest
from click.testing import CliRunner

from sgrfmt.cli.commands import cli
from sgrfmt.utils.logging import LogLevel, configure_logging
from sgrfmt.version import __version__

VALID_CONFIG = """
version: "1"
features:
  const_format: true
output:
  color: always
"""


@pytest.fixture(autouse=True)
def plain_environment(monkeypatch):
    """Remove variables that change color handling or settings."""
    for name in ["NO_COLOR", "FORCE_COLOR", "SGRFMT_CONST_FORMAT", "SGRFMT_COLOR", "SGRFMT_LOG_LEVEL"]:
        monkeypatch.delenv(name, raising=False)
    yield
    configure_logging(LogLevel.NONE)


@pytest.fixture
def runner():
    return CliRunner()


@pytest.fixture
def temp_config_yaml():
    """Create a temporary configuration file for testing."""
    with tempfile.NamedTemporaryFile(suffix=".yaml", delete=False) as temp_file:
        temp_file.write(VALID_CONFIG.encode("utf-8"))
    yield Path(temp_file.name)
    # Clean up
    os.unlink(temp_file.name)


def test_cli_command_help(runner):
    """Test the CLI help command."""
    result = runner.invoke(cli, ["--help"])
    assert result.exit_code == 0
    assert "wrap text in SGR terminal sequences" in result.output


def test_version(runner):
    result = runner.invoke(cli, ["--version"])
    assert result.exit_code == 0
    assert __version__ in result.output


class TestRender:
    def test_strips_sequences_when_not_a_terminal(self, runner):
        with runner.isolated_filesystem():
            result = runner.invoke(cli, ["render", "bold", "hi"])
        assert result.exit_code == 0
        assert result.output == "hi\n"

    def test_color_always(self, runner):
        with runner.isolated_filesystem():
            result = runner.invoke(cli, ["render", "bold", "hi", "--color", "always"])
        assert result.exit_code == 0
        assert result.output == "\x1b[1mhi\x1b[22m\n"

    def test_force_color(self, runner):
        with runner.isolated_filesystem(), patch.dict(os.environ, {"FORCE_COLOR": "1"}):
            result = runner.invoke(cli, ["render", "red", "x", "-n"])
        assert result.output == "\x1b[31mx\x1b[39m"

    def test_sigils_and_params(self, runner):
        with runner.isolated_filesystem():
            result = runner.invoke(
                cli, ["render", "fg_256", "-p", "196", "-s", "@", "{} apples", "3", "--color", "always"]
            )
        assert result.exit_code == 0
        assert result.output == "\x1b[38;5;196m3 apples\x1b[39m\n"

    def test_rgb_params(self, runner):
        with runner.isolated_filesystem():
            result = runner.invoke(
                cli, ["render", "bg-rgb", "-p", "1", "-p", "2", "-p", "3", "-s", "*", "x", "--color", "always"]
            )
        assert result.output == "\x1b[48;2;1;2;3mx\x1b[0m\n"

    def test_config_file_enables_const_format(self, runner):
        with runner.isolated_filesystem():
            Path("sgrfmt.yaml").write_text(VALID_CONFIG)
            result = runner.invoke(cli, ["render", "bold", "-s", "#!", "{} items", "2"])
        assert result.exit_code == 0
        assert result.output == "\x1b[1m2 items\n"

    def test_explicit_config_file(self, runner, temp_config_yaml):
        with runner.isolated_filesystem():
            result = runner.invoke(cli, ["render", "bold", "-s", "#*", "x", "--file", str(temp_config_yaml)])
        assert result.exit_code == 0
        assert result.output == "\x1b[1mx\x1b[0m\n"

    def test_const_format_disabled(self, runner):
        with runner.isolated_filesystem():
            result = runner.invoke(cli, ["render", "bold", "-s", "#", "x"])
        assert result.exit_code == 1
        assert "const_format" in result.output

    def test_misordered_sigils(self, runner):
        with runner.isolated_filesystem():
            result = runner.invoke(cli, ["render", "bold", "-s", "*@", "x"])
        assert result.exit_code == 1
        assert "must come before the revert sigil" in result.output

    def test_unknown_style(self, runner):
        with runner.isolated_filesystem():
            result = runner.invoke(cli, ["render", "sparkle", "x"])
        assert result.exit_code == 1
        assert "Error: Unknown style or color: sparkle" in result.output

    def test_family_needs_params(self, runner):
        with runner.isolated_filesystem():
            result = runner.invoke(cli, ["render", "fg_256", "x"])
        assert result.exit_code == 1
        assert "needs color parameters" in result.output

    def test_style_takes_no_params(self, runner):
        with runner.isolated_filesystem():
            result = runner.invoke(cli, ["render", "bold", "-p", "1", "x"])
        assert result.exit_code == 1
        assert "takes no color parameters" in result.output

    def test_out_of_range(self, runner):
        with runner.isolated_filesystem():
            result = runner.invoke(cli, ["render", "fg_256", "-p", "256", "x"])
        assert result.exit_code == 1
        assert "Error" in result.output

    def test_missing_config_file(self, runner):
        with runner.isolated_filesystem():
            result = runner.invoke(cli, ["render", "bold", "x", "--file", "nope.yaml"])
        assert result.exit_code == 1
        assert "Configuration file not found" in result.output

    def test_invalid_config_file(self, runner):
        with runner.isolated_filesystem():
            Path("sgrfmt.yaml").write_text("output:\n  color: rainbow\n")
            result = runner.invoke(cli, ["render", "bold", "x"])
        assert result.exit_code == 1
        assert "Invalid configuration" in result.output

    def test_template_mismatch(self, runner):
        with runner.isolated_filesystem():
            result = runner.invoke(cli, ["render", "red", "-s", "@", "progress {done}%"])
        assert result.exit_code == 1
        assert "does not match its arguments: missing argument 'done'" in result.output

    def test_log_level_option(self, runner):
        with runner.isolated_filesystem():
            result = runner.invoke(cli, ["render", "bold", "x", "--log-level", "debug"])
        assert result.exit_code == 0
        assert "x" in result.output


class TestCodes:
    def test_style(self, runner):
        result = runner.invoke(cli, ["codes", "bold"])
        assert result.exit_code == 0
        assert result.output.splitlines() == ["set:    1", "reset:  22", "groups: intensity"]

    def test_rgb_hex(self, runner):
        result = runner.invoke(cli, ["codes", "fg_rgb", "-p", "#ff8800"])
        assert result.exit_code == 0
        assert result.output.splitlines() == ["set:    38;2;255;136;0", "reset:  39", "groups: fg-color"]

    def test_revert_sigils(self, runner):
        assert "reset:  0" in runner.invoke(cli, ["codes", "italic", "-s", "*"]).output
        assert "reset:  -" in runner.invoke(cli, ["codes", "italic", "-s", "!"]).output

    def test_unknown(self, runner):
        result = runner.invoke(cli, ["codes", "sparkle"])
        assert result.exit_code == 1


class TestList:
    def test_lists_everything(self, runner):
        result = runner.invoke(cli, ["list"])
        assert result.exit_code == 0
        lines = result.output.splitlines()
        assert len(lines) == 47
        assert lines[0].split() == ["bold", "intensity"]
        assert any(line.startswith("fg_rgb[...]") for line in lines)
        assert "\x1b[" not in result.output

    def test_preview(self, runner):
        result = runner.invoke(cli, ["list", "--preview"])
        assert result.exit_code == 0
        assert "\x1b[1mbold\x1b[22m" in result.output


class TestValidate:
    def test_valid(self, runner):
        with runner.isolated_filesystem():
            Path("sgrfmt.yaml").write_text(VALID_CONFIG)
            result = runner.invoke(cli, ["validate"])
        assert result.exit_code == 0
        assert "Success! The configuration is valid." in result.output

    def test_invalid(self, runner):
        with runner.isolated_filesystem():
            Path("custom.yaml").write_text("version: '2'\nextra: true\n")
            result = runner.invoke(cli, ["validate", "-f", "custom.yaml"])
            strict = runner.invoke(cli, ["validate", "-f", "custom.yaml", "--strict"])
        assert result.exit_code == 0
        assert "Configuration validation failed (2 errors)" in result.output
        assert "version:" in result.output
        assert strict.exit_code == 1

    def test_placeholders_are_resolved(self, runner):
        with runner.isolated_filesystem(), patch.dict(os.environ, {"SGRFMT_TEST_COLOR": "never"}):
            Path("sgrfmt.yaml").write_text('output:\n  color: "${{ env.SGRFMT_TEST_COLOR }}"\n')
            result = runner.invoke(cli, ["validate", "--strict"])
        assert result.exit_code == 0
        assert "Success! The configuration is valid." in result.output

    def test_unparseable(self, runner):
        with runner.isolated_filesystem():
            Path("sgrfmt.yaml").write_text("- just\n- a list\n")
            result = runner.invoke(cli, ["validate"])
        assert result.exit_code == 1
        assert "Failed to load configuration" in result.output

    def test_missing(self, runner):
        with runner.isolated_filesystem():
            result = runner.invoke(cli, ["validate"])
        assert result.exit_code == 1
        assert "No configuration file found" in result.output
