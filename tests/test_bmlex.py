"""
Tests for bmlex - B-Minor Lexer CLI
===================================

These tests run the command through click's CliRunner and check the
trace output, diagnostics, and exit codes.
"""

from pathlib import Path

import pytest
from click.testing import CliRunner

from bminor import __version__
from bminor.cli.bmlex import build_config, main
from bminor.cli.errors import ExitCode


@pytest.fixture
def runner():
    return CliRunner()


# =============================================================================
# Trace Output
# =============================================================================

class TestTraceOutput:
    """Successful runs write one trace line per token."""

    def test_stdin_to_stdout(self, runner):
        result = runner.invoke(main, [], input="x = 1;")
        assert result.exit_code == ExitCode.SUCCESS
        assert result.output == (
            "Identifier\tID: 1 ---> x\n"
            "Operand\t\t=\n"
            "Number\t\t1\n"
            "Delimiter\t;\n"
            "\n"
        )

    def test_file_to_file(self, runner):
        with runner.isolated_filesystem():
            Path("prog.bm").write_text('print "hi", count;\n')
            result = runner.invoke(main, ["prog.bm", "prog.tok"])
            assert result.exit_code == ExitCode.SUCCESS
            lines = Path("prog.tok").read_text().splitlines()
        assert lines == [
            "Keyword\t\t10",
            'String\t\t34 ---> Address of "hi" in strings buffer',
            "Delimiter\t,",
            "Identifier\tID: 1 ---> count",
            "Delimiter\t;",
            "",
        ]

    def test_summary(self, runner):
        result = runner.invoke(main, ["--summary"], input="b a b")
        assert result.exit_code == ExitCode.SUCCESS
        assert "Tokens: 4" in result.output
        assert "Identifiers: 2" in result.output
        assert "   1  b" in result.output
        assert "   2  a" in result.output

    def test_version(self, runner):
        result = runner.invoke(main, ["--version"])
        assert result.exit_code == 0
        assert "bmlex" in result.output
        assert __version__ in result.output


# =============================================================================
# Errors and Exit Codes
# =============================================================================

class TestErrors:
    """Lexical errors stop the run with exit code 1."""

    def test_lexical_error(self, runner):
        result = runner.invoke(main, [], input="a &")
        assert result.exit_code == ExitCode.LEX_ERROR
        assert "1:3: error: unrecognized character '&'" in result.output

    def test_partial_trace_before_error(self, runner):
        with runner.isolated_filesystem():
            Path("bad.bm").write_text("a b\n'xy'\n")
            result = runner.invoke(main, ["bad.bm", "bad.tok"])
            trace = Path("bad.tok").read_text()
        assert result.exit_code == ExitCode.LEX_ERROR
        assert "bad.bm:2:1: error: multi-character constant" in result.output
        assert trace == "Identifier\tID: 1 ---> a\nIdentifier\tID: 2 ---> b\n"

    def test_identifier_limit(self, runner):
        result = runner.invoke(main, ["--max-identifiers", "1"], input="a a b")
        assert result.exit_code == ExitCode.LEX_ERROR
        assert "too many identifiers" in result.output

    def test_identifier_limit_from_env(self, runner):
        result = runner.invoke(main, [], input="a b c", env={"BMINOR_MAX_IDENTIFIERS": "2"})
        assert result.exit_code == ExitCode.LEX_ERROR
        assert "limit of 2" in result.output

    def test_invalid_limit(self, runner):
        result = runner.invoke(main, ["--max-identifiers", "0"], input="a")
        assert result.exit_code == ExitCode.INVALID_ARGS

    def test_missing_input_file(self, runner):
        with runner.isolated_filesystem():
            result = runner.invoke(main, ["missing.bm"])
        assert result.exit_code == ExitCode.INVALID_ARGS


# =============================================================================
# Configuration
# =============================================================================

class TestBuildConfig:
    """Command-line options are applied on top of the environment."""

    def test_input_path_names_source(self, monkeypatch):
        monkeypatch.setenv("BMINOR_FILENAME", "from_env.bm")
        assert build_config("prog.bm", None).filename == "prog.bm"

    def test_stdin_uses_env_name(self, monkeypatch):
        monkeypatch.setenv("BMINOR_FILENAME", "from_env.bm")
        assert build_config("<stdin>", None).filename == "from_env.bm"

    def test_stdin_default_name(self, monkeypatch):
        monkeypatch.delenv("BMINOR_FILENAME", raising=False)
        assert build_config("<stdin>", None).filename == "<stdin>"

    def test_option_overrides_env(self, monkeypatch):
        monkeypatch.setenv("BMINOR_MAX_IDENTIFIERS", "5")
        assert build_config("<stdin>", None).max_identifiers == 5
        assert build_config("<stdin>", 9).max_identifiers == 9
