"""
Tests for tildelex - Lexer Command-Line Tool
============================================

These tests verify the token table output, the exit codes, and the
handling of missing, unreadable and malformed input files.
"""

import errno
import logging
from pathlib import Path

import pytest
from click.testing import CliRunner

from tildec import __version__
from tildec.cli.errors import ExitCode, handle_cli_exception
from tildec.cli.tildelex import format_token, main
from tildec.lexer import Token, TokenKind


@pytest.fixture
def runner():
    return CliRunner()


@pytest.fixture
def source_file(tmp_path):
    path = tmp_path / "fact.tl"
    path.write_text("int fact = 1;\n", encoding="utf-8")
    return path


# =============================================================================
# Token Formatting
# =============================================================================

class TestFormatToken:
    """Tests for format_token()."""

    def test_label_padded_to_width(self):
        line = format_token(Token("int", TokenKind.INT))
        assert line == "Int:" + " " * 12 + "int"

    def test_long_label_keeps_one_space(self):
        line = format_token(Token("fact", TokenKind.IDENTIFIER), width=4)
        assert line == "Identifier: fact"

    def test_literal_keeps_delimiters(self):
        line = format_token(Token('"Jake"', TokenKind.STRING_LITERAL), width=20)
        assert line.startswith("StringLiteral:")
        assert line.endswith(' "Jake"')
        assert len(line) == 20 + len('"Jake"')


# =============================================================================
# Command Tests
# =============================================================================

class TestTildelexCLI:
    """Tests for the tildelex command."""

    def test_help(self, runner):
        result = runner.invoke(main, ["--help"])
        assert result.exit_code == 0
        assert "Tokenize a tildec source file" in result.output

    def test_version(self, runner):
        result = runner.invoke(main, ["--version"])
        assert result.exit_code == 0
        assert __version__ in result.output

    def test_missing_argument_exits_zero(self, runner):
        """A missing file is reported but is not a failure."""
        result = runner.invoke(main, [])
        assert result.exit_code == ExitCode.SUCCESS
        assert "Please include a file" in result.output

    def test_quiet_by_default(self, runner, source_file):
        result = runner.invoke(main, [str(source_file)])
        assert result.exit_code == 0
        assert result.output == ""

    def test_verbose_token_table(self, runner, source_file):
        result = runner.invoke(main, ["-v", str(source_file)])
        assert result.exit_code == 0
        assert result.output.splitlines() == [
            "Int:            int",
            "Identifier:     fact",
            "Assignment:     =",
            "NumericLiteral: 1",
            "Semicolon:      ;",
        ]

    def test_width_option(self, runner, source_file):
        result = runner.invoke(main, ["-v", "-w", "20", str(source_file)])
        assert result.exit_code == 0
        assert result.output.splitlines()[0] == "Int:" + " " * 16 + "int"

    def test_comment_and_string(self, runner, tmp_path):
        path = tmp_path / "hello.tl"
        path.write_text('string s = "hi"; ~ greet ~\n', encoding="utf-8")
        result = runner.invoke(main, ["--verbose", str(path)])
        assert result.exit_code == 0
        lines = result.output.splitlines()
        assert lines[3] == 'StringLiteral:  "hi"'
        assert lines[-1] == "Comment:        ~ greet ~"

    def test_nonexistent_file(self, runner, tmp_path):
        result = runner.invoke(main, [str(tmp_path / "missing.tl")])
        assert result.exit_code == ExitCode.INVALID_ARGS

    def test_directory_rejected(self, runner, tmp_path):
        result = runner.invoke(main, [str(tmp_path)])
        assert result.exit_code == ExitCode.INVALID_ARGS

    def test_undecodable_file(self, runner, tmp_path):
        path = tmp_path / "binary.tl"
        path.write_bytes(b"int \xff\xfe x;")
        result = runner.invoke(main, [str(path)])
        assert result.exit_code == ExitCode.INVALID_ARGS
        assert "Read error" in result.output

    def test_read_failure(self, runner, source_file, monkeypatch):
        """Any OS-level read failure is an argument error, not an internal one."""
        def fail(self, *args, **kwargs):
            raise OSError(errno.EIO, "Input/output error")

        monkeypatch.setattr(Path, "read_text", fail)
        result = runner.invoke(main, [str(source_file)])
        assert result.exit_code == ExitCode.INVALID_ARGS
        assert "Read error" in result.output
        assert "Internal error" not in result.output

    def test_unterminated_comment(self, runner, tmp_path):
        path = tmp_path / "bad.tl"
        path.write_text("int x; ~ oops\n", encoding="utf-8")
        result = runner.invoke(main, ["-v", str(path)])
        assert result.exit_code == ExitCode.BUILD_ERROR
        assert "bad.tl:1:8: error: unterminated comment" in result.output

    def test_trace_logs_window(self, runner, source_file, caplog):
        caplog.set_level(logging.DEBUG, logger="tildec")
        result = runner.invoke(main, ["--trace", str(source_file)])
        assert result.exit_code == 0
        messages = [record.getMessage() for record in caplog.records]
        assert "window '' 'i' 'n'" in messages
        assert any(m.startswith("Tokenized") for m in messages)


# =============================================================================
# Exception Handler Tests
# =============================================================================

class TestHandleCliException:
    """Tests for the exit code mapping."""

    @pytest.mark.parametrize("error", [
        FileNotFoundError("missing.tl"),
        PermissionError("denied"),
        IsADirectoryError("src"),
        OSError(errno.EIO, "Input/output error"),
    ])
    def test_os_errors_are_invalid_args(self, error, capsys):
        with pytest.raises(SystemExit) as exc_info:
            handle_cli_exception(error, error_type="Read")
        assert exc_info.value.code == ExitCode.INVALID_ARGS
        assert capsys.readouterr().err.startswith("Read error: ")

    def test_unexpected_error_is_internal(self, capsys):
        with pytest.raises(SystemExit) as exc_info:
            handle_cli_exception(RuntimeError("boom"))
        assert exc_info.value.code == ExitCode.INTERNAL_ERROR
        assert "Internal error: boom" in capsys.readouterr().err
