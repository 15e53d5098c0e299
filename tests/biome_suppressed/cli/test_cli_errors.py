"""Tests for CLI error handling."""

import pytest
import typer

from biome_suppressed.cli.errors import CLIError, cli_error_handler
from biome_suppressed.errors import BaselineWriteError


class TestCLIError:
    """Tests for CLIError formatting."""

    def test_str_includes_command(self) -> None:
        error = CLIError("boom", command="check")

        assert str(error) == "CLI command 'check' failed: boom"

    def test_str_without_command(self) -> None:
        assert str(CLIError("boom")) == "boom"


class TestCliErrorHandler:
    """Tests for cli_error_handler."""

    def test_raw_exception_exits_with_code_one(
        self, capsys: pytest.CaptureFixture[str]
    ) -> None:
        with pytest.raises(typer.Exit) as exc_info:
            with cli_error_handler("check", "Check failed"):
                raise BaselineWriteError("disk full")

        assert exc_info.value.exit_code == 1
        cause = exc_info.value.__cause__
        assert isinstance(cause, CLIError)
        assert isinstance(cause.original_error, BaselineWriteError)
        assert "disk full" in capsys.readouterr().err

    def test_cli_error_is_not_wrapped_again(
        self, capsys: pytest.CaptureFixture[str]
    ) -> None:
        original = CLIError("No valid files", command="init")

        with pytest.raises(typer.Exit) as exc_info:
            with cli_error_handler("init", "Init failed"):
                raise original

        assert exc_info.value.__cause__ is original
        assert "No valid files" in capsys.readouterr().err

    def test_exit_passes_through(self) -> None:
        with pytest.raises(typer.Exit) as exc_info:
            with cli_error_handler("check", "Check failed"):
                raise typer.Exit(0)

        assert exc_info.value.exit_code == 0
