"""Tests for CLI support utilities."""
from io import StringIO
from pathlib import Path

import pytest
import typer
from rich.console import Console

from df_sol.cli_support import (
    handle_cli_error,
    print_info,
    print_success,
    print_warning,
)
from df_sol.core.errors import (
    CatalogCorrupt,
    DestinationConflict,
    InvalidProjectName,
    MissingKeyError,
    UnsupportedCombination,
    WriteFailed,
)


@pytest.fixture
def console():
    return Console(file=StringIO(), width=200)


def output(console):
    return console.file.getvalue()


class TestHandleCliError:
    """Test error reporting and exit codes."""

    @pytest.mark.parametrize("error,code,stage", [
        (InvalidProjectName("x y", "bad"), 2, "validation"),
        (UnsupportedCombination("mint-token", "single", "rust", ["mocha"]), 3, "validation"),
        (DestinationConflict(Path("/tmp/demo/Anchor.toml")), 4, "generation"),
        (MissingKeyError("PROGRAM_ID", "lib.rs"), 5, "template"),
        (CatalogCorrupt("broken"), 5, "template"),
        (WriteFailed(Path("/tmp/demo/a"), OSError(28, "No space left on device")), 6, "generation"),
    ])
    def test_exit_codes(self, console, error, code, stage):
        with pytest.raises(typer.Exit) as exc_info:
            handle_cli_error(error, console)

        assert exc_info.value.exit_code == code
        assert output(console).startswith(f"Error ({stage}): ")

    def test_single_line(self, console):
        """Errors print one line."""
        with pytest.raises(typer.Exit):
            handle_cli_error(DestinationConflict(Path("/tmp/demo/Anchor.toml")), console)

        assert output(console).count("\n") == 1

    def test_markup_is_escaped(self, console):
        """Brackets in messages are printed literally."""
        with pytest.raises(typer.Exit):
            handle_cli_error(CatalogCorrupt("bad entry [red]x[/red]"), console)

        assert "[red]x[/red]" in output(console)

    def test_unexpected_error(self, console):
        with pytest.raises(typer.Exit) as exc_info:
            handle_cli_error(RuntimeError("boom"), console)

        assert exc_info.value.exit_code == 1
        assert output(console).startswith("Error: boom")

    def test_exit_code_override(self, console):
        with pytest.raises(typer.Exit) as exc_info:
            handle_cli_error(CatalogCorrupt("broken"), console, exit_code=9)

        assert exc_info.value.exit_code == 9


class TestPrintHelpers:
    """Test message helpers."""

    def test_print_success(self, console):
        print_success(console, "demo initialized")
        assert output(console) == "✓ demo initialized\n"

    def test_print_warning(self, console):
        print_warning(console, "careful")
        assert output(console) == "⚠ careful\n"

    def test_print_info(self, console):
        print_info(console, "note", prefix="i")
        assert output(console) == "i note\n"
