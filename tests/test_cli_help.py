"""Snapshot tests for CLI help output."""
from typer.testing import CliRunner

from df_sol.cli import app

runner = CliRunner()


class TestMainHelp:
    """Test main CLI help output."""

    def test_main_help(self):
        """Main help shows the description, quick start and commands."""
        result = runner.invoke(app, ["--help"])

        assert result.exit_code == 0
        output = result.stdout

        # Check main description
        assert "df-sol - Anchor workspace scaffolding for Solana programs" in output

        # Check quick start guide
        assert "Quick start" in output
        assert "df-sol templates" in output

        # Check commands are listed
        assert "init" in output
        assert "templates" in output
        assert "version" in output


class TestInitHelp:
    """Test init command help output."""

    def test_init_help(self):
        """Init help lists every option."""
        result = runner.invoke(app, ["init", "--help"])

        assert result.exit_code == 0
        output = result.stdout

        assert "--template" in output
        assert "--layout" in output
        assert "--test-template" in output
        assert "--output-dir" in output
        assert "--force" in output
        assert "--program-id" in output
        assert "--dry-run" in output
        assert "--javascript" in output
        assert "mint-token" in output
