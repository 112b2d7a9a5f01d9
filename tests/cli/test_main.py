"""Tests for the main CLI."""

from laravel_maker.cli.main import cli


class TestMainCLI:
    """Smoke tests for the CLI group."""

    def test_help(self, cli_runner):
        result = cli_runner.invoke(cli, ['--help'])

        assert result.exit_code == 0
        assert "Laravel Maker" in result.output
        assert "new" in result.output
        assert "config" in result.output
