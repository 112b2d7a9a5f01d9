"""Tests for the config command."""

from unittest.mock import patch

from laravel_maker.cli.commands.config import config
from laravel_maker.services.exceptions import ValidationError


class TestConfigCommand:
    """Smoke tests for config command."""

    def test_config_command_help(self, cli_runner):
        result = cli_runner.invoke(config, ['--help'])

        assert result.exit_code == 0
        assert "show" in result.output

    @patch('laravel_maker.cli.commands.config.ConfigResolver')
    def test_config_show(self, mock_resolver_class, cli_runner, settings):
        """Test settings are shown with the password masked."""
        mock_resolver_class.return_value.resolve.return_value = settings

        result = cli_runner.invoke(config, ['show'])

        assert result.exit_code == 0
        assert "dev_container_php" in result.output
        assert "dev_container_node" in result.output
        assert "8000" in result.output
        assert "secret" not in result.output
        assert "******" in result.output

    def test_config_show_reads_env_file(self, cli_runner, monkeypatch):
        """Test show against a real .env file."""
        for key in ("CONTAINER_NAME", "SERVER_PORT", "DB_PORT", "DB_ROOT_PASSWORD"):
            monkeypatch.delenv(key, raising=False)

        with cli_runner.isolated_filesystem():
            with open('.env', 'w') as f:
                f.write("CONTAINER_NAME=shop\nSERVER_PORT=9090\n")

            result = cli_runner.invoke(config, ['show'])

        assert result.exit_code == 0
        assert "shop_php" in result.output
        assert "9090" in result.output

    def test_config_show_environment_overrides_file(self, cli_runner, monkeypatch):
        """Test an exported variable wins over the .env value."""
        monkeypatch.setenv("CONTAINER_NAME", "exported")

        with cli_runner.isolated_filesystem():
            with open('.env', 'w') as f:
                f.write("CONTAINER_NAME=shop\n")

            result = cli_runner.invoke(config, ['show'])

        assert result.exit_code == 0
        assert "exported_php" in result.output
        assert "shop_php" not in result.output

    @patch('laravel_maker.cli.commands.config.ConfigResolver')
    def test_config_show_missing_files(self, mock_resolver_class, cli_runner):
        mock_resolver_class.return_value.resolve.side_effect = ValidationError(
            "Neither .env nor env.example was found."
        )

        result = cli_runner.invoke(config, ['show'])

        assert result.exit_code == 1
        assert "Neither .env nor env.example" in result.output
