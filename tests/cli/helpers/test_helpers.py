"""Tests for CLI helper functions."""

import logging
from unittest.mock import patch

import pytest

from laravel_maker.cli.helpers import configure_logging, exit_with_error, format_settings_table
from laravel_maker.models.state import ProvisioningState
from laravel_maker.services.exceptions import DockerError


class TestExitWithError:
    """Test error reporting."""

    def test_exits_with_status_one(self, capsys):
        with pytest.raises(SystemExit) as exc_info:
            exit_with_error(DockerError("restart failed"), ProvisioningState.HOST_ALIAS_REGISTERED)

        assert exc_info.value.code == 1
        err = capsys.readouterr().err
        assert "Error: restart failed" in err
        assert "Last completed stage: host alias registered" in err

    def test_without_stage(self, capsys):
        with pytest.raises(SystemExit):
            exit_with_error(DockerError("boom"))

        assert "Last completed stage" not in capsys.readouterr().err


class TestFormatSettingsTable:
    """Test settings table formatting."""

    def test_masks_password(self, settings):
        table = format_settings_table(settings)

        assert "dev_container_php" in table
        assert "3306" in table
        assert "secret" not in table


class TestConfigureLogging:
    """Test logging setup."""

    @patch('laravel_maker.cli.helpers.logging.basicConfig')
    def test_verbose(self, mock_basic_config):
        configure_logging(True)

        assert mock_basic_config.call_args.kwargs['level'] == logging.DEBUG

    @patch('laravel_maker.cli.helpers.logging.basicConfig')
    def test_quiet(self, mock_basic_config):
        configure_logging(False)

        assert mock_basic_config.call_args.kwargs['level'] == logging.WARNING
