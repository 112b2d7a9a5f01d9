import pytest
from click.testing import CliRunner
from unittest.mock import MagicMock

from laravel_maker.services.process_runner import ExitResult, ProcessRunner


@pytest.fixture
def cli_runner():
    """Provides a Click CLI runner for testing commands."""
    return CliRunner()


@pytest.fixture
def mock_runner():
    """Provides a ProcessRunner mock whose commands succeed by default."""
    runner = MagicMock(spec=ProcessRunner)
    runner.run.return_value = ExitResult(0)
    runner.run_capturing.return_value = (ExitResult(0), "")
    return runner


@pytest.fixture
def settings():
    """Provides resolved settings with default values."""
    from laravel_maker.models.config import Settings

    return Settings(
        container_name="dev_container",
        db_root_password="secret",
        server_port=8000,
        db_port=3306,
    )


@pytest.fixture
def project_request():
    """Provides a request for the demo-app project."""
    from laravel_maker.models.project import ProjectRequest

    return ProjectRequest.for_name("demo-app", "12")


@pytest.fixture
def provisioning_root(tmp_path):
    """Creates a provisioning root with the vhosts directory."""
    (tmp_path / "docker" / "apache" / "vhosts").mkdir(parents=True)
    return tmp_path


@pytest.fixture(autouse=True)
def clean_settings_env(monkeypatch):
    """Keep host settings variables from overriding test .env files."""
    for key in ("CONTAINER_NAME", "SERVER_PORT", "DB_PORT", "DB_ROOT_PASSWORD"):
        monkeypatch.delenv(key, raising=False)
