"""Tests for the provisioning pipeline."""

from unittest.mock import MagicMock

import pytest

from laravel_maker.core.config_patcher import ConfigPatcher
from laravel_maker.core.host_alias import HostAliasRegistrar
from laravel_maker.core.pipeline import VITE_RULE, ProvisioningPipeline, env_rules
from laravel_maker.core.readiness import ContainerReadinessPoller
from laravel_maker.core.vhost_generator import VhostGenerator
from laravel_maker.models.state import ProvisioningState
from laravel_maker.services.docker_service import DockerService
from laravel_maker.services.exceptions import DockerError, ValidationError
from laravel_maker.services.process_runner import ExitResult


@pytest.fixture
def parts():
    docker_service = MagicMock(spec=DockerService)
    docker_service.exec.return_value = ExitResult(0)
    docker_service.probe.return_value = False
    manager = MagicMock()
    manager.attach_mock(docker_service, 'docker')
    poller = MagicMock(spec=ContainerReadinessPoller)
    manager.attach_mock(poller, 'poller')
    patcher = MagicMock(spec=ConfigPatcher)
    manager.attach_mock(patcher, 'patcher')
    vhost = MagicMock(spec=VhostGenerator)
    manager.attach_mock(vhost, 'vhost')
    registrar = MagicMock(spec=HostAliasRegistrar)
    manager.attach_mock(registrar, 'registrar')
    sleep = MagicMock()
    pipeline = ProvisioningPipeline(
        docker_service=docker_service,
        poller=poller,
        patcher=patcher,
        vhost_generator=vhost,
        registrar=registrar,
        sleep=sleep,
    )
    return pipeline, manager, sleep


class TestEnvRules:
    """Test cases for the generated .env rules."""

    def test_rules_in_order(self, project_request, settings):
        rules = env_rules(project_request, settings)

        assert [str(r) for r in rules] == [
            "set APP_URL",
            "set DB_CONNECTION",
            "set DB_PORT",
            "set DB_DATABASE",
            "set DB_HOST",
            "set DB_USERNAME",
            "set DB_PASSWORD",
        ]
        assert rules[0].replacement == "APP_URL=http://demo-app.test"
        assert rules[2].replacement == "DB_PORT=3306"
        assert rules[3].replacement == "DB_DATABASE=demo-app"
        assert rules[6].replacement == "DB_PASSWORD=secret"


class TestProvisioningPipeline:
    """Test cases for ProvisioningPipeline."""

    def test_full_run_sequence(self, parts, project_request, settings):
        """Test every stage runs in order."""
        pipeline, manager, sleep = parts

        pipeline.run(project_request, settings)

        names = [c[0] for c in manager.mock_calls]
        assert names == [
            'poller.ensure_ready',
            'docker.exec',
            'patcher.apply_rules',
            'docker.run_in',
            'docker.run_in',
            'docker.run_in',
            'docker.run_in',
            'docker.probe',
            'patcher.apply_rules',
            'vhost.write',
            'registrar.ensure_alias',
            'docker.compose_restart',
        ]
        assert pipeline.completed == list(ProvisioningState)
        sleep.assert_called_once_with(1.0)

    def test_commands(self, parts, project_request, settings):
        """Test the commands sent to each container."""
        pipeline, manager, _ = parts

        pipeline.run(project_request, settings)

        docker = manager.docker
        docker.exec.assert_called_once_with(
            "dev_container_php",
            ["composer", "create-project", "laravel/laravel", "demo-app", "12"],
        )
        workdir = "/var/www/html/demo-app"
        assert [c.args for c in docker.run_in.call_args_list] == [
            ("dev_container_php", workdir, "php artisan config:clear"),
            ("dev_container_php", workdir, "php artisan migrate --force"),
            ("dev_container_php", workdir, "composer update"),
            ("dev_container_node", workdir, "npm install"),
        ]
        env_call, vite_call = manager.patcher.apply_rules.call_args_list
        assert env_call.args == ("dev_container_php", workdir, env_rules(project_request, settings))
        assert vite_call.args == ("dev_container_php", workdir, [VITE_RULE])
        assert vite_call.kwargs == {"target": "vite.config.js"}
        manager.registrar.ensure_alias.assert_called_once_with("demo-app.test")
        docker.compose_restart.assert_called_once_with("apache")

    def test_scaffold_failure_stops(self, parts, project_request, settings):
        """Test a composer failure aborts before any patching."""
        pipeline, manager, _ = parts
        manager.docker.exec.return_value = ExitResult(1)

        with pytest.raises(DockerError, match="Composer failed"):
            pipeline.run(project_request, settings)

        manager.patcher.apply_rules.assert_not_called()
        assert pipeline.last_completed is ProvisioningState.CONTAINER_READY

    def test_readiness_failure_stops(self, parts, project_request, settings):
        pipeline, manager, _ = parts
        manager.poller.ensure_ready.side_effect = DockerError("failed to start after 3 attempts")

        with pytest.raises(DockerError):
            pipeline.run(project_request, settings)

        manager.docker.exec.assert_not_called()
        assert pipeline.last_completed is ProvisioningState.ENVIRONMENT_READY

    def test_alias_failure_skips_restart(self, parts, project_request, settings):
        """Test a failed alias write leaves the proxy untouched."""
        pipeline, manager, sleep = parts
        manager.registrar.ensure_alias.side_effect = ValidationError("sudo failed")

        with pytest.raises(ValidationError):
            pipeline.run(project_request, settings)

        manager.docker.compose_restart.assert_not_called()
        sleep.assert_not_called()
        assert pipeline.last_completed is ProvisioningState.VHOST_WRITTEN

    def test_resume_skips_existing_project(self, parts, project_request, settings):
        """Test resuming does not scaffold an existing project."""
        pipeline, manager, _ = parts
        manager.docker.probe.return_value = True

        pipeline.run(project_request, settings, resume=True)

        manager.docker.exec.assert_not_called()
        manager.docker.probe.assert_any_call(
            "dev_container_php", ["test", "-f", "/var/www/html/demo-app/artisan"]
        )
        # vite already patched, so only the .env rules run
        assert manager.patcher.apply_rules.call_count == 1

    def test_resume_scaffolds_missing_project(self, parts, project_request, settings):
        pipeline, manager, _ = parts

        pipeline.run(project_request, settings, resume=True)

        manager.docker.exec.assert_called_once()
