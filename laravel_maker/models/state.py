"""Provisioning stages."""

from enum import Enum


class ProvisioningState(str, Enum):
    """Stages of the pipeline, in the order they are reached."""

    ENVIRONMENT_READY = "environment_ready"
    CONTAINER_READY = "container_ready"
    PROJECT_SCAFFOLDED = "project_scaffolded"
    CONFIG_PATCHED = "config_patched"
    DEPENDENCIES_INSTALLED = "dependencies_installed"
    VHOST_WRITTEN = "vhost_written"
    HOST_ALIAS_REGISTERED = "host_alias_registered"
    PROXY_RESTARTED = "proxy_restarted"

    @property
    def label(self) -> str:
        return self.value.replace("_", " ")
