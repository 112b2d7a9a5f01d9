"""Service layer for external processes and the container runtime."""

from .process_runner import ExitResult, ProcessRunner
from .docker_service import DockerService
from .exceptions import (
    ProvisioningError,
    ProvisioningIOError,
    NotFoundError,
    UserAbortedError,
    ValidationError,
    DockerError,
    ProcessLaunchError,
)

__all__ = [
    "ExitResult",
    "ProcessRunner",
    "DockerService",
    "ProvisioningError",
    "ProvisioningIOError",
    "NotFoundError",
    "UserAbortedError",
    "ValidationError",
    "DockerError",
    "ProcessLaunchError",
]
