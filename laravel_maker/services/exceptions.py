"""Custom exceptions for the provisioning layer."""

from typing import Optional


class ProvisioningError(Exception):
    """Base exception for all provisioning errors."""

    pass


class ProvisioningIOError(ProvisioningError):
    """Exception raised for filesystem or stream failures."""

    pass


class NotFoundError(ProvisioningIOError):
    """Exception raised when a required file or directory is missing."""

    pass


class UserAbortedError(ProvisioningError):
    """Exception raised when the user explicitly opts out."""

    pass


class ValidationError(ProvisioningError):
    """Exception raised for invalid input or a failed privileged write."""

    pass


class DockerError(ProvisioningError):
    """Exception raised for container runtime or in-container failures."""

    def __init__(self, message: str, rule_index: Optional[int] = None, rule=None):
        super().__init__(message)
        self.rule_index = rule_index
        self.rule = rule


class ProcessLaunchError(ProvisioningError):
    """Exception raised when an executable cannot be found or spawned."""

    pass
