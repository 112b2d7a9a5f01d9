"""Models for Laravel Maker."""

from .config import Settings
from .project import ProjectRequest
from .rules import SubstitutionRule
from .state import ProvisioningState

__all__ = [
    'Settings',
    'ProjectRequest',
    'SubstitutionRule',
    'ProvisioningState',
]
