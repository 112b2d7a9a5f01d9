"""Configuration models for Laravel Maker."""

from pydantic import BaseModel, ConfigDict, Field

from ..core.constants import NODE_CONTAINER_SUFFIX, PHP_CONTAINER_SUFFIX


class Settings(BaseModel):
    """Settings resolved once per run from the environment files."""

    model_config = ConfigDict(frozen=True)

    container_name: str = Field(min_length=1)
    db_root_password: str = Field(min_length=1)
    server_port: int = Field(ge=1, le=65535)
    db_port: int = Field(ge=1, le=65535)

    @property
    def php_container_name(self) -> str:
        """Application runtime container."""
        return f"{self.container_name}{PHP_CONTAINER_SUFFIX}"

    @property
    def node_container_name(self) -> str:
        """Asset build container."""
        return f"{self.container_name}{NODE_CONTAINER_SUFFIX}"
