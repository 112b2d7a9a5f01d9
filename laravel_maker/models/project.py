"""Project request model."""

from pydantic import BaseModel, ConfigDict

from ..core.constants import PROJECTS_DIR, TLD_SUFFIX


class ProjectRequest(BaseModel):
    """A validated request to provision one project."""

    model_config = ConfigDict(frozen=True)

    name: str
    host: str
    path: str
    laravel_version: str

    @classmethod
    def for_name(
        cls,
        name: str,
        laravel_version: str,
        tld: str = TLD_SUFFIX,
        projects_dir: str = PROJECTS_DIR,
    ) -> 'ProjectRequest':
        """Create a request deriving host and path from an already normalized name."""
        return cls(
            name=name,
            host=f"{name}.{tld}",
            path=f"{projects_dir}/{name}",
            laravel_version=laravel_version,
        )

