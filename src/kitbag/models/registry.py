"""Repository registry models."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

REGISTRY_FORMAT_VERSION = 1


class RepositoryRegistration(BaseModel):
    """A registered remote repository and where its mirror lives."""

    model_config = ConfigDict(frozen=True)

    namespace: str = Field(..., min_length=1, pattern=r"^[a-z0-9-]+$")
    url: str = Field(..., min_length=1)
    owner: str = Field(..., min_length=1)
    repo: str = Field(..., min_length=1)
    default_branch: str = Field(..., min_length=1)
    added_at: datetime


class RegistryDocument(BaseModel):
    """Top-level repos.json structure."""

    model_config = ConfigDict(frozen=True)

    version: int = REGISTRY_FORMAT_VERSION
    repos: list[RepositoryRegistration] = Field(default_factory=list)

    def find(self, namespace: str) -> RepositoryRegistration | None:
        for registration in self.repos:
            if registration.namespace == namespace:
                return registration
        return None

    def with_repo(self, registration: RepositoryRegistration) -> "RegistryDocument":
        """Return a new document with the registration appended."""
        return self.model_copy(update={"repos": [*self.repos, registration]})

    def without_repo(self, namespace: str) -> "RegistryDocument":
        """Return a new document with the namespace removed."""
        remaining = [r for r in self.repos if r.namespace != namespace]
        return self.model_copy(update={"repos": remaining})
