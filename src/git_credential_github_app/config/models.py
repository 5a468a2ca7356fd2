from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from git_credential_github_app.errors import AmbiguousSelector

from .endpoints import ApiEndpoints, endpoints_for_domain
from .selectors import ExplicitId, InstallationSelector, Organization, RepositorySlug, User


def _blank_to_none(value: object) -> object:
    if isinstance(value, str):
        value = value.strip()
        return value or None
    return value


class HelperConfig(BaseModel):
    username: str = Field(min_length=1)
    app_id: int | None = Field(default=None, gt=0)
    client_id: str | None = None
    private_key_file: Path
    installation_id: int | None = Field(default=None, gt=0)
    repository: str | None = None
    owner: str | None = None
    repo: str | None = None
    organization: str | None = None
    user: str | None = None
    domain: str | None = None
    verbose: bool = False

    model_config = ConfigDict(extra="forbid", frozen=True)

    @field_validator(
        "client_id",
        "private_key_file",
        "repository",
        "owner",
        "repo",
        "organization",
        "user",
        "domain",
        mode="before",
    )
    @classmethod
    def _strip_optional(cls, value: object) -> object:
        return _blank_to_none(value)

    @field_validator("username")
    @classmethod
    def _validate_username(cls, value: str) -> str:
        # The username is echoed into line-oriented credential output.
        if any(ord(char) < 32 or ord(char) == 127 for char in value):
            raise ValueError("username must not contain control characters")
        return value

    @field_validator("private_key_file")
    @classmethod
    def _absolute_key_path(cls, value: Path) -> Path:
        # Generated helper stanzas run from arbitrary working directories.
        try:
            return value.expanduser().resolve()
        except RuntimeError as exc:
            raise ValueError(f"cannot expand private key path {value}: {exc}") from exc

    @field_validator("repository")
    @classmethod
    def _validate_repository(cls, value: str | None) -> str | None:
        if value is None:
            return value
        owner, _, repo = value.partition("/")
        if not owner or not repo or "/" in repo:
            raise ValueError("repository must be in owner/repo form")
        return value

    @field_validator("domain")
    @classmethod
    def _validate_domain(cls, value: str | None) -> str | None:
        if value is None:
            return value
        domain = value.rstrip("/")
        if "://" in domain or "/" in domain:
            raise ValueError("domain must be a bare host name such as ghe.example.com")
        return domain.lower()

    @model_validator(mode="after")
    def _require_identity(self) -> "HelperConfig":
        if self.app_id is None and self.client_id is None:
            raise ValueError("app_id or client_id is required")
        return self

    @property
    def issuer(self) -> str:
        if self.client_id is not None:
            return self.client_id
        return str(self.app_id)

    @property
    def endpoints(self) -> ApiEndpoints:
        return endpoints_for_domain(self.domain)

    def selector(self) -> InstallationSelector:
        """Pick the installation selector: id, then repository, organization, user."""
        if self.installation_id is not None:
            return ExplicitId(self.installation_id)
        if self.repository is not None:
            owner, _, repo = self.repository.partition("/")
            return RepositorySlug(owner=owner, repo=repo)
        if self.owner is not None and self.repo is not None:
            return RepositorySlug(owner=self.owner, repo=self.repo)
        if self.organization is not None:
            return Organization(self.organization)
        if self.user is not None:
            return User(self.user)
        raise AmbiguousSelector(
            "installation_id, repository (owner/repo), organization or user is required for get"
        )
