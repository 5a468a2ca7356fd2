from __future__ import annotations

from dataclasses import dataclass
from typing import Union


@dataclass(frozen=True)
class ExplicitId:
    installation_id: int

    def describe(self) -> str:
        return f"installation {self.installation_id}"


@dataclass(frozen=True)
class RepositorySlug:
    owner: str
    repo: str

    def describe(self) -> str:
        return f"repository {self.owner}/{self.repo}"


@dataclass(frozen=True)
class Organization:
    name: str

    def describe(self) -> str:
        return f"organization {self.name}"


@dataclass(frozen=True)
class User:
    name: str

    def describe(self) -> str:
        return f"user {self.name}"


InstallationSelector = Union[ExplicitId, RepositorySlug, Organization, User]
