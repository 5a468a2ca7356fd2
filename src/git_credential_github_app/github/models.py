from __future__ import annotations

from datetime import datetime, timezone

from pydantic import BaseModel, ConfigDict, Field, field_validator


class InstallationAccount(BaseModel):
    # Enterprise accounts carry a slug instead of a login.
    login: str | None = None
    slug: str | None = None
    html_url: str | None = None
    type: str | None = None

    model_config = ConfigDict(extra="ignore")


class Installation(BaseModel):
    id: int
    account: InstallationAccount | None = None
    app_id: int | None = None
    target_type: str | None = None

    model_config = ConfigDict(extra="ignore")


class InstallationAccessToken(BaseModel):
    token: str = Field(min_length=1, repr=False)
    expires_at: datetime
    permissions: dict[str, str] | None = None
    repository_selection: str | None = None

    model_config = ConfigDict(extra="ignore")

    @field_validator("expires_at")
    @classmethod
    def _as_utc(cls, value: datetime) -> datetime:
        if value.tzinfo is None:
            return value.replace(tzinfo=timezone.utc)
        return value.astimezone(timezone.utc)

    @property
    def expires_at_epoch(self) -> int:
        return int(self.expires_at.timestamp())
