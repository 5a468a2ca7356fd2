from __future__ import annotations

from enum import Enum

from git_credential_github_app.github.models import InstallationAccessToken

QUIT_SENTINEL = "quit=1\n"


class Operation(str, Enum):
    GET = "get"
    STORE = "store"
    ERASE = "erase"
    GENERATE = "generate"

    @classmethod
    def parse(cls, value: str) -> "Operation | None":
        try:
            return cls(value)
        except ValueError:
            return None


def format_get_output(username: str, token: InstallationAccessToken) -> str:
    return (
        f"username={username}\n"
        f"password={token.token}\n"
        f"password_expiry_utc={token.expires_at_epoch}\n"
    )
