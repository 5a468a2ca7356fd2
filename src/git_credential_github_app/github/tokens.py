from __future__ import annotations

from git_credential_github_app.errors import TokenExchangeFailed

from .client import GitHubAppClient, decode_json
from .models import InstallationAccessToken


def create_installation_token(client: GitHubAppClient, installation_id: int) -> InstallationAccessToken:
    # No body: the token receives every permission granted to the installation.
    response = client.request(
        "POST",
        f"app/installations/{installation_id}/access_tokens",
        error=TokenExchangeFailed,
    )
    return decode_json(response, InstallationAccessToken, TokenExchangeFailed)
