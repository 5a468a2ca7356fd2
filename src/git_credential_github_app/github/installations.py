from __future__ import annotations

from typing import Iterator
from urllib.parse import quote

import httpx

from git_credential_github_app.config.selectors import (
    ExplicitId,
    InstallationSelector,
    Organization,
    RepositorySlug,
    User,
)
from git_credential_github_app.errors import EnumerationFailed, InstallationNotFound

from .client import GitHubAppClient, decode_json
from .models import Installation

PAGE_SIZE = 10


def _segment(value: str) -> str:
    # Logins are case-insensitive; lower-casing avoids 404s on mixed-case input.
    return quote(value.lower(), safe="")


def _lookup_path(selector: InstallationSelector) -> str:
    if isinstance(selector, RepositorySlug):
        return f"repos/{_segment(selector.owner)}/{_segment(selector.repo)}/installation"
    if isinstance(selector, Organization):
        return f"orgs/{_segment(selector.name)}/installation"
    if isinstance(selector, User):
        return f"users/{_segment(selector.name)}/installation"
    raise TypeError(f"Unsupported installation selector: {selector!r}")


def resolve_installation(selector: InstallationSelector, client: GitHubAppClient) -> int:
    if isinstance(selector, ExplicitId):
        return selector.installation_id
    response = client.request("GET", _lookup_path(selector), error=InstallationNotFound)
    installation = decode_json(response, Installation, InstallationNotFound)
    return installation.id


def _next_page(response: httpx.Response, current: int) -> int | None:
    link = response.links.get("next")
    if link is None:
        return None
    raw_page = httpx.URL(link.get("url", "")).params.get("page")
    try:
        page = int(raw_page) if raw_page is not None else None
    except ValueError:
        page = None
    if page is None or page <= current:
        raise EnumerationFailed(f"Unusable next page link in installation listing: {link.get('url')}")
    return page


def iter_installations(client: GitHubAppClient, per_page: int = PAGE_SIZE) -> Iterator[Installation]:
    """Yield every installation of the App in server order, one page at a time."""
    page = 1
    while True:
        response = client.request(
            "GET",
            "app/installations",
            params={"per_page": per_page, "page": page},
            error=EnumerationFailed,
        )
        yield from decode_json(response, list[Installation], EnumerationFailed)
        next_page = _next_page(response, page)
        if next_page is None:
            return
        page = next_page


def list_installations(client: GitHubAppClient, per_page: int = PAGE_SIZE) -> list[Installation]:
    return list(iter_installations(client, per_page=per_page))
