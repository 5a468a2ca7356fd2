from __future__ import annotations

from typing import Any, TypeVar

import httpx
from pydantic import TypeAdapter, ValidationError

from git_credential_github_app import __version__
from git_credential_github_app.auth.app_jwt import AppJwt
from git_credential_github_app.config.endpoints import ApiEndpoints
from git_credential_github_app.errors import GitHubApiError, SigningFailed

API_VERSION = "2022-11-28"
USER_AGENT = f"git-credential-github-app/{__version__}"

T = TypeVar("T")


def _api_message(response: httpx.Response) -> str:
    try:
        payload = response.json()
    except ValueError:
        return response.reason_phrase or "request failed"
    if isinstance(payload, dict) and isinstance(payload.get("message"), str):
        return payload["message"]
    return response.reason_phrase or "request failed"


def decode_json(response: httpx.Response, target: type[T] | Any, error: type[GitHubApiError]) -> T:
    """Validate a successful JSON response body against ``target``.

    ``target`` is any type pydantic can validate, e.g. a model or ``list[Model]``.
    Failures are raised as ``error`` so each caller keeps its own error kind.
    """
    request = response.request
    if not response.is_success:
        raise error(
            f"{request.method} {request.url} failed: {_api_message(response)}",
            status_code=response.status_code,
        )
    try:
        return TypeAdapter(target).validate_json(response.content)
    except ValidationError as exc:
        raise error(
            f"Unexpected response body from {request.method} {request.url}: "
            f"{exc.error_count()} validation error(s)",
            status_code=response.status_code,
        ) from exc


class GitHubAppClient:
    """HTTP client that authenticates every request with the App JWT."""

    def __init__(
        self,
        app_jwt: AppJwt,
        endpoints: ApiEndpoints,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        self._app_jwt = app_jwt
        self._endpoints = endpoints
        self._client = httpx.Client(
            base_url=endpoints.rest_url,
            transport=transport,
            headers={
                "Authorization": f"Bearer {app_jwt.token}",
                "Accept": "application/vnd.github+json",
                "Content-Type": "application/json",
                "X-GitHub-Api-Version": API_VERSION,
                "User-Agent": USER_AGENT,
            },
        )

    def __enter__(self) -> "GitHubAppClient":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    @property
    def endpoints(self) -> ApiEndpoints:
        return self._endpoints

    def close(self) -> None:
        self._client.close()

    def request(
        self,
        method: str,
        path: str,
        *,
        error: type[GitHubApiError],
        params: dict[str, Any] | None = None,
    ) -> httpx.Response:
        if self._app_jwt.is_expired():
            raise SigningFailed("App JWT has expired; sign a new one before calling the API")
        try:
            return self._client.request(method, path, params=params)
        except httpx.HTTPError as exc:
            raise error(f"{method} {path} failed: {exc}") from exc
