from __future__ import annotations

from pathlib import Path
from typing import Any, Callable

import httpx
import pytest
from cryptography.hazmat.primitives import serialization
from cryptography.hazmat.primitives.asymmetric import rsa

from git_credential_github_app.auth import AppIdentity, AppJwt, sign_app_jwt

Handler = Callable[[httpx.Request], httpx.Response]


class StubApi:
    """In-memory GitHub API that records every request it receives."""

    def __init__(self) -> None:
        self.requests: list[httpx.Request] = []
        self._routes: dict[tuple[str, str], Handler] = {}

    def add(
        self,
        method: str,
        path: str,
        *,
        status: int = 200,
        json: Any = None,
        headers: dict[str, str] | None = None,
    ) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(status, json=json, headers=headers)

        self._routes[(method, path)] = handler

    def add_handler(self, method: str, path: str, handler: Handler) -> None:
        self._routes[(method, path)] = handler

    @property
    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self._handle)

    def _handle(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        handler = self._routes.get((request.method, request.url.path))
        if handler is None:
            return httpx.Response(404, json={"message": "Not Found"})
        return handler(request)


@pytest.fixture(scope="session")
def rsa_key() -> rsa.RSAPrivateKey:
    return rsa.generate_private_key(public_exponent=65537, key_size=2048)


@pytest.fixture
def key_file(tmp_path: Path, rsa_key: rsa.RSAPrivateKey) -> Path:
    path = tmp_path / "app.pem"
    path.write_bytes(
        rsa_key.private_bytes(
            encoding=serialization.Encoding.PEM,
            format=serialization.PrivateFormat.TraditionalOpenSSL,
            encryption_algorithm=serialization.NoEncryption(),
        )
    )
    return path


@pytest.fixture
def stub_api() -> StubApi:
    return StubApi()


@pytest.fixture
def app_jwt(rsa_key: rsa.RSAPrivateKey) -> AppJwt:
    return sign_app_jwt(AppIdentity(issuer="12345", private_key=rsa_key))


def installation_payload(installation_id: int, login: str, host: str = "github.com") -> dict[str, Any]:
    return {
        "id": installation_id,
        "app_id": 12345,
        "target_type": "Organization",
        "account": {
            "login": login,
            "html_url": f"https://{host}/{login}",
            "type": "Organization",
        },
    }


@pytest.fixture
def make_installation() -> Callable[..., dict[str, Any]]:
    return installation_payload
