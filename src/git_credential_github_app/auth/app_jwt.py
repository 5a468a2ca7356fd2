from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timedelta, timezone

import jwt
from cryptography.hazmat.primitives.asymmetric.rsa import RSAPrivateKey

from git_credential_github_app.config.endpoints import ApiEndpoints, endpoints_for_domain
from git_credential_github_app.errors import SigningFailed

# GitHub rejects App JWTs that live longer than ten minutes.
JWT_LIFETIME = timedelta(minutes=10)


@dataclass(frozen=True)
class AppIdentity:
    issuer: str
    private_key: RSAPrivateKey = field(repr=False)
    endpoints: ApiEndpoints = field(default_factory=lambda: endpoints_for_domain(None))


@dataclass(frozen=True)
class AppJwt:
    token: str = field(repr=False)
    issued_at: datetime
    expires_at: datetime

    def is_expired(self, now: datetime | None = None) -> bool:
        current = now or datetime.now(timezone.utc)
        return current >= self.expires_at


def sign_app_jwt(identity: AppIdentity, now: datetime | None = None) -> AppJwt:
    """Sign a fresh RS256 JWT identifying the App.

    ``now`` defaults to the wall clock; installation calls need a JWT that is
    valid at the moment they are sent, so callers should not cache it.
    """
    issued_at = (now or datetime.now(timezone.utc)).replace(microsecond=0)
    if issued_at.tzinfo is None:
        issued_at = issued_at.replace(tzinfo=timezone.utc)
    expires_at = issued_at + JWT_LIFETIME

    if not isinstance(identity.private_key, RSAPrivateKey):
        raise SigningFailed("RS256 signing requires an RSA private key")

    payload = {
        "iss": identity.issuer,
        "iat": int(issued_at.timestamp()),
        "exp": int(expires_at.timestamp()),
    }
    try:
        token = jwt.encode(payload, identity.private_key, algorithm="RS256")
    except (jwt.PyJWTError, TypeError, ValueError) as exc:
        raise SigningFailed(f"Unable to sign App JWT: {exc}") from exc
    return AppJwt(token=token, issued_at=issued_at, expires_at=expires_at)
