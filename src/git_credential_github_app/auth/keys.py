from __future__ import annotations

from pathlib import Path

from cryptography.exceptions import UnsupportedAlgorithm
from cryptography.hazmat.primitives import serialization
from cryptography.hazmat.primitives.asymmetric.rsa import RSAPrivateKey

from git_credential_github_app.errors import KeyMalformed, KeyUnreadable


def load_private_key(path: Path) -> RSAPrivateKey:
    try:
        data = path.read_bytes()
    except OSError as exc:
        raise KeyUnreadable(f"Unable to read private key file {path}: {exc.strerror or exc}") from exc

    try:
        key = serialization.load_pem_private_key(data, password=None)
    except (ValueError, TypeError, UnsupportedAlgorithm) as exc:
        raise KeyMalformed(f"Private key file {path} is not an unencrypted PEM private key") from exc

    if not isinstance(key, RSAPrivateKey):
        raise KeyMalformed(f"Private key file {path} does not hold an RSA key")
    return key
