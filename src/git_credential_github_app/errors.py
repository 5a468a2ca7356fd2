from __future__ import annotations


class HelperError(Exception):
    """Base class for every failure the helper reports to the user."""


class ConfigurationError(HelperError):
    pass


class PrivateKeyError(HelperError):
    pass


class KeyUnreadable(PrivateKeyError):
    pass


class KeyMalformed(PrivateKeyError):
    pass


class SigningError(HelperError):
    pass


class SigningFailed(SigningError):
    pass


class ResolutionError(HelperError):
    pass


class AmbiguousSelector(ResolutionError):
    pass


class ExchangeError(HelperError):
    pass


class EnumerationError(HelperError):
    pass


class GitHubApiError(HelperError):
    """An API call failed; ``status_code`` is None for transport failures."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.status_code = status_code

    def __str__(self) -> str:
        if self.status_code is None:
            return self.message
        return f"{self.message} (HTTP {self.status_code})"


class InstallationNotFound(GitHubApiError, ResolutionError):
    pass


class TokenExchangeFailed(GitHubApiError, ExchangeError):
    pass


class EnumerationFailed(GitHubApiError, EnumerationError):
    pass
