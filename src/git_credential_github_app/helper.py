from __future__ import annotations

from pathlib import Path
from typing import Any, Mapping, TextIO

import httpx
from rich.console import Console
from rich.markup import escape

from git_credential_github_app.auth import AppIdentity, load_private_key, sign_app_jwt
from git_credential_github_app.config import (
    HelperConfig,
    build_config,
    load_config_file,
    merge_settings,
)
from git_credential_github_app.credential import (
    QUIT_SENTINEL,
    Operation,
    format_get_output,
    render_git_config,
)
from git_credential_github_app.errors import (
    ConfigurationError,
    EnumerationError,
    ExchangeError,
    HelperError,
    PrivateKeyError,
    ResolutionError,
    SigningError,
)
from git_credential_github_app.github import (
    GitHubAppClient,
    create_installation_token,
    list_installations,
    resolve_installation,
)
from git_credential_github_app.util.redaction import redact_text

console = Console(stderr=True)

USAGE = "\n".join(
    [
        "Git Credential Helper for GitHub Apps",
        "Usage:",
        "  git-credential-github-app --username USERNAME (--app-id ID | --client-id ID)"
        " --private-key-file PATH",
        "      (--installation-id ID | --repository OWNER/REPO | --owner OWNER --repo REPO"
        " | --organization ORG | --user USER)",
        "      [--domain GHE_DOMAIN] get|store|erase",
        "  git-credential-github-app --username USERNAME (--app-id ID | --client-id ID)"
        " --private-key-file PATH [--domain GHE_DOMAIN] generate",
        "Options may also be read from a YAML file given with --config.",
    ]
)


def print_usage() -> None:
    console.print(USAGE, markup=False, highlight=False)


def _report(message: str, exc: BaseException) -> None:
    console.print(f"[red]{message}:[/red] {escape(redact_text(str(exc)))}")


def _debug(config: HelperConfig, message: str) -> None:
    if config.verbose:
        console.print(f"[dim]{escape(message)}[/dim]")


def _failure_message(exc: HelperError) -> str:
    if isinstance(exc, PrivateKeyError):
        return "Could not load GitHub App private key"
    if isinstance(exc, SigningError):
        return "Could not sign GitHub App JWT"
    if isinstance(exc, ResolutionError):
        return "Could not resolve GitHub App installation"
    if isinstance(exc, ExchangeError):
        return "Could not create GitHub App installation access token"
    if isinstance(exc, EnumerationError):
        return "Could not retrieve GitHub App installations"
    return "GitHub App authentication failed"


def app_identity(config: HelperConfig) -> AppIdentity:
    key = load_private_key(config.private_key_file)
    return AppIdentity(issuer=config.issuer, private_key=key, endpoints=config.endpoints)


def credential_get(
    config: HelperConfig,
    stdout: TextIO,
    transport: httpx.BaseTransport | None = None,
) -> None:
    selector = config.selector()
    identity = app_identity(config)
    app_jwt = sign_app_jwt(identity)
    _debug(config, f"Signed App JWT for issuer {identity.issuer}, valid until {app_jwt.expires_at.isoformat()}")
    with GitHubAppClient(app_jwt, identity.endpoints, transport=transport) as client:
        installation_id = resolve_installation(selector, client)
        _debug(config, f"Using installation {installation_id} for {selector.describe()}")
        token = create_installation_token(client, installation_id)
    _debug(config, f"Installation access token expires at {token.expires_at.isoformat()}")
    # A single write keeps git from ever reading a partial credential.
    stdout.write(format_get_output(config.username, token))
    stdout.flush()


def generate_config(
    config: HelperConfig,
    stdout: TextIO,
    transport: httpx.BaseTransport | None = None,
) -> None:
    identity = app_identity(config)
    app_jwt = sign_app_jwt(identity)
    with GitHubAppClient(app_jwt, identity.endpoints, transport=transport) as client:
        installations = list_installations(client)
    _debug(config, f"Discovered {len(installations)} installation(s) on {identity.endpoints.domain}")
    stdout.write(render_git_config(installations, config))
    stdout.flush()


def run(
    operation: str | None,
    settings: Mapping[str, Any],
    *,
    stdout: TextIO,
    config_file: Path | None = None,
    transport: httpx.BaseTransport | None = None,
) -> int:
    """Dispatch one helper invocation and return the process exit code.

    ``store`` and ``erase`` succeed before any configuration is read. On a
    failed ``get`` the ``quit=1`` sentinel goes to stdout ahead of the
    diagnostic so git stops asking this helper for the current operation.
    """
    parsed = Operation.parse(operation) if operation is not None else None
    if parsed is None:
        if operation is not None:
            console.print(f"[red]Unknown operation:[/red] {escape(operation)}")
        print_usage()
        return 1
    if parsed in (Operation.STORE, Operation.ERASE):
        return 0

    try:
        file_settings = load_config_file(config_file) if config_file is not None else None
        config = build_config(merge_settings(file_settings, settings))
    except ConfigurationError as exc:
        _report("Invalid configuration", exc)
        return 1

    if parsed is Operation.GET:
        try:
            credential_get(config, stdout, transport=transport)
        except HelperError as exc:
            stdout.write(QUIT_SENTINEL)
            stdout.flush()
            _report(_failure_message(exc), exc)
            return 1
        return 0

    try:
        generate_config(config, stdout, transport=transport)
    except HelperError as exc:
        _report(_failure_message(exc), exc)
        return 1
    return 0
