from __future__ import annotations

import sys
from pathlib import Path
from typing import Optional

import typer

from git_credential_github_app import __version__
from git_credential_github_app.helper import console, run

app = typer.Typer(
    add_completion=False,
    help="Git credential helper that authenticates as a GitHub App installation.",
)


def _version_callback(value: bool) -> None:
    if value:
        console.print(f"version {__version__}", highlight=False)
        raise typer.Exit()


@app.command()
def main(
    operation: Optional[str] = typer.Argument(
        None,
        metavar="get|store|erase|generate",
        help="Credential helper operation, or generate to print git config for every installation",
    ),
    config: Optional[Path] = typer.Option(None, "--config", help="YAML file with default option values"),
    username: Optional[str] = typer.Option(
        None, "--username", help="Git credential username, e.g. the GitHub App name"
    ),
    app_id: Optional[str] = typer.Option(None, "--app-id", help="GitHub App ID"),
    client_id: Optional[str] = typer.Option(
        None, "--client-id", help="GitHub App Client ID, used instead of --app-id"
    ),
    private_key_file: Optional[str] = typer.Option(
        None, "--private-key-file", help="Path to the GitHub App private key (.pem)"
    ),
    installation_id: Optional[str] = typer.Option(None, "--installation-id", help="Installation ID"),
    repository: Optional[str] = typer.Option(
        None, "--repository", help="Repository in owner/repo form whose installation is used"
    ),
    owner: Optional[str] = typer.Option(None, "--owner", help="Repository owner, used with --repo"),
    repo: Optional[str] = typer.Option(None, "--repo", help="Repository name, used with --owner"),
    organization: Optional[str] = typer.Option(
        None, "--organization", help="Organization whose installation is used"
    ),
    user: Optional[str] = typer.Option(None, "--user", help="User whose installation is used"),
    domain: Optional[str] = typer.Option(None, "--domain", help="GitHub Enterprise Server domain"),
    verbose: bool = typer.Option(False, "--verbose", help="Print progress details to stderr"),
    version: bool = typer.Option(
        False,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Print the version and exit",
    ),
) -> None:
    """Issue GitHub App installation tokens for git over HTTPS."""
    settings = {
        "username": username,
        "app_id": app_id,
        "client_id": client_id,
        "private_key_file": private_key_file,
        "installation_id": installation_id,
        "repository": repository,
        "owner": owner,
        "repo": repo,
        "organization": organization,
        "user": user,
        "domain": domain,
        "verbose": verbose or None,
    }
    code = run(operation, settings, stdout=sys.stdout, config_file=config)
    raise typer.Exit(code=code)
