from __future__ import annotations

import shlex
from typing import Iterable

from git_credential_github_app.config.models import HelperConfig
from git_credential_github_app.github.models import Installation

# git runs "git credential-<name>", which resolves to this tool's console script.
HELPER_NAME = "github-app"
CACHE_TIMEOUT_SECONDS = 12 * 60 * 60


def _quote_value(value: str) -> str:
    escaped = value.replace("\\", "\\\\").replace('"', '\\"')
    return f'"{escaped}"'


def helper_command(config: HelperConfig, installation_id: int) -> str:
    args = [HELPER_NAME, "--username", config.username]
    if config.client_id is not None:
        args += ["--client-id", config.client_id]
    else:
        args += ["--app-id", str(config.app_id)]
    args += [
        "--private-key-file",
        str(config.private_key_file),
        "--installation-id",
        str(installation_id),
    ]
    if config.endpoints.is_enterprise:
        args += ["--domain", config.endpoints.domain]
    return shlex.join(args)


def render_git_config(installations: Iterable[Installation], config: HelperConfig) -> str:
    """Render git config routing each installation's account to a scoped helper.

    The output ends with a credential cache stanza and an SSH to HTTPS rewrite
    so repositories cloned over SSH also authenticate as the App.
    """
    domain = config.endpoints.domain
    lines: list[str] = []
    for installation in installations:
        account_url = installation.account.html_url if installation.account else None
        if not account_url:
            # Without an account URL there is nothing to scope the helper to.
            continue
        lines.append(f"[credential {_quote_value(account_url)}]")
        lines.append("\tuseHttpPath = true")
        lines.append(f"\thelper = {_quote_value(helper_command(config, installation.id))}")
    lines.append(f"[credential {_quote_value(f'https://{domain}')}]")
    lines.append(f"\thelper = {_quote_value(f'cache --timeout={CACHE_TIMEOUT_SECONDS}')}")
    lines.append(f"[url {_quote_value(f'https://{domain}/')}]")
    lines.append(f"\tinsteadOf = ssh://git@{domain}/")
    lines.append(f"\tinsteadOf = git@{domain}:")
    return "\n".join(lines) + "\n"
