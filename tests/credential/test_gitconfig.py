from __future__ import annotations

import shlex
from pathlib import Path

from git_credential_github_app.config import HelperConfig
from git_credential_github_app.credential import helper_command, render_git_config
from git_credential_github_app.github import Installation


def _installation(installation_id: int, login: str, host: str = "github.com") -> Installation:
    return Installation.model_validate(
        {
            "id": installation_id,
            "account": {"login": login, "html_url": f"https://{host}/{login}", "type": "Organization"},
        }
    )


def test_renders_stanza_per_installation_then_cache_and_rewrite() -> None:
    config = HelperConfig(username="my-app", app_id=12345, private_key_file=Path("/keys/app.pem"))

    rendered = render_git_config([_installation(2, "zeta"), _installation(1, "alpha")], config)

    assert rendered == (
        '[credential "https://github.com/zeta"]\n'
        "\tuseHttpPath = true\n"
        '\thelper = "github-app --username my-app --app-id 12345 '
        '--private-key-file /keys/app.pem --installation-id 2"\n'
        '[credential "https://github.com/alpha"]\n'
        "\tuseHttpPath = true\n"
        '\thelper = "github-app --username my-app --app-id 12345 '
        '--private-key-file /keys/app.pem --installation-id 1"\n'
        '[credential "https://github.com"]\n'
        '\thelper = "cache --timeout=43200"\n'
        '[url "https://github.com/"]\n'
        "\tinsteadOf = ssh://git@github.com/\n"
        "\tinsteadOf = git@github.com:\n"
    )


def test_no_installations_still_emits_shared_stanzas() -> None:
    config = HelperConfig(username="my-app", app_id=1, private_key_file=Path("/keys/app.pem"))

    rendered = render_git_config([], config)

    assert rendered.startswith('[credential "https://github.com"]\n')
    assert rendered.count("[credential") == 1


def test_enterprise_helper_carries_domain_and_client_id() -> None:
    config = HelperConfig(
        username="my-app",
        client_id="Iv1.abc",
        private_key_file=Path("/keys/app.pem"),
        domain="ghe.example.com",
    )

    rendered = render_git_config([_installation(3, "acme", host="ghe.example.com")], config)

    assert '[credential "https://ghe.example.com/acme"]' in rendered
    assert "--client-id Iv1.abc" in rendered
    assert "--app-id" not in rendered
    assert "--domain ghe.example.com" in rendered
    assert '[credential "https://ghe.example.com"]' in rendered
    assert "\tinsteadOf = ssh://git@ghe.example.com/\n" in rendered


def test_helper_command_quotes_for_shell_and_git_config() -> None:
    config = HelperConfig(
        username='bot "quoted"',
        app_id=1,
        private_key_file=Path("/keys/my keys/app.pem"),
    )

    command = helper_command(config, 9)
    assert shlex.split(command) == [
        "github-app",
        "--username",
        'bot "quoted"',
        "--app-id",
        "1",
        "--private-key-file",
        "/keys/my keys/app.pem",
        "--installation-id",
        "9",
    ]

    rendered = render_git_config([_installation(9, "acme")], config)
    helper_line = next(line for line in rendered.splitlines() if line.startswith("\thelper = \"github-app"))
    assert '\\"quoted\\"' in helper_line
    assert "'/keys/my keys/app.pem'" in helper_line


def test_installations_without_account_url_are_skipped() -> None:
    config = HelperConfig(username="my-app", app_id=1, private_key_file=Path("/keys/app.pem"))
    installations = [
        Installation.model_validate({"id": 4, "account": None}),
        Installation.model_validate({"id": 5, "account": {"slug": "bigco"}}),
        Installation.model_validate(
            {"id": 6, "account": {"slug": "bigco", "html_url": "https://github.com/enterprises/bigco"}}
        ),
    ]

    rendered = render_git_config(installations, config)

    assert rendered.count("useHttpPath") == 1
    assert '[credential "https://github.com/enterprises/bigco"]' in rendered
    assert "--installation-id 6" in rendered
    assert "--installation-id 4" not in rendered
    assert "--installation-id 5" not in rendered
