from __future__ import annotations

from pathlib import Path
from typing import Any, Mapping

import yaml
from pydantic import ValidationError

from git_credential_github_app.errors import ConfigurationError

from .models import HelperConfig


def load_config_file(path: Path) -> dict[str, Any]:
    """Read helper settings from a YAML mapping.

    A relative ``private_key_file`` is resolved against the file's directory.
    """
    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8"))
    except yaml.YAMLError as exc:
        raise ConfigurationError(f"Invalid YAML in {path}") from exc
    except OSError as exc:
        raise ConfigurationError(f"Unable to read {path}") from exc

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigurationError(f"Expected a YAML mapping in {path}")

    key_file = data.get("private_key_file")
    if isinstance(key_file, str):
        try:
            key_path = Path(key_file).expanduser()
        except RuntimeError as exc:
            raise ConfigurationError(f"Cannot expand private_key_file {key_file} in {path}: {exc}") from exc
        if not key_path.is_absolute():
            data["private_key_file"] = str((path.parent / key_path).resolve())
    return data


def _format_validation_error(exc: ValidationError) -> str:
    problems = []
    for error in exc.errors():
        location = ".".join(str(part) for part in error.get("loc", ()))
        message = error.get("msg", "invalid value")
        problems.append(f"{location}: {message}" if location else message)
    return "Invalid configuration: " + "; ".join(problems)


def build_config(settings: Mapping[str, Any]) -> HelperConfig:
    try:
        return HelperConfig.model_validate(dict(settings))
    except ValidationError as exc:
        raise ConfigurationError(_format_validation_error(exc)) from exc


def merge_settings(*layers: Mapping[str, Any] | None) -> dict[str, Any]:
    """Merge setting layers left to right, skipping unset (None) values."""
    merged: dict[str, Any] = {}
    for layer in layers:
        if not layer:
            continue
        for key, value in layer.items():
            if value is not None:
                merged[key] = value
    return merged
