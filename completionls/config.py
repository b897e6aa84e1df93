"""
Server configuration.

Settings come from three places, later ones winning:

1. Defaults (CompletionConfig field defaults)
2. A `.completionls.yml` file in the workspace (or one of its parents)
3. The client's `initializationOptions`

Both the file and the options use the same shape:

    completion:
      snippets: true
      text_edit: false
      trim_leading_dollar: false
      limit: 100
      default_language: php
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Any

import yaml

from completionls.exceptions import ConfigError

CONFIG_FILE_NAME = ".completionls.yml"

# config key -> (CompletionConfig field, accepted types)
_COMPLETION_KEYS: dict[str, tuple[str, tuple[type, ...]]] = {
    "snippets": ("snippets", (bool,)),
    "text_edit": ("provide_text_edit", (bool,)),
    "trim_leading_dollar": ("trim_leading_dollar", (bool,)),
    "limit": ("limit", (int, type(None))),
    "default_language": ("default_language_id", (str,)),
}


@dataclass(frozen=True)
class CompletionConfig:
    """
    Attributes:
        snippets: Offer snippets, if the client supports them.
        provide_text_edit: Attach text edits built from suggestion ranges.
        trim_leading_dollar: Show variables without their leading "$".
        limit: Maximum suggestions per request, None for no cap.
        default_language_id: Language assumed when the client sends none.
        source: Where the file-based settings came from, if anywhere.
    """

    snippets: bool = True
    provide_text_edit: bool = False
    trim_leading_dollar: bool = False
    limit: int | None = None
    default_language_id: str = "php"
    source: Path | None = None

    def merge(self, settings: Mapping[str, Any] | None) -> CompletionConfig:
        """Return a copy with the `completion` section of settings applied."""
        if not settings:
            return self

        if not isinstance(settings, Mapping):
            raise ConfigError(f"Expected a mapping of settings, got {type(settings).__name__}")

        section = settings.get("completion") or {}
        if not isinstance(section, Mapping):
            raise ConfigError("'completion' settings must be a mapping")

        changes: dict[str, Any] = {}
        for key, value in section.items():
            if key not in _COMPLETION_KEYS:
                continue
            field_name, types = _COMPLETION_KEYS[key]
            # bool is an int subclass; "limit: true" is not a number.
            if not isinstance(value, types) or (bool not in types and isinstance(value, bool)):
                raise ConfigError(f"Invalid value for completion.{key}: {value!r}")
            if key == "limit" and value is not None and value < 0:
                raise ConfigError(f"completion.limit must not be negative, got {value}")
            changes[field_name] = value

        return replace(self, **changes)


def find_config_file(workspace_root: Path) -> Path | None:
    """
    Find the configuration file for a workspace.

    Checks the workspace root first, then each parent directory.
    """
    for directory in [workspace_root, *workspace_root.parents]:
        candidate = directory / CONFIG_FILE_NAME
        if candidate.is_file():
            return candidate
    return None


def load_config_file(path: Path) -> dict[str, Any]:
    try:
        with open(path, encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ConfigError(f"Error parsing {path}: {e}") from e
    except OSError as e:
        raise ConfigError(f"Error reading {path}: {e}") from e

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigError(f"{path} must contain a mapping at the top level")
    return data


def load_config(
    workspace_root: Path | None = None,
    initialization_options: Mapping[str, Any] | None = None,
) -> CompletionConfig:
    """
    Build the configuration for a workspace.

    Raises:
        ConfigError: The configuration file or the options are invalid.
    """
    config = CompletionConfig()

    if workspace_root is not None:
        path = find_config_file(workspace_root)
        if path is not None:
            config = replace(config.merge(load_config_file(path)), source=path)

    return config.merge(initialization_options)
