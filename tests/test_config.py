from __future__ import annotations

from pathlib import Path

import pytest

from completionls.config import (
    CONFIG_FILE_NAME,
    CompletionConfig,
    find_config_file,
    load_config,
)
from completionls.exceptions import ConfigError


def test_defaults():
    config = load_config()

    assert config == CompletionConfig()
    assert config.snippets is True
    assert config.provide_text_edit is False
    assert config.default_language_id == "php"
    assert config.limit is None


def test_file_settings(tmp_path: Path):
    (tmp_path / CONFIG_FILE_NAME).write_text(
        "completion:\n"
        "  text_edit: true\n"
        "  trim_leading_dollar: true\n"
        "  limit: 50\n"
    )

    config = load_config(tmp_path)

    assert config.provide_text_edit is True
    assert config.trim_leading_dollar is True
    assert config.limit == 50
    assert config.source == tmp_path / CONFIG_FILE_NAME


def test_initialization_options_override_file(tmp_path: Path):
    (tmp_path / CONFIG_FILE_NAME).write_text("completion:\n  snippets: true\n  limit: 50\n")

    config = load_config(tmp_path, {"completion": {"snippets": False}})

    assert config.snippets is False
    assert config.limit == 50


def test_config_file_found_in_parent(tmp_path: Path):
    (tmp_path / CONFIG_FILE_NAME).write_text("completion:\n  default_language: php\n")
    workspace = tmp_path / "project" / "src"
    workspace.mkdir(parents=True)

    assert find_config_file(workspace) == tmp_path / CONFIG_FILE_NAME


def test_no_config_file(tmp_path: Path):
    workspace = tmp_path / "project"
    workspace.mkdir()

    assert load_config(workspace) == CompletionConfig()


def test_empty_config_file(tmp_path: Path):
    (tmp_path / CONFIG_FILE_NAME).write_text("")

    assert load_config(tmp_path).snippets is True


def test_unknown_keys_are_ignored():
    config = load_config(None, {"completion": {"fuzzy": True}, "other": 1})

    assert config == CompletionConfig()


@pytest.mark.parametrize(
    "options",
    [
        {"completion": {"snippets": "yes"}},
        {"completion": {"limit": True}},
        {"completion": {"limit": -1}},
        {"completion": {"default_language": 5}},
        {"completion": ["snippets"]},
        ["completion"],
    ],
)
def test_invalid_options_raise(options):
    with pytest.raises(ConfigError):
        load_config(None, options)


def test_invalid_yaml_raises(tmp_path: Path):
    (tmp_path / CONFIG_FILE_NAME).write_text("completion: [unclosed\n")

    with pytest.raises(ConfigError):
        load_config(tmp_path)


def test_non_mapping_file_raises(tmp_path: Path):
    (tmp_path / CONFIG_FILE_NAME).write_text("- just\n- a list\n")

    with pytest.raises(ConfigError):
        load_config(tmp_path)
