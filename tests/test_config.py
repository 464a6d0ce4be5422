# Copyright (C) 2025 Heston Hamilton

from __future__ import annotations

import pytest

from format_aliases.config import Config, ConfigError


def test_default_config() -> None:
    config = Config.load(env={})
    assert config.color_mode == "auto"
    assert config.no_color is False
    assert config.separator == "  "
    assert config.group is False


def test_auto_color_follows_tty() -> None:
    config = Config.load(env={})
    assert config.use_color(isatty=True) is True
    assert config.use_color(isatty=False) is False


def test_no_color_env_disables_color() -> None:
    config = Config.load(env={"NO_COLOR": "1"})
    assert config.no_color is True
    assert config.use_color(isatty=True) is False


def test_empty_no_color_is_ignored() -> None:
    config = Config.load(env={"NO_COLOR": ""})
    assert config.use_color(isatty=True) is True


def test_env_override() -> None:
    config = Config.load(
        env={
            "FORMAT_ALIASES_COLOR": "ALWAYS",
            "FORMAT_ALIASES_SEPARATOR": " => ",
            "FORMAT_ALIASES_GROUP": "yes",
        }
    )
    assert config.color_mode == "always"
    assert config.separator == " => "
    assert config.group is True
    assert config.use_color(isatty=False) is True


def test_os_environ_used_by_default(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("NO_COLOR", "true")
    monkeypatch.setenv("FORMAT_ALIASES_GROUP", "0")
    config = Config.load()
    assert config.no_color is True
    assert config.group is False


def test_invalid_color_mode_env_raises() -> None:
    with pytest.raises(ConfigError, match="Color mode must be one of"):
        Config.load(env={"FORMAT_ALIASES_COLOR": "sometimes"})


def test_cli_overrides_precedence() -> None:
    config = Config.load(
        env={"FORMAT_ALIASES_SEPARATOR": " => ", "FORMAT_ALIASES_COLOR": "never"},
        cli_overrides={"separator": " : ", "color_mode": "auto"},
    )
    assert config.separator == " : "
    assert config.color_mode == "auto"


def test_explicit_cli_color_beats_no_color() -> None:
    config = Config.load(env={"NO_COLOR": "1"}, cli_overrides={"color_mode": "always"})
    assert config.use_color(isatty=False) is True

    config = Config.load(env={"NO_COLOR": "1"}, cli_overrides={"separator": "|"})
    assert config.use_color(isatty=True) is False


def test_never_disables_color_on_tty() -> None:
    config = Config(color_mode="never")
    assert config.use_color(isatty=True) is False


def test_env_always_does_not_override_no_color() -> None:
    config = Config.load(env={"NO_COLOR": "1", "FORMAT_ALIASES_COLOR": "always"})
    assert config.use_color(isatty=True) is False
    assert config.use_color(isatty=False) is False
