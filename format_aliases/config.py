# Format Aliases - A cheatsheet formatter for shell aliases.
# Copyright (C) 2025 Heston Hamilton
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE. See the
# GNU General Public License for more details.
#
# You should have received a copy of the GNU General Public License
# along with this program. If not, see <https://www.gnu.org/licenses/>.

"""Runtime configuration for format-aliases."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Any, Dict, Mapping, Optional

from .formatter import DEFAULT_SEPARATOR

ENV_PREFIX = "FORMAT_ALIASES_"
NO_COLOR_ENV = "NO_COLOR"
COLOR_MODES = ("auto", "always", "never")


class ConfigError(Exception):
    """Raised when configuration cannot be loaded."""


@dataclass(slots=True)
class Config:
    """Settings resolved once at start-up and handed to the formatter."""

    color_mode: str = "auto"
    no_color: bool = False
    separator: str = DEFAULT_SEPARATOR
    group: bool = False

    @classmethod
    def load(
        cls,
        *,
        env: Optional[Mapping[str, str]] = None,
        cli_overrides: Optional[Mapping[str, Any]] = None,
    ) -> "Config":
        """Load configuration using precedence: CLI → env → defaults."""

        raw_config = _default_dict()
        environ = env if env is not None else os.environ

        raw_config.update(_load_from_env(environ))

        if cli_overrides:
            raw_config.update(cli_overrides)
            # An explicit --color on the command line beats NO_COLOR.
            if "color_mode" in cli_overrides:
                raw_config["no_color"] = False

        return _build_config(raw_config)

    def use_color(self, isatty: bool) -> bool:
        if self.color_mode == "never" or self.no_color:
            return False
        if self.color_mode == "always":
            return True
        return isatty


def _default_dict() -> Dict[str, Any]:
    return {
        "color_mode": "auto",
        "no_color": False,
        "separator": DEFAULT_SEPARATOR,
        "group": False,
    }


def _load_from_env(env: Mapping[str, str]) -> Dict[str, Any]:
    results: Dict[str, Any] = {}

    # https://no-color.org: any non-empty value disables color.
    if env.get(NO_COLOR_ENV):
        results["no_color"] = True

    for key, target in _env_key_map().items():
        if key not in env:
            continue
        results[target] = _parse_env_value(target, env[key])

    return results


def _env_key_map() -> Dict[str, str]:
    return {
        f"{ENV_PREFIX}COLOR": "color_mode",
        f"{ENV_PREFIX}SEPARATOR": "separator",
        f"{ENV_PREFIX}GROUP": "group",
    }


def _parse_env_value(target: str, raw: str) -> Any:
    if target == "group":
        return raw.lower() in {"1", "true", "yes", "on"}
    if target == "color_mode":
        return raw.lower()
    return raw


def _build_config(raw: Dict[str, Any]) -> Config:
    color_mode = str(raw.get("color_mode", "auto")).lower()
    if color_mode not in COLOR_MODES:
        raise ConfigError(f"Color mode must be one of {', '.join(COLOR_MODES)}, got {color_mode!r}")

    return Config(
        color_mode=color_mode,
        no_color=bool(raw.get("no_color", False)),
        separator=str(raw.get("separator", DEFAULT_SEPARATOR)),
        group=bool(raw.get("group", False)),
    )
