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

"""ANSI color helpers."""

from __future__ import annotations

import re

RESET = "\x1b[0m"
GREEN = "\x1b[32m"
YELLOW = "\x1b[33m"
BRIGHT_BLACK = "\x1b[90m"

NAME_COLOR = GREEN
HEADER_COLOR = YELLOW
UNPARSABLE_COLOR = BRIGHT_BLACK

_ANSI_ESCAPE = re.compile(r"\x1b\[[0-9;]*m")


def colorize(text: str, color: str | None) -> str:
    """Wrap ``text`` in ``color`` followed by a reset, or return it unchanged."""
    if not color:
        return text
    return f"{color}{text}{RESET}"


def strip_ansi(text: str) -> str:
    return _ANSI_ESCAPE.sub("", text)
