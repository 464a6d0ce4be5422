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

"""Alias listing parsing."""

from __future__ import annotations

from dataclasses import dataclass, field
import logging
import re
from typing import Iterable, Iterator, List, Optional

logger = logging.getLogger(__name__)

QUOTE_CHARS = ("'", '"')

# bash prints `alias name='value'`, zsh prints `name='value'`.
ALIAS_KEYWORD_REGEX = re.compile(r"^alias\s+")


@dataclass(slots=True, frozen=True)
class AliasEntry:
    """A single alias: its name and the unquoted expansion."""

    name: str
    expansion: str

    @property
    def head_command(self) -> str:
        parts = self.expansion.split(None, 1)
        return parts[0] if parts else ""


@dataclass(slots=True)
class AliasTable:
    """Aliases in input order, plus the raw lines that could not be parsed."""

    entries: List[AliasEntry] = field(default_factory=list)
    unparsable: List[str] = field(default_factory=list)

    def __iter__(self) -> Iterator[AliasEntry]:
        return iter(self.entries)

    def __len__(self) -> int:
        return len(self.entries)

    def names(self) -> List[str]:
        return [entry.name for entry in self.entries]

    def name_width(self) -> int:
        return max((len(entry.name) for entry in self.entries), default=0)


def parse_lines(lines: Iterable[str]) -> AliasTable:
    """Parse an alias listing into an :class:`AliasTable`.

    Blank lines are skipped. Lines that are not ``name=value`` pairs are kept
    aside in ``AliasTable.unparsable`` rather than raising.
    """
    table = AliasTable()

    for idx, raw_line in enumerate(lines, start=1):
        line = raw_line.strip()
        if not line:
            continue

        entry = parse_line(line)
        if entry is None:
            logger.debug("Skipping unparsable alias line %d: %r", idx, line)
            table.unparsable.append(line)
            continue

        table.entries.append(entry)

    return table


def parse_line(line: str) -> Optional[AliasEntry]:
    """Parse one ``name=value`` line, returning ``None`` when it has no name."""
    line = ALIAS_KEYWORD_REGEX.sub("", line.strip(), count=1)

    split_at = _find_separator(line)
    if split_at is None:
        return None

    name = line[:split_at]
    if not name:
        return None

    return AliasEntry(name=name, expansion=unquote(line[split_at + 1 :]))


def unquote(raw: str) -> str:
    """Remove one layer of shell quoting from an alias value.

    Only ``\\'`` inside single quotes (or ``\\"`` inside double quotes) is
    unescaped; any other backslash is kept as written. An unterminated quote
    is tolerated: the opening quote is dropped and the rest is used as is.
    """
    if not raw or raw[0] not in QUOTE_CHARS:
        return raw

    quote = raw[0]
    if _is_closed(raw, quote):
        body = raw[1:-1]
    else:
        logger.debug("Unterminated %s quote in alias value %r", quote, raw)
        body = raw[1:]

    return _unescape(body, quote)


def _find_separator(line: str) -> Optional[int]:
    for idx, char in enumerate(line):
        if char == "=" and (idx == 0 or line[idx - 1] != "\\"):
            return idx
    return None


def _is_closed(raw: str, quote: str) -> bool:
    if len(raw) < 2 or raw[-1] != quote:
        return False
    # A trailing \' is an escaped quote, not the closing one, so
    # 'abc\' is unterminated and renders as abc' rather than abc\.
    return len(raw) == 2 or raw[-2] != "\\"


def _unescape(body: str, quote: str) -> str:
    return body.replace(f"\\{quote}", quote)
