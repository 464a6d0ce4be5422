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

"""Column-aligned rendering of alias tables."""

from __future__ import annotations

from typing import Dict, Iterable, List

from .aliases import AliasEntry, AliasTable
from .colors import HEADER_COLOR, NAME_COLOR, UNPARSABLE_COLOR, colorize

DEFAULT_SEPARATOR = "  "
GENERAL_SECTION = "general"
UNPARSABLE_SECTION = "unparsable"
SECTION_INDENT = "  "


def format_table(
    table: AliasTable,
    *,
    color: bool,
    separator: str = DEFAULT_SEPARATOR,
    group: bool = False,
) -> List[str]:
    """Render ``table`` as display lines, one per alias.

    Names are padded to the width of the longest name so expansions line up.
    With ``group`` set, aliases sharing a head command are listed under a
    ``[command]`` header and the remainder under ``[general]``.
    """
    if not table.entries:
        return []

    width = table.name_width()
    if not group:
        return [_format_entry(entry, width, color=color, separator=separator) for entry in table]

    lines: List[str] = []
    sections = _group_by_command(table.entries)
    general: List[AliasEntry] = []
    for command, entries in sections.items():
        if len(entries) == 1:
            general.extend(entries)
            continue
        lines.extend(_format_section(command, entries, width, color=color, separator=separator))

    if general:
        lines.extend(_format_section(GENERAL_SECTION, general, width, color=color, separator=separator))

    # Sections are separated by a blank line; no trailing one.
    return lines[:-1]


def format_unparsable(lines: Iterable[str], *, color: bool) -> List[str]:
    rejected = list(lines)
    if not rejected:
        return []
    header = _format_header(UNPARSABLE_SECTION, UNPARSABLE_COLOR if color else None)
    return [header] + [f"{SECTION_INDENT}{line}" for line in rejected]


def _format_entry(entry: AliasEntry, width: int, *, color: bool, separator: str) -> str:
    name = colorize(entry.name, NAME_COLOR if color else None)
    padding = " " * (width - len(entry.name))
    return f"{name}{padding}{separator}{entry.expansion}"


def _format_header(title: str, color: str | None) -> str:
    return f"[{colorize(title, color)}]"


def _format_section(
    title: str,
    entries: List[AliasEntry],
    width: int,
    *,
    color: bool,
    separator: str,
) -> List[str]:
    lines = [_format_header(title, HEADER_COLOR if color else None)]
    for entry in entries:
        lines.append(SECTION_INDENT + _format_entry(entry, width, color=color, separator=separator))
    lines.append("")
    return lines


def _group_by_command(entries: Iterable[AliasEntry]) -> Dict[str, List[AliasEntry]]:
    sections: Dict[str, List[AliasEntry]] = {}
    for entry in entries:
        sections.setdefault(entry.head_command, []).append(entry)
    return sections
