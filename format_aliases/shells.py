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

"""Shell init snippets that wrap the ``alias`` builtin."""

from __future__ import annotations

from typing import Dict, Tuple

from .errors import InvalidShellNameError

PROGRAM_NAME = "format-aliases"

_BASH_INIT = """\
# format-aliases init (bash): eval "$(format-aliases init bash)"
alias() {
    if [ $# -eq 0 ]; then
        builtin alias | format-aliases
    else
        builtin alias "$@"
    fi
}
"""

_ZSH_INIT = """\
# format-aliases init (zsh): eval "$(format-aliases init zsh)"
alias() {
    if (( $# == 0 )); then
        builtin alias | format-aliases
    else
        builtin alias "$@"
    fi
}
"""

# POSIX sh has no `builtin`; `command` skips function lookup instead.
_SH_INIT = """\
# format-aliases init (sh): eval "$(format-aliases init sh)"
alias() {
    if [ $# -eq 0 ]; then
        command alias | format-aliases
    else
        command alias "$@"
    fi
}
"""

INIT_SCRIPTS: Dict[str, str] = {
    "bash": _BASH_INIT,
    "zsh": _ZSH_INIT,
    "sh": _SH_INIT,
}

SUPPORTED_SHELLS: Tuple[str, ...] = tuple(INIT_SCRIPTS)


def init_script(shell: str) -> str:
    """Return the init snippet for ``shell``."""
    try:
        return INIT_SCRIPTS[shell]
    except KeyError:
        supported = ", ".join(SUPPORTED_SHELLS)
        raise InvalidShellNameError(f"Unsupported shell {shell!r} (expected one of: {supported})") from None
