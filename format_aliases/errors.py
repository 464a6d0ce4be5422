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

"""Custom exceptions for format-aliases."""


class FormatAliasesError(RuntimeError):
    """Base class for format-aliases errors."""


class InvalidShellNameError(FormatAliasesError):
    """Raised when an init snippet is requested for an unsupported shell."""


class InputReadError(FormatAliasesError):
    """Raised when the alias listing cannot be read from the input stream."""
