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

"""Command-line entry point for format-aliases."""

from __future__ import annotations

import argparse
import logging
import os
import sys
from typing import Any, Dict, List, Optional, TextIO

from . import __version__
from .aliases import parse_lines
from .config import COLOR_MODES, Config, ConfigError
from .errors import FormatAliasesError, InputReadError
from .formatter import format_table, format_unparsable
from .shells import PROGRAM_NAME, SUPPORTED_SHELLS, init_script

logger = logging.getLogger(__name__)


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog=PROGRAM_NAME,
        description="Format the output of the shell `alias` builtin as an aligned cheatsheet.",
    )
    parser.add_argument(
        "--color",
        choices=COLOR_MODES,
        dest="color_mode",
        help="Colorize alias names (default: auto, honouring NO_COLOR).",
    )
    parser.add_argument("--separator", help="Text placed between the name column and the expansion.")
    parser.add_argument(
        "--group",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="Group aliases by the command they expand to.",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Enable verbose logging.",
    )

    subparsers = parser.add_subparsers(dest="command", metavar="COMMAND")
    subparsers.add_parser("format", help="Read an alias listing on stdin and print it formatted (default).")
    init_parser = subparsers.add_parser("init", help="Print the shell snippet that wraps the alias builtin.")
    init_parser.add_argument("shell", help=f"Target shell ({', '.join(SUPPORTED_SHELLS)}).")

    return parser.parse_args(argv)


def build_cli_overrides(args: argparse.Namespace) -> Dict[str, Any]:
    overrides: Dict[str, Any] = {}

    if args.color_mode:
        overrides["color_mode"] = args.color_mode
    if args.separator is not None:
        overrides["separator"] = args.separator
    if args.group is not None:
        overrides["group"] = bool(args.group)

    return overrides


def configure_logging(verbose: bool) -> None:
    level = logging.DEBUG if verbose else logging.WARNING
    logging.basicConfig(level=level, format="%(asctime)s %(levelname)s %(name)s: %(message)s")


def read_input(stream: TextIO) -> List[str]:
    try:
        return stream.readlines()
    except (OSError, UnicodeDecodeError) as exc:
        raise InputReadError(f"Failed to read alias listing: {exc}") from exc


def format_aliases(config: Config, stdin: TextIO, stdout: TextIO, stderr: TextIO) -> int:
    """Read aliases from ``stdin`` and write the formatted table to ``stdout``."""
    table = parse_lines(read_input(stdin))
    logger.debug("Parsed %d aliases (%d unparsable lines)", len(table), len(table.unparsable))

    lines = format_table(
        table,
        color=config.use_color(_isatty(stdout)),
        separator=config.separator,
        group=config.group,
    )
    if lines:
        stdout.write("\n".join(lines) + "\n")
        stdout.flush()

    rejected = format_unparsable(table.unparsable, color=config.use_color(_isatty(stderr)))
    if rejected:
        stderr.write("\n".join(rejected) + "\n")

    return 0


def _isatty(stream: TextIO) -> bool:
    isatty = getattr(stream, "isatty", None)
    return bool(isatty and isatty())


def _silence_stdout() -> None:
    # Point stdout at devnull so the interpreter's final flush does not fail again.
    try:
        fd = sys.stdout.fileno()
        os.dup2(os.open(os.devnull, os.O_WRONLY), fd)
    except (OSError, ValueError):
        logger.debug("Could not redirect stdout after broken pipe")


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    configure_logging(args.verbose)

    try:
        if args.command == "init":
            sys.stdout.write(init_script(args.shell))
            return 0

        config = Config.load(cli_overrides=build_cli_overrides(args))
        return format_aliases(config, sys.stdin, sys.stdout, sys.stderr)
    except (FormatAliasesError, ConfigError) as exc:
        print(f"{PROGRAM_NAME}: {exc}", file=sys.stderr)
        return 1
    except BrokenPipeError:
        # The reader went away (e.g. `| head`); output already written stands.
        _silence_stdout()
        return 1


if __name__ == "__main__":
    sys.exit(main())
