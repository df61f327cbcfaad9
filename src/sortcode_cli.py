#!/usr/bin/env python3
#-*- coding: utf-8 -*-
#
# Sortable Section Encoding
# Copyright (C) 2025 [Your Name/Institution]
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.
#
# You should have received a copy of the GNU General Public License
# along with this program.  If not, see <https://www.gnu.org/licenses/>.
#
# Filename: src/sortcode_cli.py

"""
Command-line front end for the sortable section encoding (`sortcode`).

Subcommands:

-   `encode VALUE [VALUE ...]`: Encodes each VALUE as one section and prints
    the combined string.
-   `decode TEXT --count M`: Decodes M sections and prints one per line.
-   `check TEXT --count M`: Exits 0 if TEXT is in canonical form, 1 otherwise.
-   `canonicalize TEXT --count M`: Prints the canonical form of TEXT.

Values are read and printed in the format given by `--format`:
    hex   hexadecimal bytes, e.g. `ff00ff` (default)
    text  UTF-8 text
    int   non-negative decimal integers

Results on stdout are plain text; only errors and log messages on stderr
are coloured.

Defaults for `--format`, `--strict` and the log level come from the
`[CLI]` and `[Codec]` sections of config.ini.

Examples:
    sortcode encode 01 02 03           -> 123
    sortcode decode zzggzf --count 1   -> ff00ff
    sortcode --format int encode 16 255
"""

import argparse
import logging
import sys

from colorama import Fore, Style, init

from codec_errors import SortableCodecError
from config_loader import APP_CONFIG, get_config_value
from id_encoder import int_to_section, section_to_int
from sequence_codec import canonicalize, decode, encode, is_canonical

init(strip=False)

logger = logging.getLogger(__name__)

FORMATS = ("hex", "text", "int")


class CustomFormatter(logging.Formatter):
    """Custom formatter to add colors to log levels."""
    log_format = "%(levelname)s: %(message)s"
    FORMATS = {
        logging.WARNING: Fore.YELLOW + log_format + Style.RESET_ALL,
        logging.ERROR: Fore.RED + log_format + Style.RESET_ALL,
        logging.CRITICAL: Fore.RED + log_format + Style.RESET_ALL,
    }

    def format(self, record):
        log_fmt = self.FORMATS.get(record.levelno, self.log_format)
        return logging.Formatter(log_fmt).format(record)


class StderrLoggingHandler(logging.Handler):
    """A logging handler that writes to whatever sys.stderr is at emit time."""
    def emit(self, record):
        try:
            print(self.format(record), file=sys.stderr)
        except Exception:
            self.handleError(record)


def setup_logging(level_name: str):
    """Attaches a single colored stderr handler to the root logger."""
    root = logging.getLogger()
    if not any(isinstance(h, StderrLoggingHandler) for h in root.handlers):
        handler = StderrLoggingHandler()
        handler.setFormatter(CustomFormatter())
        root.addHandler(handler)
    level = logging.getLevelName(str(level_name).upper())
    root.setLevel(level if isinstance(level, int) else logging.WARNING)


def parse_value(value: str, value_format: str) -> bytes:
    """Converts one command-line VALUE into section bytes."""
    if value_format == "hex":
        return bytes.fromhex(value)
    if value_format == "text":
        return value.encode("utf-8")
    try:
        num = int(value, 10)
    except ValueError:
        raise ValueError(f"'{value}' is not a decimal integer.") from None
    return int_to_section(num)


def format_section(section: bytes, value_format: str) -> str:
    """Renders one decoded section for printing."""
    if value_format == "hex":
        return section.hex()
    if value_format == "text":
        return section.decode("utf-8", errors="backslashreplace")
    return str(section_to_int(section))


def build_parser(config=None) -> argparse.ArgumentParser:
    if config is None:
        config = APP_CONFIG
    default_format = get_config_value(config, "CLI", "input_format", fallback="hex")
    if default_format not in FORMATS:
        logger.warning(f"Ignoring unknown [CLI] input_format '{default_format}'; using 'hex'.")
        default_format = "hex"
    default_strict = get_config_value(config, "Codec", "strict_decode", fallback=False, value_type=bool)

    parser = argparse.ArgumentParser(
        prog="sortcode",
        description="Encode byte sections into a sortable, typo-tolerant string and back.",
    )
    parser.add_argument("--format", choices=FORMATS, default=default_format,
                        help=f"How values are read and printed (default: {default_format}).")
    parser.add_argument("--log-level",
                        default=get_config_value(config, "CLI", "log_level", fallback="WARNING"),
                        help="Logging level (default from config.ini, else WARNING).")
    subparsers = parser.add_subparsers(dest="command", required=True)

    encode_parser = subparsers.add_parser("encode", help="Encode one or more sections.")
    encode_parser.add_argument("values", nargs="+", help="One value per section.")

    def add_text_args(sub, with_strict=True):
        sub.add_argument("text", help="The encoded string.")
        sub.add_argument("-m", "--count", type=int, required=True, help="Number of sections in TEXT.")
        if with_strict:
            sub.add_argument("--strict", action=argparse.BooleanOptionalAction, default=default_strict,
                             help="Reject non-canonical input.")

    add_text_args(subparsers.add_parser("decode", help="Decode sections from a string."))
    add_text_args(subparsers.add_parser("check", help="Exit 0 if the string is canonical."), with_strict=False)
    add_text_args(subparsers.add_parser("canonicalize", help="Print the canonical form of a string."))
    return parser


def run_command(args) -> int:
    if args.command == "encode":
        sections = [parse_value(value, args.format) for value in args.values]
        print(encode(sections))
        logger.info(f"Encoded {len(sections)} section(s).")
        return 0

    if args.command == "decode":
        for section in decode(args.text, args.count, strict=args.strict):
            print(format_section(section, args.format))
        return 0

    if args.command == "check":
        if is_canonical(args.text, args.count):
            print("canonical")
            return 0
        print("not canonical")
        return 1

    print(canonicalize(args.text, args.count, strict=args.strict))
    return 0


def main(argv=None) -> int:
    """Entry point for the `sortcode` console script."""
    parser = build_parser()
    args = parser.parse_args(argv)
    setup_logging(args.log_level)

    try:
        return run_command(args)
    except ValueError as e:
        # SortableCodecError, a bad VALUE argument, or a negative --count
        if not isinstance(e, SortableCodecError):
            logger.debug(f"Rejected input for '{args.command}': {e}")
        print(f"{Fore.RED}ERROR: {e}{Style.RESET_ALL}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())

# === End of src/sortcode_cli.py ===
