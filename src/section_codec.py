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
# Filename: src/section_codec.py

"""
Encodes one byte section to its symbol run and decodes it back.

A section is read as a big-endian number. Its bytes are split into nybbles
(high first), leading zero nybbles are dropped, and every remaining nybble
becomes one symbol: continuation symbols for all but the last, and a terminal
symbol for the last. The terminal symbol is what lets a decoder find the end
of a section without any separator character.

Examples:
    encode_section(b"\\x10")         -> "h0"
    encode_section(b"\\xff\\x00\\xff") -> "zzggzf"
    encode_section(b"")             -> "0"
"""

import logging
from typing import Iterable, List, Tuple, Union

from codec_errors import NonCanonicalEncodingError, TruncatedInputError
from symbol_alphabet import continuation_symbol, decode_symbol, terminal_symbol

logger = logging.getLogger(__name__)

SectionLike = Union[bytes, bytearray, memoryview, Iterable[int]]


def as_section_bytes(section: SectionLike) -> bytes:
    """Normalizes a bytes-like object or iterable of byte values to `bytes`."""
    # bytes(5) would silently build five zero bytes, and str needs an encoding
    if isinstance(section, (str, int)):
        raise TypeError(f"Section must be bytes-like or an iterable of ints, got {type(section).__name__}.")
    return bytes(section)


def to_nybbles(data: bytes) -> List[int]:
    """Expands bytes into nybbles with leading zeros removed (at least one kept)."""
    nybbles = []
    for byte in data:
        nybbles.append(byte >> 4)
        nybbles.append(byte & 0x0F)

    start = 0
    while start < len(nybbles) - 1 and nybbles[start] == 0:
        start += 1
    return nybbles[start:] or [0]


def from_nybbles(nybbles: List[int]) -> bytes:
    """Packs nybbles into bytes, padding an odd count with a leading zero."""
    if len(nybbles) % 2:
        nybbles = [0] + list(nybbles)
    return bytes((nybbles[i] << 4) | nybbles[i + 1] for i in range(0, len(nybbles), 2))


def encode_section(section: SectionLike) -> str:
    """Encodes a single section. Never fails on valid byte input."""
    nybbles = to_nybbles(as_section_bytes(section))
    symbols = [continuation_symbol(n) for n in nybbles[:-1]]
    symbols.append(terminal_symbol(nybbles[-1]))
    return "".join(symbols)


def decode_section(text: str, cursor: int = 0, strict: bool = False) -> Tuple[bytes, int]:
    """
    Decodes the section that starts at `cursor` in `text`.

    Symbols are consumed until a terminal symbol closes the section.

    Args:
        text (str): The full encoded string.
        cursor (int): Offset of the first symbol of this section.
        strict (bool): Reject non-canonical input (uppercase, look-alike
                       aliases, or a leading zero continuation symbol).

    Returns:
        tuple: The decoded bytes and the cursor just past the section.

    Raises:
        InvalidSymbolError: An undecodable character was found.
        TruncatedInputError: The text ended before a terminal symbol.
        NonCanonicalEncodingError: In strict mode, the section starts with
            the continuation symbol for zero.
    """
    start = cursor
    nybbles = []
    while cursor < len(text):
        symbol = decode_symbol(text[cursor], strict=strict, position=cursor)
        if strict and cursor == start and not symbol.is_terminal and symbol.value == 0:
            raise NonCanonicalEncodingError(cursor)
        nybbles.append(symbol.value)
        cursor += 1
        if symbol.is_terminal:
            return from_nybbles(nybbles), cursor

    logger.debug(f"Section starting at {start} is unterminated ({len(nybbles)} nybble(s) read).")
    raise TruncatedInputError(cursor)

# === End of src/section_codec.py ===
