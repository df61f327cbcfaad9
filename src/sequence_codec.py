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
# Filename: src/sequence_codec.py

"""
Encodes an ordered list of byte sections into one sortable string.

Sections are encoded one after another with no separator; each one ends with
a terminal symbol, so a decoder that knows how many sections to expect can
split the text again. The section count is never stored in the text and must
be agreed between the caller who encodes and the caller who decodes.

For strings built from the same number of sections, where sections in the
same position have the same encoded length, ordinary string comparison gives
the same order as comparing the sections numerically, one section at a time.
A section whose nybbles are a prefix of another's always sorts first.

Usage:
    from sequence_codec import encode, decode

    key = encode([b"\\x01", b"\\x02\\x00"])   # -> "1jg0"
    decode(key, 2)                             # -> [b"\\x01", b"\\x02\\x00"]
"""

import logging
from typing import Iterable, List

from codec_errors import MissingSectionError, SectionCountMismatchError, SortableCodecError
from section_codec import SectionLike, decode_section, encode_section

logger = logging.getLogger(__name__)


def _check_section_count(section_count):
    if isinstance(section_count, bool) or not isinstance(section_count, int) or section_count < 0:
        raise ValueError("Section count must be a non-negative integer.")


def encode(sections: Iterable[SectionLike]) -> str:
    """
    Encodes the sections in order. An empty list encodes to ''.

    An empty section is not dropped: it counts as a single zero byte and
    encodes to '0', so encode([b""]) == "0", not "".
    """
    return "".join(encode_section(section) for section in sections)


def decode(text: str, section_count: int, strict: bool = False) -> List[bytes]:
    """
    Decodes exactly `section_count` sections from `text`.

    Args:
        text (str): The encoded string.
        section_count (int): How many sections the text holds.
        strict (bool): Accept only canonical encoder output.

    Returns:
        list[bytes]: The decoded sections, in order.

    Raises:
        ValueError: If section_count is not a non-negative integer.
        SortableCodecError: If the text cannot be decoded (see codec_errors).
    """
    _check_section_count(section_count)
    if not isinstance(text, str):
        raise TypeError(f"Encoded text must be a str, got {type(text).__name__}.")

    sections = []
    cursor = 0
    for index in range(section_count):
        if cursor == len(text):
            raise MissingSectionError(section_count, index, cursor)
        section, cursor = decode_section(text, cursor, strict=strict)
        sections.append(section)

    if cursor != len(text):
        raise SectionCountMismatchError(section_count, cursor)

    logger.debug(f"Decoded {section_count} section(s) from {len(text)} symbol(s).")
    return sections


def is_canonical(text: str, section_count: int) -> bool:
    """True iff `text` is exactly what the encoder would produce for some input."""
    try:
        decode(text, section_count, strict=True)
    except SortableCodecError as e:
        logger.debug(f"Text is not canonical: {e}")
        return False
    return True


def canonicalize(text: str, section_count: int, strict: bool = False) -> str:
    """
    Rewrites decodable text into canonical form.

    Uppercase symbols are lowered, look-alike aliases are replaced by their
    digits, and redundant leading zero continuation symbols are removed.
    """
    return encode(decode(text, section_count, strict=strict))

# === End of src/sequence_codec.py ===
