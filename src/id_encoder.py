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
# Filename: src/id_encoder.py

"""
A utility module for encoding tuples of integer IDs as sortable strings.

Each non-negative integer becomes one section of the sortable encoding, so a
composite key such as (customer_id, order_id) turns into a short lowercase
string. When the ids in each position have the same number of significant
hex digits, ordinary string order matches the numeric order of the tuple.
Look-alike characters (O/0, I/l/1) and case changes are tolerated when the
string is read back.

This module is not intended to be run directly but is imported by other scripts.
"""

from typing import Tuple

from sequence_codec import decode, encode


def int_to_section(num: int) -> bytes:
    """Converts a non-negative integer to its minimal big-endian bytes."""
    if isinstance(num, bool) or not isinstance(num, int) or num < 0:
        raise ValueError("Input must be a non-negative integer.")
    return num.to_bytes(max(1, (num.bit_length() + 7) // 8), "big")


def section_to_int(section: bytes) -> int:
    """Reads a section back as a big-endian integer."""
    return int.from_bytes(section, "big")


def encode_ids(*nums: int) -> str:
    """Encodes one or more non-negative integers into a single sortable string."""
    return encode(int_to_section(num) for num in nums)


def decode_ids(encoded_str: str, count: int, strict: bool = False) -> Tuple[int, ...]:
    """Decodes `count` integers from a string produced by encode_ids()."""
    return tuple(section_to_int(section) for section in decode(encoded_str, count, strict=strict))

# === End of src/id_encoder.py ===
