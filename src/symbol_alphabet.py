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
# Filename: src/symbol_alphabet.py

"""
The two 16-symbol alphabets used by the sortable section encoding.

-   **Terminal symbols** (`0123456789abcdef`) carry the last nybble of a
    section and close it.
-   **Continuation symbols** (`ghjkmnpqrstvwxyz`) carry every other nybble and
    signal that the section continues.

Every terminal symbol sorts before every continuation symbol, and the two sets
are disjoint, so any accepted character classifies as exactly one of the two.

Decoding is forgiving by default: case is ignored, and the look-alikes
`o`/`O` (zero) and `i`/`I`/`l`/`L` (one) are read as terminal digits. Strict
decoding accepts only the lowercase symbols the encoder itself emits.
"""

import enum
from typing import NamedTuple

from codec_errors import InvalidSymbolError

TERMINAL_SYMBOLS = "0123456789abcdef"
CONTINUATION_SYMBOLS = "ghjkmnpqrstvwxyz"
CANONICAL_SYMBOLS = frozenset(TERMINAL_SYMBOLS + CONTINUATION_SYMBOLS)

# Look-alikes accepted for terminal digits (lowercase; case is folded first)
ALIASES = {"o": "0", "i": "1", "l": "1"}


class SymbolClass(enum.Enum):
    TERMINAL = "terminal"
    CONTINUATION = "continuation"


class DecodedSymbol(NamedTuple):
    symbol_class: SymbolClass
    value: int

    @property
    def is_terminal(self) -> bool:
        return self.symbol_class is SymbolClass.TERMINAL


def _build_lookup():
    table = {}
    for value, symbol in enumerate(TERMINAL_SYMBOLS):
        table[symbol] = DecodedSymbol(SymbolClass.TERMINAL, value)
    for value, symbol in enumerate(CONTINUATION_SYMBOLS):
        table[symbol] = DecodedSymbol(SymbolClass.CONTINUATION, value)
    return table


_STRICT_LOOKUP = _build_lookup()
_LENIENT_LOOKUP = dict(_STRICT_LOOKUP)
for _alias, _target in ALIASES.items():
    _LENIENT_LOOKUP[_alias] = _STRICT_LOOKUP[_target]
for _symbol, _decoded in list(_LENIENT_LOOKUP.items()):
    _LENIENT_LOOKUP[_symbol.upper()] = _decoded


def _check_nybble(value: int):
    if isinstance(value, bool) or not isinstance(value, int) or not 0 <= value <= 15:
        raise ValueError(f"Nybble value must be an integer in [0, 15], got {value!r}.")


def terminal_symbol(value: int) -> str:
    """Returns the symbol that closes a section with the given last nybble."""
    _check_nybble(value)
    return TERMINAL_SYMBOLS[value]


def continuation_symbol(value: int) -> str:
    """Returns the symbol for a non-final nybble of a section."""
    _check_nybble(value)
    return CONTINUATION_SYMBOLS[value]


def decode_symbol(char: str, strict: bool = False, position: int = 0) -> DecodedSymbol:
    """
    Classifies a single character as a terminal or continuation symbol.

    Args:
        char (str): The character to decode.
        strict (bool): Accept only canonical lowercase encoder output.
        position (int): Offset of `char` in the surrounding text, reported
                        in the raised error.

    Returns:
        DecodedSymbol: The symbol class and its nybble value.

    Raises:
        InvalidSymbolError: If the character is not in the decode set.
    """
    table = _STRICT_LOOKUP if strict else _LENIENT_LOOKUP
    try:
        return table[char]
    except (KeyError, TypeError):
        raise InvalidSymbolError(char, position, strict=strict) from None

# === End of src/symbol_alphabet.py ===
