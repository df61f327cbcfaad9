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
# Filename: src/codec_errors.py

"""
Exception hierarchy for decoding sortable section strings.

Encoding is total, so every error here is raised while decoding. All of them
derive from `SortableCodecError`, which is a `ValueError`, so callers that
only care about "this text is not decodable" can catch either.

Each error records the zero-based `position` in the input text at which the
problem was detected.
"""


class SortableCodecError(ValueError):
    """Base class for all decode failures."""

    def __init__(self, message: str, position: int):
        super().__init__(message)
        self.position = position


class InvalidSymbolError(SortableCodecError):
    """A character outside every accepted decode set was found."""

    def __init__(self, char: str, position: int, strict: bool = False):
        mode = "canonical " if strict else ""
        super().__init__(f"Invalid {mode}symbol {char!r} at position {position}.", position)
        self.char = char
        self.strict = strict


class TruncatedInputError(SortableCodecError):
    """The text ended while a section was still open."""

    def __init__(self, position: int, message: str = None):
        super().__init__(message or f"Input ended at position {position} inside an unterminated section.", position)


class SectionCountMismatchError(SortableCodecError):
    """The text holds a different number of sections than was requested."""

    def __init__(self, expected: int, position: int, message: str = None):
        super().__init__(
            message or f"Expected {expected} section(s), but unconsumed input remains at position {position}.",
            position,
        )
        self.expected = expected


class MissingSectionError(TruncatedInputError, SectionCountMismatchError):
    """The text ran out on a section boundary before all sections were read."""

    def __init__(self, expected: int, found: int, position: int):
        message = f"Expected {expected} section(s), but input ended after {found} at position {position}."
        SortableCodecError.__init__(self, message, position)
        self.expected = expected
        self.found = found


class NonCanonicalEncodingError(SortableCodecError):
    """A section starts with the continuation symbol for zero."""

    def __init__(self, position: int):
        super().__init__(
            f"Section starting at position {position} begins with a zero continuation symbol; "
            "the encoder never produces this form.",
            position,
        )

# === End of src/codec_errors.py ===
