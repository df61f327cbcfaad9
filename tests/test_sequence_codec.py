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
# Filename: tests/test_sequence_codec.py

"""
Unit tests for src/sequence_codec.py.
"""
import itertools

import pytest

from codec_errors import (
    InvalidSymbolError,
    MissingSectionError,
    NonCanonicalEncodingError,
    SectionCountMismatchError,
    SortableCodecError,
    TruncatedInputError,
)
from sequence_codec import canonicalize, decode, encode, is_canonical

# A spread of section values, all without leading zero bytes
SAMPLE_SECTIONS = [
    b"\x00", b"\x01", b"\x0f", b"\x10", b"\x11", b"\x7f", b"\x80", b"\xff",
    b"\x01\x00", b"\x0f\xff", b"\x10\x00", b"\xff\x00\xff", b"\xff\xff",
    b"\x01\x00\x00", b"\xde\xad\xbe\xef",
]


def _as_int(section):
    return int.from_bytes(section, "big")


@pytest.mark.parametrize("sections, expected", [
    ([], ""),
    ([b""], "0"),
    ([b"\x00"], "0"),
    ([b"\x10"], "h0"),
    ([b"\xff"], "zf"),
    ([b"\xff\x00\xff"], "zzggzf"),
    ([b"\x01", b"\x02", b"\x03"], "123"),
    ([b"\x01", b"\x02\x00"], "1jg0"),
])
def test_encode_examples(sections, expected):
    assert encode(sections) == expected


def test_empty_section_is_a_zero_byte():
    assert encode([]) == ""
    assert encode([b""]) == encode([b"\x00"]) == "0"
    assert encode([b"", b"\x01", b""]) == "010"
    assert decode(encode([b""]), 1) == [b"\x00"]


def test_decode_examples():
    assert decode("123", 3) == [b"\x01", b"\x02", b"\x03"]
    assert decode("zzggzf", 1) == [b"\xff\x00\xff"]
    assert decode("", 0) == []


def test_decode_too_few_sections_is_count_mismatch():
    with pytest.raises(SectionCountMismatchError) as excinfo:
        decode("zf", 2)
    assert isinstance(excinfo.value, MissingSectionError)
    assert isinstance(excinfo.value, TruncatedInputError)
    assert excinfo.value.expected == 2
    assert excinfo.value.found == 1
    assert excinfo.value.position == 2


def test_decode_empty_text_with_sections_requested():
    with pytest.raises(MissingSectionError):
        decode("", 1)


def test_decode_trailing_data_is_count_mismatch():
    with pytest.raises(SectionCountMismatchError) as excinfo:
        decode("123", 2)
    assert not isinstance(excinfo.value, TruncatedInputError)
    assert excinfo.value.position == 2

    with pytest.raises(SectionCountMismatchError):
        decode("1", 0)


def test_decode_unterminated_final_section():
    with pytest.raises(TruncatedInputError) as excinfo:
        decode("1zz", 2)
    assert not isinstance(excinfo.value, SectionCountMismatchError)


def test_decode_invalid_symbol():
    with pytest.raises(InvalidSymbolError) as excinfo:
        decode("12-3", 3)
    assert excinfo.value.position == 2


@pytest.mark.parametrize("count", [-1, 1.0, "2", None, True])
def test_decode_rejects_bad_section_count(count):
    with pytest.raises(ValueError, match="non-negative integer"):
        decode("1", count)


def test_decode_rejects_non_str_text():
    with pytest.raises(TypeError):
        decode(b"123", 3)


def test_errors_are_value_errors():
    assert issubclass(SortableCodecError, ValueError)


@pytest.mark.parametrize("section", SAMPLE_SECTIONS[1:])
def test_round_trip_without_leading_zero(section):
    assert decode(encode([section]), 1) == [section]


def test_round_trip_many_sections():
    sections = SAMPLE_SECTIONS[1:]
    assert decode(encode(sections), len(sections)) == sections


def test_leading_zero_collapse():
    for section in SAMPLE_SECTIONS:
        assert encode([b"\x00\x00" + section]) == encode([section])


def test_length_bounds():
    for sections in itertools.combinations(SAMPLE_SECTIONS, 3):
        encoded = encode(sections)
        assert len(encoded) >= len(sections)
        assert len(encoded) <= 2 * sum(len(s) for s in sections)

    # every section is a single nybble: minimum length reached exactly
    assert len(encode([b"\x00", b"\x05", b"\x0f"])) == 3


def _by_encoded_length(sections):
    groups = {}
    for section in sections:
        groups.setdefault(len(encode([section])), []).append(section)
    return groups


def test_single_section_sort_correspondence():
    for group in _by_encoded_length(SAMPLE_SECTIONS).values():
        ordered = sorted(group, key=_as_int)
        assert sorted(group, key=lambda s: encode([s])) == ordered


@pytest.mark.parametrize("start, stop, step", [(0x0, 0x10, 1), (0x10, 0x100, 1), (0x100, 0x1000, 7), (0x1000, 0x10000, 37)])
def test_equal_length_sort_correspondence(start, stop, step):
    values = [v.to_bytes(2, "big") for v in range(start, stop, step)]
    encoded = [encode([v]) for v in values]
    assert len({len(e) for e in encoded}) == 1
    assert encoded == sorted(encoded)


def test_multi_section_sort_correspondence():
    groups = _by_encoded_length(SAMPLE_SECTIONS)
    pairs = list(itertools.product(groups[2], groups[1], groups[4]))
    by_value = sorted(pairs, key=lambda p: tuple(_as_int(s) for s in p))
    by_text = sorted(pairs, key=encode)
    assert by_text == by_value


@pytest.mark.parametrize("shorter, longer", [(b"\x01", b"\x10"), (b"\x01", b"\x1f"), (b"\x12", b"\x01\x23"), (b"\x0a", b"\xab\xcd")])
def test_terminated_prefix_sorts_first(shorter, longer):
    # the shorter stream ends with a terminal symbol where the longer continues
    assert _as_int(shorter) < _as_int(longer)
    assert encode([shorter, b"\xff"]) < encode([longer, b"\x00"])


def test_sort_correspondence_requires_equal_lengths():
    assert _as_int(b"\xff") < _as_int(b"\x01\x00")
    assert encode([b"\xff"]) > encode([b"\x01\x00"])


def test_case_insensitivity():
    sections = [b"\xab", b"\xff\x00\xff", b"\x0c"]
    encoded = encode(sections)
    assert decode(encoded.upper(), 3) == decode(encoded, 3) == sections


@pytest.mark.parametrize("text, aliased", [
    ("10", "lo"), ("10", "IO"), ("10", "iO"), ("h1", "hL"), ("101", "1o1"),
])
def test_alias_insensitivity(text, aliased):
    count = len([c for c in text if c in "0123456789abcdef"])
    assert decode(aliased, count) == decode(text, count)


def test_strict_decode_rejects_non_canonical_text():
    with pytest.raises(InvalidSymbolError):
        decode("ZF", 1, strict=True)
    with pytest.raises(InvalidSymbolError):
        decode("1o", 2, strict=True)
    with pytest.raises(NonCanonicalEncodingError) as excinfo:
        decode("1g2", 2, strict=True)
    assert excinfo.value.position == 1


def test_decode_is_all_or_nothing():
    # the first two sections are fine; the whole call still fails
    with pytest.raises(InvalidSymbolError):
        decode("12u", 3)


@pytest.mark.parametrize("text, count, expected", [
    ("123", 3, True),
    ("zzggzf", 1, True),
    ("ZF", 1, False),
    ("1o", 2, False),
    ("g1", 1, False),
    ("123", 2, False),
    ("zz", 1, False),
])
def test_is_canonical(text, count, expected):
    assert is_canonical(text, count) is expected


def test_is_canonical_propagates_bad_count():
    with pytest.raises(ValueError):
        is_canonical("1", -1)


@pytest.mark.parametrize("text, count, expected", [
    ("ZF", 1, "zf"),
    ("lO", 2, "10"),
    ("g1", 1, "1"),
    ("ggh0I", 2, "h01"),
    ("123", 3, "123"),
])
def test_canonicalize(text, count, expected):
    assert canonicalize(text, count) == expected
    assert is_canonical(expected, count)


def test_canonicalize_strict_raises():
    with pytest.raises(InvalidSymbolError):
        canonicalize("ZF", 1, strict=True)

# === End of tests/test_sequence_codec.py ===
