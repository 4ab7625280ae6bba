"""Character sets used in the .properties format.

This file defines the character sets used to decide which characters may be
written as-is and which need a \\uXXXX escape, intended to be used by the
escape codec.
"""

from __future__ import annotations

from typing import cast

from pyparsing import unicode_set
from pyparsing.unicode import UnicodeRangeList


class CharRange(unicode_set):
    """A base class that returns all characters in a range."""

    @classmethod
    def all(cls) -> list[str]:
        """Return all characters from the range."""
        return cast(list[str], cls._chars_for_ranges)


class PrintableAscii(CharRange):
    """Characters that are written without a unicode escape."""

    _ranges: UnicodeRangeList = [
        (0x20, 0x7E),  # 0x7F is DEL (control)
    ]


class HexDigit(CharRange):
    """Digits accepted in a \\uXXXX escape, in either case."""

    _ranges: UnicodeRangeList = [
        (0x30, 0x39),  # 0-9
        (0x41, 0x46),  # A-F
        (0x61, 0x66),  # a-f
    ]


class Surrogate(CharRange):
    """UTF-16 surrogate code units."""

    _ranges: UnicodeRangeList = [
        (0xD800, 0xDFFF),
    ]


PRINTABLE_ASCII = frozenset(PrintableAscii.all())
HEX_DIGIT = frozenset(HexDigit.all())
SURROGATE = frozenset(Surrogate.all())
