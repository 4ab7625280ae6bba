"""Library for handling .properties entries.

An entry is a single key and value pair read from a logical line. The key
ends at the first unescaped separator (`=` or `:`), and whitespace around the
separator is ignored. Only the first separator splits the line, so the value
may contain further separators.

For example, given a logical line of:

  db.url = jdbc:h2:mem:test

This library would create a ParsedEntry with this structure:

  ParsedEntry(key='db.url', value='jdbc:h2:mem:test')

A line without a separator is a key with an empty value. A line that is blank,
or has a blank key, is skipped.
"""

from __future__ import annotations

import logging
from collections.abc import Generator, Iterable
from dataclasses import dataclass

from ..exceptions import PropertiesParseError
from .const import CONTINUATION, SAVE_LINE_END, SAVE_SEPARATOR, SEPARATORS, WSP
from .escape import load_convert, save_convert
from .lines import logical_lines

__all__ = [
    "ParsedEntry",
    "parse_entries",
    "parse_content",
    "encode_content",
]

_LOGGER = logging.getLogger(__name__)


@dataclass
class ParsedEntry:
    """A key and value read from a .properties file."""

    key: str
    value: str

    def properties(self) -> str:
        """Encode a ParsedEntry into the serialized format."""
        return "".join(
            [
                save_convert(self.key, is_key=True),
                SAVE_SEPARATOR,
                save_convert(self.value),
            ]
        )

    @classmethod
    def from_line(cls, line: str) -> ParsedEntry | None:
        """Decode a ParsedEntry from a logical line.

        Returns None for a line without a key. Will raise a PropertiesParseError
        on a malformed escape sequence.
        """
        return _parse_line(line)


def _find_separator(line: str) -> tuple[int, int] | None:
    """Find the first unescaped separator in the line.

    Returns the end of the key and the start of the value, excluding the
    whitespace around the separator.
    """
    key_end = 0
    pos = 0
    line_len = len(line)
    while pos < line_len:
        char = line[pos]
        if char == CONTINUATION:
            # The escaped character is part of the key, even if whitespace
            pos += 2
            key_end = min(pos, line_len)
            continue
        if char in SEPARATORS:
            value_start = pos + 1
            while value_start < line_len and line[value_start] in WSP:
                value_start += 1
            return key_end, value_start
        pos += 1
        if char not in WSP:
            key_end = pos
    return None


def _parse_line(line: str) -> ParsedEntry | None:
    """Parse a single logical line."""
    line = line.lstrip("".join(WSP))
    if (separator := _find_separator(line)) is None:
        raw_key, raw_value = line, None
    else:
        key_end, value_start = separator
        raw_key, raw_value = line[:key_end], line[value_start:]
    if not raw_key.strip():
        return None
    try:
        key = load_convert(raw_key, is_key=True)
        value = load_convert(raw_value) if raw_value is not None else ""
    except PropertiesParseError as err:
        raise PropertiesParseError(err.message, detailed_error=line) from err
    return ParsedEntry(key=key, value=value)


def parse_entries(lines: Iterable[str]) -> Generator[ParsedEntry, None, None]:
    """Parse logical lines into ParsedEntry objects."""
    for line in lines:
        if not line:
            continue
        if (entry := ParsedEntry.from_line(line)) is None:
            _LOGGER.debug("Skipping line without a key: %r", line)
            continue
        yield entry


def parse_content(content: str) -> Generator[ParsedEntry, None, None]:
    """Parse .properties content into entries.

    Entries are produced one logical line at a time, so entries before a
    malformed line have already been produced when the error is raised.
    """
    yield from parse_entries(logical_lines(content))


def encode_content(items: Iterable[tuple[str, str]]) -> str:
    """Encode key and value pairs as .properties content."""
    return "".join(
        f"{ParsedEntry(key=key, value=value).properties()}{SAVE_LINE_END}"
        for key, value in items
    )
