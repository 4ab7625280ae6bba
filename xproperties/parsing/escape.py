r"""Library for escaping and unescaping .properties keys and values.

Keys and values in a .properties file are written with backslash escapes for
characters that would otherwise be read as part of the file structure (line
terminators, separators, the escape character itself) and \uXXXX escapes for
everything outside of printable ASCII.

Decoding happens in two passes. The first pass replaces the two character
escapes (`\\`, `\t`, `\r`, `\n`, `\f` and for keys also `\ `, `\=`, `\:`).
The second pass replaces \uXXXX escapes. Since the second pass runs on the
output of the first, an escaped backslash followed by `u0041` is read as a
unicode escape:

  \\u0041  ->  A

A literal backslash followed by `u` is therefore written as `\u005C` when
saving, which reads back unchanged.
"""

from __future__ import annotations

import re

from ..exceptions import PropertiesParseError
from .const import (
    ESCAPE_CHAR,
    KEY_ESCAPE_CHAR,
    KEY_UNESCAPE_CHAR,
    UNESCAPE_CHAR,
    UNICODE_ESCAPE,
    UNICODE_ESCAPE_LEN,
    COMMENT_PREFIXES,
)
from .unicode import HEX_DIGIT, PRINTABLE_ASCII, SURROGATE

__all__ = [
    "load_convert",
    "save_convert",
]

_KEY_UNESCAPE_RE = re.compile(r"\\[\\trnf =:]")
_VALUE_UNESCAPE_RE = re.compile(r"\\[\\trnf]")
_UNICODE_ESCAPE_RE = re.compile(r"\\u(.{0,4})", flags=re.DOTALL)
_KEY_UNESCAPE = {**UNESCAPE_CHAR, **KEY_UNESCAPE_CHAR}


def _decode_unicode(match: re.Match[str]) -> str:
    """Decode a single \\uXXXX escape sequence."""
    digits = match.group(1)
    if len(digits) != UNICODE_ESCAPE_LEN or any(
        digit not in HEX_DIGIT for digit in digits
    ):
        raise PropertiesParseError(
            "Malformed \\uxxxx encoding", detailed_error=match.group(0)
        )
    return chr(int(digits, 16))


def _join_surrogates(value: str) -> str:
    """Combine surrogate pairs produced by unicode escapes into characters."""
    if not any(char in SURROGATE for char in value):
        return value
    return value.encode("utf-16-le", "surrogatepass").decode(
        "utf-16-le", "surrogatepass"
    )


def load_convert(value: str, is_key: bool = False) -> str:
    """Convert escape sequences in a key or value to characters.

    Will raise a PropertiesParseError on a malformed unicode escape.
    """
    if is_key:
        value = _KEY_UNESCAPE_RE.sub(lambda m: _KEY_UNESCAPE[m.group(0)], value)
    else:
        value = _VALUE_UNESCAPE_RE.sub(lambda m: UNESCAPE_CHAR[m.group(0)], value)
    if UNICODE_ESCAPE not in value:
        return value
    return _join_surrogates(_UNICODE_ESCAPE_RE.sub(_decode_unicode, value))


def _unicode_escape(char: str) -> str:
    """Return the \\uXXXX escapes for each UTF-16 code unit of the character."""
    data = char.encode("utf-16-be", "surrogatepass")
    return "".join(
        f"{UNICODE_ESCAPE}{int.from_bytes(data[i : i + 2], 'big'):04X}"
        for i in range(0, len(data), 2)
    )


def _save_char(char: str, is_key: bool) -> str:
    if is_key and (escaped := KEY_ESCAPE_CHAR.get(char)):
        return escaped
    if escaped := ESCAPE_CHAR.get(char):
        return escaped
    if char in PRINTABLE_ASCII:
        return char
    return _unicode_escape(char)


def save_convert(value: str, is_key: bool = False) -> str:
    """Convert characters in a key or value to escape sequences.

    A leading comment character in a key, a leading space in a value and a
    backslash followed by `u` are written as unicode escapes, otherwise the
    line would not read back the same way.
    """
    result = [_save_char(char, is_key) for char in value]
    if result:
        if is_key and value[0] in COMMENT_PREFIXES:
            result[0] = _unicode_escape(value[0])
        elif not is_key and value[0] == " ":
            result[0] = _unicode_escape(value[0])
    for index in range(len(value) - 1):
        if value[index] == "\\" and value[index + 1] == "u":
            result[index] = _unicode_escape("\\")
    return "".join(result)
