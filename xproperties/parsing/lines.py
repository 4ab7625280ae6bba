"""Library for assembling logical lines from .properties content.

A logical line holds a single key and value. A physical line ending with an
unescaped backslash is continued on the next physical line, and the leading
whitespace of the continuation is dropped:

  greeting=Hello, \
           World

Is read as the single logical line `greeting=Hello, World`.

Only a comment on the very first line of the content is removed. A `#` or `!`
anywhere else starts a key like any other character.
"""

from __future__ import annotations

import re
from collections.abc import Generator

__all__ = [
    "strip_leading_comment",
    "join_continuations",
    "logical_lines",
]

LEADING_COMMENT_RE = re.compile(r"\A[#!][^\r\n\f]*[\r\n\f]*")
# An odd number of backslashes at the end of a line, the last one being
# the continuation marker.
CONTINUATION_RE = re.compile(r"(?<!\\)((?:\\\\)*)\\[ \t]*[\r\n\f]+[ \t]*")
LINES_RE = re.compile(r"[\r\n\f]+")


def strip_leading_comment(content: str) -> str:
    """Remove a comment line at the start of the content."""
    return LEADING_COMMENT_RE.sub("", content, count=1)


def join_continuations(content: str) -> str:
    """Join physical lines ending in a continuation into one line."""
    return CONTINUATION_RE.sub(r"\1", content)


def logical_lines(content: str) -> Generator[str, None, None]:
    """Read content and yield logical lines."""
    content = join_continuations(strip_leading_comment(content))
    yield from LINES_RE.split(content)
