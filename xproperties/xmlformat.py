"""Library for the xml representation of a property list.

The xml document has the following shape:

```xml
<?xml version="1.0" encoding="UTF-8"?>
<!DOCTYPE properties SYSTEM "http://java.sun.com/dtd/properties.dtd">
<properties>
  <entry key="greeting">Hello, World</entry>
</properties>
```

Every `entry` element in the document is read, wherever it appears, and its
text content is the value. The DOCTYPE is written when saving but is not
required when loading.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Generator, Iterable
from xml.etree import ElementTree

from defusedxml import ElementTree as DefusedElementTree
from defusedxml.common import DefusedXmlException

from .exceptions import PropertiesError, PropertiesParseError
from .parsing.const import PROPERTIES_DTD, XML_ENTRY, XML_KEY, XML_ROOT

__all__ = [
    "parse_xml",
    "encode_xml",
]

_LOGGER = logging.getLogger(__name__)

XML_DECLARATION = '<?xml version="1.0" encoding="UTF-8"?>'
XML_DOCTYPE = f'<!DOCTYPE {XML_ROOT} SYSTEM "{PROPERTIES_DTD}">'
XML_INDENT = "  "
MALFORMED_XML = "Malformed XML format"
# Characters outside of the xml 1.0 Char production
XML_INVALID_CHAR_RE = re.compile(
    "[\\x00-\\x08\\x0b\\x0c\\x0e-\\x1f\\ud800-\\udfff\\ufffe\\uffff]"
)
# A raw CR is read back as LF, so it is written as a character reference
CR = "\r"
CR_REFERENCE = "&#13;"


def parse_xml(content: str | bytes) -> Generator[tuple[str, str], None, None]:
    """Parse an xml document into key and value pairs.

    The whole document is parsed before any pair is produced. An `entry`
    without a `key` attribute raises a PropertiesParseError once it is
    reached, after the pairs before it have been produced.
    """
    try:
        root = DefusedElementTree.fromstring(content)
    except (ElementTree.ParseError, DefusedXmlException) as err:
        raise PropertiesParseError(MALFORMED_XML, detailed_error=str(err)) from err
    for element in root.iter(XML_ENTRY):
        if (key := element.get(XML_KEY)) is None:
            raise PropertiesParseError(
                MALFORMED_XML,
                detailed_error=f"<{XML_ENTRY}> element without '{XML_KEY}' attribute",
            )
        yield key, "".join(element.itertext())


def _check_chars(text: str) -> None:
    """Raise a PropertiesError if the text can't be represented in xml."""
    if match := XML_INVALID_CHAR_RE.search(text):
        raise PropertiesError(
            f"Character {match.group(0)!r} in {text!r} can't be written as xml"
        )


def encode_xml(items: Iterable[tuple[str, str]]) -> str:
    """Encode key and value pairs as an xml document.

    Will raise a PropertiesError for a key or value with characters that
    xml 1.0 does not allow, such as most control characters.
    """
    root = ElementTree.Element(XML_ROOT)
    for key, value in items:
        _check_chars(key)
        _check_chars(value)
        element = ElementTree.SubElement(root, XML_ENTRY, {XML_KEY: key})
        element.text = value
    ElementTree.indent(root, space=XML_INDENT)
    _LOGGER.debug("Encoded %d xml entries", len(root))
    # Indentation never adds a CR, so every CR is from a key or value.
    body = ElementTree.tostring(root, encoding="unicode").replace(CR, CR_REFERENCE)
    return "\n".join(
        [
            XML_DECLARATION,
            XML_DOCTYPE,
            body,
            "",
        ]
    )
