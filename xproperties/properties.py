"""A property list backed by a .properties or xml file.

This is an example of reading a .properties file, updating a value, and
writing the file back out:
```python
from xproperties.properties import Properties

props = Properties()
props.load("config.properties")
print("Database url:", props.get_property("db.url", "jdbc:h2:mem:test"))
props["db.pool.size"] = "10"
props.save("config.properties")
```

The same property list can be written as xml with `save_to_xml()` and read
back with `load_from_xml()`. The `loads()`/`dumps()` and `loads_xml()`/
`dumps_xml()` methods work on content in memory rather than files.

Loading merges into the existing entries, and a later duplicate key
replaces the earlier value. When a load fails partway through, the entries
read before the failure remain in the property list.
"""

from __future__ import annotations

import logging
import pathlib
from collections.abc import ItemsView, Iterator, KeysView, Mapping, ValuesView
from typing import Any

from pydantic import TypeAdapter, ValidationError

from .exceptions import PropertiesError, PropertyNotFoundError
from .parsing.const import PROPERTIES_ENCODING, XML_ENCODING
from .parsing.entry import encode_content, parse_content
from .xmlformat import encode_xml, parse_xml

__all__ = [
    "Properties",
]

_LOGGER = logging.getLogger(__name__)

_ENTRIES_ADAPTER = TypeAdapter(dict[str, str])


def _encode(content: str, encoding: str) -> bytes:
    """Encode file content, raising a PropertiesError on failure."""
    try:
        return content.encode(encoding)
    except UnicodeEncodeError as err:
        raise PropertiesError(
            f"Properties can't be encoded as {encoding}: {err}"
        ) from err


class Properties:
    """An ordered list of string properties.

    Entries are kept in insertion order, which is the order used when
    saving. Updating the value of an existing key keeps its position.
    """

    def __init__(self) -> None:
        """Initialize an empty Properties."""
        self._properties: dict[str, str] = {}

    @classmethod
    def from_dict(cls, data: Mapping[str, str]) -> Properties:
        """Create a new instance from a mapping of strings."""
        try:
            entries = _ENTRIES_ADAPTER.validate_python(dict(data), strict=True)
        except ValidationError as err:
            raise PropertiesError(
                f"Properties keys and values must be strings: {err}"
            ) from err
        props = cls()
        props._properties.update(entries)
        return props

    def __getitem__(self, key: str) -> str:
        return self.get_property(key)

    def __setitem__(self, key: str, value: str) -> None:
        self.set_property(key, value)

    def __delitem__(self, key: str) -> None:
        self.delete_property(key)

    def __contains__(self, key: object) -> bool:
        return key in self._properties

    def __iter__(self) -> Iterator[str]:
        return iter(self._properties)

    def __len__(self) -> int:
        return len(self._properties)

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, Properties):
            return NotImplemented
        return self._properties == other._properties

    def __repr__(self) -> str:
        return f"Properties({self._properties!r})"

    def __str__(self) -> str:
        return self.to_json()

    @property
    def count(self) -> int:
        """Return the number of properties."""
        return len(self._properties)

    def get_property(self, key: str, default: str | None = None) -> str:
        """Return the value of a property.

        The default is returned when the property does not exist. An empty
        default is treated the same as no default, and a PropertyNotFoundError
        is raised instead.
        """
        if key in self._properties:
            return self._properties[key]
        if default:
            return default
        raise PropertyNotFoundError(key)

    def set_property(self, key: str, value: str) -> None:
        """Set the value of a property, adding it if it does not exist."""
        self._properties[key] = value

    def delete_property(self, key: str) -> None:
        """Remove a property, raising PropertyNotFoundError if it does not exist."""
        try:
            del self._properties[key]
        except KeyError as err:
            raise PropertyNotFoundError(key) from err

    def contains(self, key: str) -> bool:
        """Return True if the property exists."""
        return key in self._properties

    def clear(self) -> None:
        """Remove all properties."""
        self._properties.clear()

    def keys(self) -> KeysView[str]:
        """Return a view of the property names."""
        return self._properties.keys()

    def values(self) -> ValuesView[str]:
        """Return a view of the property values."""
        return self._properties.values()

    def items(self) -> ItemsView[str, str]:
        """Return a view of the property name and value pairs."""
        return self._properties.items()

    def as_dict(self) -> dict[str, str]:
        """Return a copy of the properties as a dictionary."""
        return dict(self._properties)

    def to_json(self) -> str:
        """Return the properties as a json object, useful for debugging."""
        return _ENTRIES_ADAPTER.dump_json(self._properties).decode()

    def loads(self, content: str) -> None:
        """Load properties from .properties content.

        Will raise a PropertiesParseError on a malformed escape sequence.
        """
        count = 0
        for entry in parse_content(content):
            self._properties[entry.key] = entry.value
            count += 1
        _LOGGER.debug("Loaded %d properties", count)

    def dumps(self) -> str:
        """Encode the properties as .properties content."""
        return encode_content(self._properties.items())

    def loads_xml(self, content: str | bytes) -> None:
        """Load properties from an xml document.

        Will raise a PropertiesParseError when the document is malformed.
        """
        count = 0
        for key, value in parse_xml(content):
            self._properties[key] = value
            count += 1
        _LOGGER.debug("Loaded %d properties from xml", count)

    def dumps_xml(self) -> str:
        """Encode the properties as an xml document."""
        return encode_xml(self._properties.items())

    def load(self, filename: str | pathlib.Path) -> None:
        """Load properties from a .properties file.

        The file is read as ISO-8859-1 (Latin-1), with other characters
        written as unicode escapes.
        """
        path = pathlib.Path(filename)
        _LOGGER.debug("Loading properties from %s", path)
        with path.open(encoding=PROPERTIES_ENCODING, newline="") as properties_file:
            self.loads(properties_file.read())

    def save(self, filename: str | pathlib.Path) -> None:
        """Save properties to a .properties file in ISO-8859-1 (Latin-1).

        The existing file is not modified when the properties can't be
        encoded.
        """
        path = pathlib.Path(filename)
        _LOGGER.debug("Saving %d properties to %s", len(self), path)
        data = _encode(self.dumps(), PROPERTIES_ENCODING)
        with path.open(mode="wb") as properties_file:
            properties_file.write(data)

    def load_from_xml(self, filename: str | pathlib.Path) -> None:
        """Load properties from an xml file."""
        path = pathlib.Path(filename)
        _LOGGER.debug("Loading xml properties from %s", path)
        with path.open(mode="rb") as xml_file:
            self.loads_xml(xml_file.read())

    def save_to_xml(self, filename: str | pathlib.Path) -> None:
        """Save properties to an xml file in UTF-8.

        Will raise a PropertiesError, without modifying the existing file, for
        a key or value that can't be written as xml.
        """
        path = pathlib.Path(filename)
        _LOGGER.debug("Saving %d xml properties to %s", len(self), path)
        data = _encode(self.dumps_xml(), XML_ENCODING)
        with path.open(mode="wb") as xml_file:
            xml_file.write(data)
