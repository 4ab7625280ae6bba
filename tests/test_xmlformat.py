"""Tests for the xml representation of a property list."""

from __future__ import annotations

import pathlib
import textwrap

import pytest

from xproperties.exceptions import PropertiesError, PropertiesParseError
from xproperties.properties import Properties
from xproperties.xmlformat import encode_xml, parse_xml


def test_encode_xml() -> None:
    """Test the document shape written for a property list."""
    assert encode_xml([("a", "1"), ("b", "x & <y>")]) == textwrap.dedent(
        """\
        <?xml version="1.0" encoding="UTF-8"?>
        <!DOCTYPE properties SYSTEM "http://java.sun.com/dtd/properties.dtd">
        <properties>
          <entry key="a">1</entry>
          <entry key="b">x &amp; &lt;y&gt;</entry>
        </properties>
        """
    )


def test_encode_xml_empty() -> None:
    """Test the document written for an empty property list."""
    assert encode_xml([]) == textwrap.dedent(
        """\
        <?xml version="1.0" encoding="UTF-8"?>
        <!DOCTYPE properties SYSTEM "http://java.sun.com/dtd/properties.dtd">
        <properties />
        """
    )


def test_parse_xml() -> None:
    """Test reading entries from a document."""
    content = textwrap.dedent(
        """\
        <?xml version="1.0" encoding="UTF-8"?>
        <!DOCTYPE properties SYSTEM "http://java.sun.com/dtd/properties.dtd">
        <properties>
          <comment>Application settings</comment>
          <entry key="app.name">Example</entry>
          <entry key="empty"></entry>
          <entry key="self.closing"/>
          <entry key="escaped">x &amp; &lt;y&gt;</entry>
          <entry key="padded">  spaces  </entry>
        </properties>
        """
    )
    assert list(parse_xml(content)) == [
        ("app.name", "Example"),
        ("empty", ""),
        ("self.closing", ""),
        ("escaped", "x & <y>"),
        ("padded", "  spaces  "),
    ]


def test_parse_xml_without_doctype() -> None:
    """Test the DOCTYPE is not required."""
    content = '<properties><entry key="a">1</entry></properties>'
    assert list(parse_xml(content)) == [("a", "1")]


def test_parse_xml_nested_text() -> None:
    """Test the value is all of the text inside the entry."""
    content = '<properties><entry key="a">x<b>y</b>z</entry></properties>'
    assert list(parse_xml(content)) == [("a", "xyz")]


def test_parse_xml_bytes() -> None:
    """Test reading a document using its declared encoding."""
    content = (
        '<?xml version="1.0" encoding="ISO-8859-1"?>'
        '<properties><entry key="name">caf\xe9</entry></properties>'
    ).encode("latin-1")
    assert list(parse_xml(content)) == [("name", "caf\xe9")]


@pytest.mark.parametrize(
    "content",
    [
        "",
        "<properties>",
        "<properties><entry key='a'>1</properties>",
        "not xml",
    ],
)
def test_parse_xml_malformed(content: str) -> None:
    """Test malformed documents are rejected."""
    with pytest.raises(PropertiesParseError, match="Malformed XML format"):
        list(parse_xml(content))


def test_parse_xml_missing_key() -> None:
    """Test an entry without a key attribute is rejected."""
    with pytest.raises(PropertiesParseError, match="Malformed XML format"):
        list(parse_xml("<properties><entry>value</entry></properties>"))


def test_loads_xml_missing_key_partial() -> None:
    """Test entries before an entry without a key remain after the error."""
    props = Properties()
    with pytest.raises(PropertiesParseError):
        props.loads_xml(
            "<properties>"
            '<entry key="a">1</entry>'
            "<entry>2</entry>"
            '<entry key="c">3</entry>'
            "</properties>"
        )
    assert props.as_dict() == {"a": "1"}


def test_loads_xml_merges() -> None:
    """Test loading keeps existing properties and replaces duplicates."""
    props = Properties.from_dict({"a": "old", "b": "kept"})
    props.loads_xml(
        '<properties><entry key="a">1</entry><entry key="a">2</entry></properties>'
    )
    assert props.as_dict() == {"a": "2", "b": "kept"}


def test_dumps_xml(props: Properties) -> None:
    """Test entries are written in property list order."""
    content = props.dumps_xml()
    assert content.index('key="app.name"') < content.index('key="greeting"')
    reloaded = Properties()
    reloaded.loads_xml(content)
    assert reloaded == props


def test_save_load_xml_round_trip(tmp_path: pathlib.Path) -> None:
    """Test saving and loading an xml file."""
    props = Properties.from_dict(
        {
            "plain": "value",
            "key with spaces": " leading and trailing ",
            "quotes\"and'apostrophes": "<tag> & entity",
            "unicode \xe9": "中文 \U0001F384",
            "multi\nline": "first\nsecond",
            "empty": "",
        }
    )
    filename = tmp_path / "round-trip.xml"
    props.save_to_xml(filename)
    assert filename.read_bytes().startswith(b'<?xml version="1.0" encoding="UTF-8"?>')
    assert "中".encode("utf-8") in filename.read_bytes()
    reloaded = Properties()
    reloaded.load_from_xml(str(filename))
    assert reloaded.as_dict() == props.as_dict()


def test_load_xml_missing_file(tmp_path: pathlib.Path) -> None:
    """Test a missing file raises the I/O error."""
    props = Properties()
    with pytest.raises(FileNotFoundError):
        props.load_from_xml(tmp_path / "missing.xml")


def test_load_xml_malformed_file(tmp_path: pathlib.Path) -> None:
    """Test a malformed file raises a parse error."""
    filename = tmp_path / "malformed.xml"
    filename.write_text("<properties><entry key='a'>", encoding="utf-8")
    props = Properties()
    with pytest.raises(PropertiesParseError) as exc_info:
        props.load_from_xml(filename)
    assert exc_info.value.detailed_error


@pytest.mark.parametrize(
    "text",
    [
        "a\x00b",
        "a\x01b",
        "a\x0bb",
        "a\x0cb",
        "a\x1fb",
        chr(0xD800),
        "\ufffe",
    ],
    ids=["nul", "soh", "vt", "ff", "us", "lone-surrogate", "non-character"],
)
def test_encode_xml_invalid_char(text: str) -> None:
    """Test keys and values that xml can't represent are rejected."""
    with pytest.raises(PropertiesError, match="can't be written as xml"):
        encode_xml([("key", text)])
    with pytest.raises(PropertiesError, match="can't be written as xml"):
        encode_xml([(text, "value")])


def test_save_xml_invalid_char_keeps_file(tmp_path: pathlib.Path) -> None:
    """Test the existing file is unchanged when the properties can't be saved."""
    filename = tmp_path / "existing.xml"
    Properties.from_dict({"good": "1"}).save_to_xml(filename)
    existing = filename.read_bytes()

    for text in ("a\x00b", chr(0xD800)):
        props = Properties()
        props.set_property("key", text)
        with pytest.raises(PropertiesError):
            props.save_to_xml(filename)
        assert filename.read_bytes() == existing

    reloaded = Properties()
    reloaded.load_from_xml(filename)
    assert reloaded.as_dict() == {"good": "1"}


def test_encode_xml_carriage_return() -> None:
    """Test a carriage return is written as a character reference."""
    content = encode_xml([("a\rb", "x\ry")])
    assert "\r" not in content
    assert '<entry key="a&#13;b">x&#13;y</entry>' in content


@pytest.mark.parametrize(
    "value",
    ["a\rb", "a\r\nb", "\r", "trailing\r\n"],
)
def test_carriage_return_round_trip(value: str, tmp_path: pathlib.Path) -> None:
    """Test a carriage return in a key or value reads back unchanged."""
    props = Properties()
    props.set_property("key", value)
    props.set_property(f"key{value}", "value")
    filename = tmp_path / "cr.xml"
    props.save_to_xml(filename)
    reloaded = Properties()
    reloaded.load_from_xml(filename)
    assert reloaded.as_dict() == props.as_dict()


def test_parse_xml_entity_declaration() -> None:
    """Test documents declaring entities are rejected."""
    content = textwrap.dedent(
        """\
        <?xml version="1.0"?>
        <!DOCTYPE properties [<!ENTITY lol "lol">]>
        <properties><entry key="a">&lol;</entry></properties>
        """
    )
    with pytest.raises(PropertiesParseError, match="Malformed XML format"):
        list(parse_xml(content))
