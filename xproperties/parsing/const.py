"""Constants for the .properties parsing library."""

# The text format is defined over 8-bit ISO-8859-1 with \uXXXX escapes for
# everything else. The xml format is always written as UTF-8.
PROPERTIES_ENCODING = "latin-1"
XML_ENCODING = "utf-8"

COMMENT_PREFIXES = ("#", "!")
SEPARATORS = ("=", ":")
WSP = [" ", "\t"]
CONTINUATION = "\\"
SAVE_SEPARATOR = "="
SAVE_LINE_END = "\n"

# Two character escapes understood in both keys and values
ESCAPE_CHAR = {
    "\\": "\\\\",
    "\t": "\\t",
    "\r": "\\r",
    "\n": "\\n",
    "\f": "\\f",
}
UNESCAPE_CHAR = {v: k for k, v in ESCAPE_CHAR.items()}

# Escapes only applied to keys, where they would otherwise be read
# as the end of the key.
KEY_ESCAPE_CHAR = {
    " ": "\\ ",
    "=": "\\=",
    ":": "\\:",
}
KEY_UNESCAPE_CHAR = {v: k for k, v in KEY_ESCAPE_CHAR.items()}

UNICODE_ESCAPE = "\\u"
UNICODE_ESCAPE_LEN = 4

# Document shape for the xml format
PROPERTIES_DTD = "http://java.sun.com/dtd/properties.dtd"
XML_ROOT = "properties"
XML_ENTRY = "entry"
XML_KEY = "key"
