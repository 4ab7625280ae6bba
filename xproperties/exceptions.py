"""Exceptions for xproperties library."""


class PropertiesError(Exception):
    """Base exception for all xproperties errors."""


class PropertiesParseError(PropertiesError):
    """Exception raised when parsing a .properties or xml document.

    The 'message' attribute contains a human-readable message about the
    error that occurred. The 'detailed_error' attribute can provide additional
    information about the error, such as the offending line or the message
    from the underlying xml parser, useful for debugging purposes.

    Entries parsed before the error was raised remain in the store.
    """

    def __init__(self, message: str, *, detailed_error: str | None = None) -> None:
        """Initialize the PropertiesParseError with a message."""
        super().__init__(message)
        self.message = message
        self.detailed_error = detailed_error


class PropertyNotFoundError(PropertiesError, KeyError):
    """Exception raised when a property does not exist.

    This is also a KeyError so the store can be used where a mapping
    lookup failure is expected.
    """

    def __init__(self, key: str) -> None:
        """Initialize the PropertyNotFoundError with the missing key."""
        super().__init__(key)
        self.key = key

    def __str__(self) -> str:
        return f"Property '{self.key}' does not exist"
