"""Test fixtures."""

import pytest

from xproperties.properties import Properties


@pytest.fixture(name="props")
def mock_props() -> Properties:
    """Fixture to create a property list with a few entries."""
    return Properties.from_dict(
        {
            "app.name": "Example",
            "app.version": "1.2.3",
            "greeting": "Hello, World",
        }
    )
