"""
.. include:: ../README.md
"""

__all__ = [
    "properties",
    "xmlformat",
    "parsing",
    "exceptions",
]
