"""Shared exception classes for hlopts."""

from __future__ import annotations


class ConfigError(Exception):
    """Raised when a site configuration file cannot be loaded."""


class HighlightSyntaxError(Exception):
    """Raised when highlight tag markup is malformed."""

    def __init__(self, markup: str) -> None:
        super().__init__(
            f"Syntax error in tag 'highlight' while parsing: {markup!r}\n"
            "Valid syntax: highlight <lang> [linenos] [key=value] [key=\"v1 v2\"]"
        )
        self.markup = markup


class UnknownTagError(Exception):
    """Raised when a tag name has not been registered."""


class HighlightOptionError(Exception):
    """Raised when Pygments rejects a resolved highlight option or source encoding."""
