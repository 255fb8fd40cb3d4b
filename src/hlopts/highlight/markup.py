"""Highlight tag markup parsing and option sanitizing."""

from __future__ import annotations

import re
from typing import Any

from hlopts.errors import HighlightSyntaxError

# lang followed by any number of  key | key=value | key="v1 v2"
SYNTAX = re.compile(
    r'^([a-zA-Z0-9.+#_-]+)((?:\s+\w+(?:=(?:[\w.-]+|"[^"]*"))?)*)$'
)
OPTION = re.compile(r'(\w+)(?:=("[^"]*"|[\w.-]+))?')

# Options kept in safe mode, with their defaults
SAFE_OPTIONS: dict[str, Any] = {
    "startinline": None,
    "hl_lines": None,
    "linenos": None,
    "encoding": "utf-8",
    "cssclass": None,
}


def parse_markup(markup: str) -> tuple[str, dict[str, Any]]:
    """Split tag markup into (lang, block-local options).

    Raises HighlightSyntaxError if the markup is not ``lang [options...]``.
    """
    m = SYNTAX.match(markup.strip())
    if m is None:
        raise HighlightSyntaxError(markup)
    return m.group(1).lower(), parse_options(m.group(2))


def parse_options(text: str) -> dict[str, Any]:
    """Parse ``key``, ``key=value`` and ``key="v1 v2"`` tokens.

    A bare key is ``True``; a quoted value becomes a list of words.  A bare
    ``linenos`` means inline line numbers.
    """
    options: dict[str, Any] = {}
    for key, value in OPTION.findall(text):
        if not value:
            options[key] = True
        elif value.startswith('"'):
            options[key] = value.strip('"').split()
        else:
            options[key] = value

    if options.get("linenos") is True:
        options["linenos"] = "inline"
    return options


def sanitize_options(options: dict[str, Any], safe: bool = False) -> dict[str, Any]:
    """Resolve the options a highlight block hands to the renderer.

    In safe mode only the whitelisted options survive; unset ones are dropped.
    """
    if not safe:
        return dict(options)

    resolved = {key: options.get(key, default) for key, default in SAFE_OPTIONS.items()}
    return {key: value for key, value in resolved.items() if value is not None}
