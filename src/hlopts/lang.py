"""Pygments lexer lookup shared by the highlight tag."""

from __future__ import annotations

from typing import Any

from pygments.lexer import Lexer
from pygments.lexers import TextLexer, get_lexer_by_name
from pygments.util import ClassNotFound

# Option names understood by lexers rather than formatters
LEXER_OPTIONS = frozenset({
    "startinline",
    "encoding",
    "stripnl",
    "stripall",
    "ensurenl",
    "tabsize",
})


def split_options(options: dict[str, Any]) -> tuple[dict[str, Any], dict[str, Any]]:
    """Split resolved options into (lexer_options, formatter_options)."""
    lexer_opts = {k: v for k, v in options.items() if k in LEXER_OPTIONS}
    formatter_opts = {k: v for k, v in options.items() if k not in LEXER_OPTIONS}
    return lexer_opts, formatter_opts


def get_lexer(lang: str, **options: Any) -> Lexer:
    """Return a lexer for *lang*, falling back to plain text for unknown names."""
    try:
        return get_lexer_by_name(lang, **options)
    except ClassNotFound:
        return TextLexer(**options)
