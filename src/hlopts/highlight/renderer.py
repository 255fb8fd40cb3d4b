"""Highlight block tag: option resolution and Pygments rendering."""

from __future__ import annotations

from collections.abc import Callable
from html import escape
from typing import Any

from pygments import highlight as _pygments_highlight
from pygments.formatters import HtmlFormatter
from pygments.util import ClassNotFound, OptionError

from hlopts.errors import HighlightOptionError
from hlopts.highlight.markup import parse_markup, sanitize_options
from hlopts.lang import get_lexer, split_options

Resolver = Callable[..., dict[str, Any]]


class HighlightBlock:
    """One ``highlight`` tag occurrence.

    The option-resolution step is delegated to *resolver*, called as
    ``resolver(options, safe)``, so plugins can wrap it from the registry.
    """

    def __init__(
        self,
        markup: str,
        *,
        resolver: Resolver = sanitize_options,
        safe: bool = False,
    ) -> None:
        self.markup = markup
        self.lang, self.options = parse_markup(markup)
        self.resolver = resolver
        self.safe = safe

    def resolve_options(self) -> dict[str, Any]:
        return self.resolver(self.options, self.safe)

    def render(self, code: str | bytes) -> str:
        """Highlight *code* and wrap it in a ``<figure class="highlight">``.

        Bytes are decoded by the lexer using the resolved ``encoding`` option.
        """
        options = self.resolve_options()
        html = highlight_source(code, self.lang, options)
        lang = escape(self.lang, quote=True)
        return f'<figure class="highlight" data-lang="{lang}">{html}</figure>'


def highlight_source(source: str | bytes, lang: str, options: dict[str, Any]) -> str:
    """Apply Pygments highlighting using resolved tag options.

    Raises HighlightOptionError if Pygments rejects an option value, a style
    name, or the source encoding.
    """
    lexer_opts, formatter_opts = split_options(options)
    try:
        lexer = get_lexer(lang, **lexer_opts)
        formatter = HtmlFormatter(**formatter_opts)
        return _pygments_highlight(source, lexer, formatter)
    except (OptionError, ClassNotFound) as exc:
        raise HighlightOptionError(f"Invalid highlight option for {lang!r}: {exc}") from exc
    except (UnicodeDecodeError, LookupError) as exc:
        raise HighlightOptionError(f"Cannot decode source for {lang!r}: {exc}") from exc
