"""Highlight skill – the highlight block tag and its Pygments rendering.

Public API
----------
- parse_markup(markup) -> (lang, options)
- sanitize_options(options, safe=False) -> dict
- HighlightBlock(markup, *, resolver=sanitize_options, safe=False)
"""

from hlopts.highlight.markup import parse_markup, sanitize_options  # noqa: F401
from hlopts.highlight.renderer import HighlightBlock, highlight_source  # noqa: F401
