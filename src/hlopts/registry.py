"""Tag registry: tag classes and their pluggable option resolvers."""

from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import dataclass
from typing import Any

from hlopts.errors import UnknownTagError
from hlopts.highlight import HighlightBlock, sanitize_options
from hlopts.options import install


@dataclass
class TagEntry:
    """A registered tag class and the resolver its instances use."""

    tag_cls: type
    resolver: Callable[..., dict[str, Any]]


class TagRegistry:
    def __init__(self) -> None:
        self._tags: dict[str, TagEntry] = {}

    def register(self, name: str, tag_cls: type, resolver: Callable[..., dict[str, Any]]) -> None:
        self._tags[name] = TagEntry(tag_cls=tag_cls, resolver=resolver)

    def _entry(self, name: str) -> TagEntry:
        entry = self._tags.get(name)
        if entry is None:
            raise UnknownTagError(f"Unknown tag: {name!r}")
        return entry

    def wrap_resolver(self, name: str, wrapper: Callable[[Callable], Callable]) -> None:
        """Replace the resolver for *name* with ``wrapper(resolver)``."""
        entry = self._entry(name)
        entry.resolver = wrapper(entry.resolver)

    def create(self, name: str, markup: str, **kwargs: Any) -> Any:
        """Instantiate tag *name* for *markup* with its current resolver."""
        entry = self._entry(name)
        return entry.tag_cls(markup, resolver=entry.resolver, **kwargs)


def default_registry(config: Mapping[str, Any]) -> TagRegistry:
    """Registry with the ``highlight`` tag and site-wide options installed."""
    registry = TagRegistry()
    registry.register("highlight", HighlightBlock, sanitize_options)
    install(registry, config)
    return registry
