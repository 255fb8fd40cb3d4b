"""Overlay site-wide Pygments options onto highlight block options.

The site configuration may carry a ``pygments_options`` mapping, e.g.::

    pygments_options:
      startinline: true
      linenos: table

Those values become the defaults for every highlight block.  Options given on
the tag itself take precedence over them.
"""

from __future__ import annotations

import functools
import logging
from collections.abc import Callable, Mapping
from typing import Any

from hlopts.config import PYGMENTS_OPTIONS_KEY

log = logging.getLogger(__name__)


def site_options(config: Mapping[str, Any]) -> Mapping[str, Any]:
    """Return the site-wide options, or an empty mapping when none are set."""
    options = config.get(PYGMENTS_OPTIONS_KEY)
    return {} if options is None else options


def merge_options(site: Mapping[str, Any], local: Mapping[str, Any]) -> dict[str, Any]:
    """Return *site* overlaid by *local*; neither input is modified."""
    return {**site, **local}


def with_site_options(config: Mapping[str, Any]) -> Callable[[Callable], Callable]:
    """Decorator factory wrapping an option resolver with the site defaults.

    The wrapped resolver keeps the original calling convention.
    """

    def decorator(resolver: Callable[..., Mapping[str, Any]]) -> Callable[..., dict[str, Any]]:
        @functools.wraps(resolver)
        def resolve(*args: Any, **kwargs: Any) -> dict[str, Any]:
            local = resolver(*args, **kwargs)
            site = site_options(config)
            merged = merge_options(site, local)
            log.debug("Merged options: site=%r local=%r -> %r", site, local, merged)
            return merged

        return resolve

    return decorator


def install(registry: Any, config: Mapping[str, Any], tag: str = "highlight") -> None:
    """Wrap the resolver registered for *tag* with the site-wide options."""
    registry.wrap_resolver(tag, with_site_options(config))
