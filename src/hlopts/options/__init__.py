"""Options skill – site-wide Pygments options for highlight blocks.

Public API
----------
- merge_options(site, local) -> dict
- site_options(config) -> Mapping
- with_site_options(config) -> decorator
- install(registry, config, tag="highlight") -> None
"""

from hlopts.options.merger import (  # noqa: F401
    install,
    merge_options,
    site_options,
    with_site_options,
)
