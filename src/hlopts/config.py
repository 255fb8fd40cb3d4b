"""Site configuration loading.

The site configuration is read once per run from YAML files and handed to the
components that need it.  Without explicit files the first of ``_config.yml``
or ``_config.yaml`` in the site source directory is used.  When several files
are given, later files override earlier ones key by key.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator, Mapping
from pathlib import Path
from types import MappingProxyType
from typing import Any

import yaml

from hlopts.errors import ConfigError

log = logging.getLogger(__name__)

DEFAULT_CONFIG_FILES = ("_config.yml", "_config.yaml")

PYGMENTS_OPTIONS_KEY = "pygments_options"


class SiteConfig(Mapping):
    """Read-only view over the merged site configuration.

    Nested mappings are exposed as read-only proxies and lists as tuples.
    """

    def __init__(self, data: Mapping[str, Any] | None = None) -> None:
        self._data = {key: _freeze(value) for key, value in (data or {}).items()}

    def __getitem__(self, key: str) -> Any:
        return self._data[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._data)

    def __len__(self) -> int:
        return len(self._data)

    def __repr__(self) -> str:
        return f"SiteConfig({self._data!r})"

    @property
    def safe(self) -> bool:
        return bool(self._data.get("safe", False))


def _freeze(value: Any) -> Any:
    if isinstance(value, Mapping):
        return MappingProxyType({key: _freeze(v) for key, v in value.items()})
    if isinstance(value, list):
        return tuple(_freeze(v) for v in value)
    return value


def load_site_config(
    source: str | Path = ".",
    config_files: list[str] | None = None,
) -> SiteConfig:
    """Load the site configuration.

    Raises ConfigError if an explicit file is missing, a file is not valid
    YAML, or its top level (or its ``pygments_options``) is not a mapping.
    """
    if config_files is not None:
        paths = [Path(f) for f in config_files]
        for p in paths:
            if not p.is_file():
                raise ConfigError(f"Configuration file not found: {p}")
    else:
        root = Path(source)
        paths = [root / name for name in DEFAULT_CONFIG_FILES if (root / name).is_file()][:1]
        if not paths:
            log.debug("No configuration file in %s, using empty config", root)

    merged: dict[str, Any] = {}
    for p in paths:
        merged.update(_read_config_file(p))

    return SiteConfig(merged)


def _read_config_file(path: Path) -> dict[str, Any]:
    log.debug("Reading configuration from %s", path)
    try:
        with open(path, encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as exc:
        raise ConfigError(f"Invalid YAML in {path}: {exc}") from exc

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigError(f"Configuration file {path} must contain a mapping at the top level")

    options = data.get(PYGMENTS_OPTIONS_KEY)
    if options is not None and not isinstance(options, dict):
        raise ConfigError(
            f"'{PYGMENTS_OPTIONS_KEY}' in {path} must be a mapping, "
            f"got {type(options).__name__}"
        )
    return data
