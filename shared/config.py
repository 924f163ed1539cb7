"""Shared configuration utilities for the content loader and API.

Both the loader and the API read from a single config file: `catalog.config.yaml`,
looked up from the current directory towards the filesystem root.

Configuration priority (highest to lowest):
1. Explicit kwargs passed to load functions
2. Environment variables (CATALOG_*)
3. catalog.config.yaml file (given explicitly, or the nearest one found)
4. Default values

Example catalog.config.yaml:
```yaml
content:
  content_root: public/content
  content_format: auto

api:
  port: 3000
  cache_max_age: 300
```
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any

import yaml

CONFIG_FILENAME = "catalog.config.yaml"


def find_config_file(start_path: str | Path | None = None) -> Path | None:
    """Nearest catalog.config.yaml at or above `start_path` (default: cwd)."""
    start = Path(start_path or Path.cwd()).absolute()
    for directory in (start, *start.parents):
        candidate = directory / CONFIG_FILENAME
        if candidate.is_file():
            return candidate
    return None


def load_section(
    section: str,
    config_file: str | Path | None = None,
    start_path: str | Path | None = None,
) -> dict[str, Any]:
    """Load the settings for one component from the YAML config file.

    Args:
        section: Section name ('content' or 'api').
        config_file: Explicit config file. When omitted, the nearest
            catalog.config.yaml above `start_path` is used.
        start_path: Where discovery starts (default: cwd).

    Returns:
        The `section:` mapping of a sectioned file, a flat file as-is, or an
        empty dict when there is no file or the section is absent.

    Raises:
        ValueError: The file does not hold a YAML mapping.
    """
    path = Path(config_file) if config_file else find_config_file(start_path)
    if path is None or not path.is_file():
        return {}

    with open(path, encoding="utf-8") as f:
        raw = yaml.safe_load(f) or {}
    if not isinstance(raw, dict):
        raise ValueError(f"Config file {path} must contain a mapping")

    value = raw.get(section)
    if isinstance(value, dict):
        return value
    # A sectioned file without this section contributes nothing
    if section in raw or any(isinstance(v, dict) for v in raw.values()):
        return {}
    return raw


def read_env(env_mapping: dict[str, str]) -> dict[str, str]:
    """Collect non-empty environment variables for the given key -> var mapping."""
    values: dict[str, str] = {}
    for key, env_var in env_mapping.items():
        if env_val := os.getenv(env_var):
            values[key] = env_val
    return values


def parse_bool(value: Any) -> bool:
    """Parse a config flag from a bool or a string like 'true' / '1' / 'yes'."""
    if isinstance(value, bool):
        return value
    return str(value).lower() in ("true", "1", "yes")
