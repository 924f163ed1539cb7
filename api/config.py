"""API server configuration with support for environment variables and YAML files.

Configuration priority (highest to lowest):
1. Explicit kwargs passed to load_config()
2. Environment variables (CATALOG_*)
3. YAML config file (given, or the nearest catalog.config.yaml; flat or under `api:`)
4. Default values
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any

from shared.config import load_section, parse_bool, read_env


@dataclass
class APIConfig:
    """API server configuration.

    Attributes:
        host: Server bind address (default: 0.0.0.0).
        port: Server port (default: 8000).
        debug: Enable debug mode (default: False).
        log_level: Root logging level name (default: INFO).
        cache_max_age: Shared-cache max age in seconds for cacheable responses (default: 300).
        stale_while_revalidate: Seconds a stale response may be served while refreshing (default: 60).
    """

    host: str = "0.0.0.0"
    port: int = 8000
    debug: bool = False
    log_level: str = "INFO"
    cache_max_age: int = 300
    stale_while_revalidate: int = 60

    @property
    def cache_control(self) -> str:
        """Cache-Control header value for cacheable content responses."""
        return (
            f"public, s-maxage={self.cache_max_age}, "
            f"stale-while-revalidate={self.stale_while_revalidate}"
        )


def load_config(
    config_file: str | Path | None = None,
    **overrides: Any,
) -> APIConfig:
    """Load API configuration with priority: overrides > env vars > yaml > defaults.

    Args:
        config_file: YAML config file (default: discover catalog.config.yaml from cwd).
        **overrides: Direct config overrides (highest priority).

    Returns:
        APIConfig instance.

    Example:
        # From environment variables
        config = load_config()

        # From YAML file
        config = load_config("catalog.config.yaml")

        # Disable shared caching for local development
        config = load_config(cache_max_age=0)
    """
    config: dict[str, Any] = {}

    # 1. Load from YAML file (lowest priority after defaults)
    config.update(load_section("api", config_file))

    # 2. Override with environment variables
    config.update(
        read_env(
            {
                "host": "CATALOG_HOST",
                "port": "CATALOG_PORT",
                "debug": "CATALOG_DEBUG",
                "log_level": "CATALOG_LOG_LEVEL",
                "cache_max_age": "CATALOG_CACHE_MAX_AGE",
                "stale_while_revalidate": "CATALOG_STALE_WHILE_REVALIDATE",
            }
        )
    )

    # 3. Override with explicit kwargs (highest priority)
    config.update({k: v for k, v in overrides.items() if v is not None})

    # Type conversions
    for key in ("port", "cache_max_age", "stale_while_revalidate"):
        if key in config:
            config[key] = int(config[key])
    if "debug" in config:
        config["debug"] = parse_bool(config["debug"])
    if "log_level" in config:
        config["log_level"] = str(config["log_level"]).upper()

    return APIConfig(**config)
