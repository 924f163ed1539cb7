"""Content loader configuration with support for environment variables and YAML files.

Configuration priority (highest to lowest):
1. Explicit kwargs passed to load_config()
2. Environment variables (CATALOG_*)
3. YAML config file (given, or the nearest catalog.config.yaml; flat or under `content:`)
4. Default values
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from shared.config import load_section, read_env
from shared.types import ContentFormat

# Path stems relative to the content root; the extension is chosen per format
PRODUCTS_STEM = "products/catalog"
HOURS_STEM = "business/hours"

FORMAT_EXTENSIONS = {
    ContentFormat.json: ".json",
    ContentFormat.mdx: ".mdx",
}


@dataclass
class ContentConfig:
    """Configuration for the content repository.

    Attributes:
        content_root: Directory holding the content files (default: public/content).
        content_format: auto, json or mdx (default: auto).
        products_path: Catalog file stem relative to content_root.
        hours_path: Business-hours file stem relative to content_root.
        encoding: Text encoding of content files (default: utf-8).
    """

    content_root: Path = field(default_factory=lambda: Path("public/content"))
    content_format: ContentFormat = ContentFormat.auto
    products_path: str = PRODUCTS_STEM
    hours_path: str = HOURS_STEM
    encoding: str = "utf-8"

    def __post_init__(self) -> None:
        self.content_root = Path(self.content_root)
        self.content_format = ContentFormat(self.content_format)

    def file_for(self, stem: str, content_format: ContentFormat) -> Path:
        """Absolute-or-relative path of `stem` in the given concrete format."""
        return self.content_root / f"{stem}{FORMAT_EXTENSIONS[content_format]}"


def load_config(
    config_file: str | Path | None = None,
    **overrides: Any,
) -> ContentConfig:
    """Load content configuration with priority: overrides > env vars > yaml > defaults.

    Args:
        config_file: YAML config file (default: discover catalog.config.yaml from cwd).
        **overrides: Direct config overrides (highest priority).

    Returns:
        ContentConfig instance.

    Example:
        # From environment variables
        config = load_config()

        # Point at a fixture directory in tests
        config = load_config(content_root=tmp_path, content_format="mdx")
    """
    config: dict[str, Any] = {}

    # 1. Load from YAML file (lowest priority after defaults)
    config.update(load_section("content", config_file))

    # 2. Override with environment variables
    config.update(
        read_env(
            {
                "content_root": "CATALOG_CONTENT_ROOT",
                "content_format": "CATALOG_CONTENT_FORMAT",
                "encoding": "CATALOG_ENCODING",
            }
        )
    )

    # 3. Override with explicit kwargs (highest priority)
    config.update({k: v for k, v in overrides.items() if v is not None})

    # Type conversions
    if "content_format" in config and isinstance(config["content_format"], str):
        config["content_format"] = ContentFormat(config["content_format"].lower())

    return ContentConfig(**config)
