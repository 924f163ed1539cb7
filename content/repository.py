"""Content repository: the single entry point for reading site content.

Every call re-reads the underlying file; nothing is cached. Errors never
reach the caller. Plain methods degrade to `[]` / `None` after logging,
while the `*_result()` methods return a `LoadResult` that tells an empty
content store apart from a broken one.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Callable, TypeVar

from .config import ContentConfig, load_config
from .errors import ContentNotFoundError
from .models import BusinessContact, BusinessHour, Category, LoadResult, Product
from .sources import ContentSource, resolve_format, select_source

logger = logging.getLogger(__name__)

T = TypeVar("T")


class ContentRepository:
    """Loads products, categories, business hours and contact details.

    Args:
        config: Content configuration. Defaults to `load_config()`, which reads
            the nearest catalog.config.yaml and CATALOG_* env vars.
    """

    def __init__(self, config: ContentConfig | None = None) -> None:
        self._config = config or load_config()

    @property
    def config(self) -> ContentConfig:
        return self._config

    def describe(self) -> dict[str, str]:
        """Which concrete format currently backs products and hours."""
        return {
            "products": resolve_format(self._config, self._config.products_path).value,
            "hours": resolve_format(self._config, self._config.hours_path).value,
        }

    def _load(
        self,
        what: str,
        stem: str,
        fetch: Callable[[ContentSource], list[T]],
    ) -> tuple[LoadResult[T], ContentSource | None]:
        """Run `fetch` against the source for `stem`, converting any failure to an error result."""
        path: Path | str = stem
        source: ContentSource | None = None
        try:
            source = select_source(self._config, stem)
            path = self._config.file_for(stem, source.content_format)
            items = fetch(source)
        except ContentNotFoundError as err:
            logger.warning("Error loading %s from %s: %s", what, path, err)
            return LoadResult.failed(err, str(path)), source
        except Exception as err:
            logger.exception("Error loading %s from %s", what, path)
            return LoadResult.failed(err, str(path)), source

        return LoadResult.of(items, str(path)), source

    # -------------------------------------------------------------------------
    # Products and categories
    # -------------------------------------------------------------------------

    def load_products_result(self) -> LoadResult[Product]:
        result, _ = self._load("products", self._config.products_path, lambda s: s.products())
        return result

    def load_products(self) -> list[Product]:
        """All products in catalog order, or [] if the catalog cannot be loaded."""
        return self.load_products_result().items

    def load_categories_result(self) -> LoadResult[Category]:
        result, _ = self._load("categories", self._config.products_path, lambda s: s.categories())
        return result

    def load_categories(self) -> list[Category]:
        """Catalog categories. Only JSON catalogs carry them."""
        return self.load_categories_result().items

    def find_product_by_id(self, product_id: str) -> Product | None:
        """First product whose id (or, for JSON catalogs, slug) equals `product_id`."""
        result, source = self._load("products", self._config.products_path, lambda s: s.products())
        if source is None:
            return None
        for product in result.items:
            if source.matches_id(product, product_id):
                return product
        return None

    def find_products_by_category(self, category: str) -> list[Product]:
        """Products whose English or Arabic category name (or JSON categoryId) equals `category`."""
        result, source = self._load("products", self._config.products_path, lambda s: s.products())
        if source is None:
            return []
        return [product for product in result.items if source.matches_category(product, category)]

    # -------------------------------------------------------------------------
    # Business hours and contact
    # -------------------------------------------------------------------------

    def load_business_hours_result(self) -> LoadResult[BusinessHour]:
        result, _ = self._load(
            "business hours", self._config.hours_path, lambda s: s.business_hours()
        )
        return result

    def load_business_hours(self) -> list[BusinessHour]:
        """Business hours ordered Monday -> Sunday; days missing from the source are omitted."""
        return self.load_business_hours_result().items

    def load_business_contact(self) -> BusinessContact | None:
        """Contact, location and holiday note, or None if unavailable."""
        result, _ = self._load("contact info", self._config.hours_path, _contact_items)
        return result.items[0] if result.items else None


def _contact_items(source: ContentSource) -> list[BusinessContact]:
    contact = source.business_contact()
    return [contact] if contact is not None else []


def get_repository() -> ContentRepository:
    """Repository configured from catalog.config.yaml (if found) and CATALOG_* env vars."""
    return ContentRepository()


# Module-level shortcuts over a freshly configured repository


def load_products() -> list[Product]:
    return get_repository().load_products()


def load_business_hours() -> list[BusinessHour]:
    return get_repository().load_business_hours()


def find_product_by_id(product_id: str) -> Product | None:
    return get_repository().find_product_by_id(product_id)


def find_products_by_category(category: str) -> list[Product]:
    return get_repository().find_products_by_category(category)


def load_categories() -> list[Category]:
    return get_repository().load_categories()


def load_business_contact() -> BusinessContact | None:
    return get_repository().load_business_contact()
