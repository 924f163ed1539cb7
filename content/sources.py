"""Content sources: one interface, one strategy per on-disk format.

`JsonContentSource` reads strict JSON; `TextContentSource` reads the
pseudo-frontmatter text format. Callers go through `select_source()` and
never need to know which format backs a given content root.

Sources raise `ContentError` subclasses. Catching and degrading to empty
results is the repository's job, not the source's.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, TypeVar

from pydantic import ValidationError
from pydantic_core import from_json, to_json

from shared.types import DAY_ORDER, ContentFormat

from .config import ContentConfig
from .errors import ContentNotFoundError, MalformedContentError
from .frontmatter import parse_business_hours, parse_frontmatter, parse_products
from .models import (
    BusinessContact,
    BusinessHour,
    BusinessHoursData,
    Category,
    ContentModel,
    Product,
    ProductCatalog,
)

logger = logging.getLogger(__name__)

M = TypeVar("M", bound=ContentModel)


def _validate_entries(model: type[M], entries: list[Any], kind: str, path: Path) -> list[M]:
    """Strictly validate each entry, keeping file order and skipping invalid ones."""
    valid: list[M] = []
    for index, entry in enumerate(entries):
        try:
            valid.append(model.model_validate_json(to_json(entry), strict=True))
        except ValidationError as err:
            logger.warning("Skipping invalid %s #%d in %s: %s", kind, index, path, err)
    return valid


class ContentSource(ABC):
    """Reads catalog and business content from one format under a content root."""

    content_format: ContentFormat

    def __init__(self, config: ContentConfig) -> None:
        self._config = config

    @property
    def products_file(self) -> Path:
        return self._config.file_for(self._config.products_path, self.content_format)

    @property
    def hours_file(self) -> Path:
        return self._config.file_for(self._config.hours_path, self.content_format)

    def _read(self, path: Path) -> str:
        """Read a content file as text.

        Raises:
            ContentNotFoundError: File is missing or unreadable.
            MalformedContentError: File is not valid text in the configured encoding.
        """
        try:
            return path.read_text(encoding=self._config.encoding)
        except UnicodeDecodeError as err:
            raise MalformedContentError(f"Cannot decode {path}: {err}", path) from err
        except OSError as err:
            raise ContentNotFoundError(f"Cannot read {path}: {err}", path) from err

    @abstractmethod
    def products(self) -> list[Product]:
        """All products in catalog order."""

    @abstractmethod
    def categories(self) -> list[Category]:
        """Catalog categories, if the format carries them."""

    @abstractmethod
    def business_hours(self) -> list[BusinessHour]:
        """Business hours ordered Monday -> Sunday."""

    @abstractmethod
    def business_contact(self) -> BusinessContact | None:
        """Contact, location and holiday note, if the format carries them."""

    def matches_id(self, product: Product, product_id: str) -> bool:
        return product.id == product_id

    def matches_category(self, product: Product, category: str) -> bool:
        return category in (product.category.en, product.category.ar)


class JsonContentSource(ContentSource):
    """Strict JSON content: `catalog.json` and `hours.json`."""

    content_format = ContentFormat.json

    def _catalog(self) -> ProductCatalog:
        """Parse the catalog, validating each product and category on its own.

        Entries are validated strictly so values are never coerced; an entry
        that does not fit its model is logged and skipped without affecting
        the rest of the catalog.
        """
        path = self.products_file
        try:
            data = from_json(self._read(path))
        except ValueError as err:
            raise MalformedContentError(f"Invalid JSON in {path}: {err}", path) from err

        if not isinstance(data, dict):
            raise MalformedContentError(f"Catalog {path} must be a JSON object", path)

        products = data.pop("products", [])
        categories = data.pop("categories", [])
        if not isinstance(products, list) or not isinstance(categories, list):
            raise MalformedContentError(
                f"Catalog {path}: 'products' and 'categories' must be arrays", path
            )

        try:
            catalog = ProductCatalog.model_validate(data)
        except ValidationError as err:
            raise MalformedContentError(f"Invalid catalog {path}: {err}", path) from err

        catalog.categories = _validate_entries(Category, categories, "category", path)
        catalog.products = _validate_entries(Product, products, "product", path)
        return catalog

    def _hours_data(self) -> BusinessHoursData:
        path = self.hours_file
        try:
            return BusinessHoursData.model_validate_json(self._read(path))
        except ValidationError as err:
            raise MalformedContentError(f"Invalid business hours {path}: {err}", path) from err

    def products(self) -> list[Product]:
        return self._catalog().products

    def categories(self) -> list[Category]:
        return self._catalog().categories

    def business_hours(self) -> list[BusinessHour]:
        data = self._hours_data()
        hours: list[BusinessHour] = []

        for day in DAY_ORDER:
            value = data.regular_hours.get(day.name)

            if isinstance(value, str):
                # A bare string is a closed label, e.g. "Closed"
                hours.append(
                    BusinessHour(day=day.value, hours=value, is_open=value.lower() != "closed")
                )
            elif isinstance(value, dict) and value.get("open") and value.get("close"):
                hours.append(
                    BusinessHour(
                        day=day.value,
                        hours=f"{value['open']} - {value['close']}",
                        is_open=True,
                    )
                )
            elif value is not None:
                logger.debug("Skipping %s hours with unexpected shape: %r", day.value, value)

        return hours

    def business_contact(self) -> BusinessContact:
        data = self._hours_data()
        return BusinessContact(
            contact=data.contact,
            location=data.location,
            holiday_hours=data.holiday_hours,
        )

    def matches_id(self, product: Product, product_id: str) -> bool:
        return product_id in (product.id, product.slug)

    def matches_category(self, product: Product, category: str) -> bool:
        return super().matches_category(product, category) or product.category_id == category


class TextContentSource(ContentSource):
    """Pseudo-frontmatter content: `catalog.mdx` and `hours.mdx`.

    The text format has no categories list and no contact block.
    """

    content_format = ContentFormat.mdx

    def products(self) -> list[Product]:
        _, body = parse_frontmatter(self._read(self.products_file))
        return parse_products(body)

    def categories(self) -> list[Category]:
        return []

    def business_hours(self) -> list[BusinessHour]:
        _, body = parse_frontmatter(self._read(self.hours_file))
        return parse_business_hours(body)

    def business_contact(self) -> None:
        return None


SOURCES: dict[ContentFormat, type[ContentSource]] = {
    ContentFormat.json: JsonContentSource,
    ContentFormat.mdx: TextContentSource,
}


def resolve_format(config: ContentConfig, stem: str) -> ContentFormat:
    """Pick the concrete format for one content file.

    With `auto`, JSON wins when `<stem>.json` exists; otherwise the text format.
    """
    if config.content_format != ContentFormat.auto:
        return config.content_format
    if config.file_for(stem, ContentFormat.json).exists():
        return ContentFormat.json
    return ContentFormat.mdx


def select_source(config: ContentConfig, stem: str) -> ContentSource:
    """Build the source that should read the file identified by `stem`."""
    return SOURCES[resolve_format(config, stem)](config)
