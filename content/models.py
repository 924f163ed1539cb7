"""Pydantic models for catalog and business-hours content.

Field names follow Python conventions; the on-disk JSON keys (camelCase)
are declared as aliases. Models are populated by either name, and
`to_wire()` serializes back to the on-disk shape using only the fields
that were actually present, so a JSON product round-trips unchanged.
"""

from __future__ import annotations

from typing import Any, Generic, TypeVar

from pydantic import BaseModel, ConfigDict, Field

from shared.types import Language, LoadStatus


class ContentModel(BaseModel):
    """Base for all content records."""

    model_config = ConfigDict(populate_by_name=True, extra="allow")

    def to_wire(self) -> dict[str, Any]:
        """Serialize with on-disk key names, omitting fields never set."""
        data = self.model_dump(by_alias=True, exclude_unset=True)
        data.update({k: v for k, v in (self.model_extra or {}).items() if k not in data})
        return data


# =============================================================================
# Catalog
# =============================================================================


class LocalizedText(ContentModel):
    """A string in both site languages. A missing translation is empty."""

    en: str = ""
    ar: str = ""

    def get(self, language: Language | str) -> str:
        return getattr(self, Language(language).value)


class Specifications(ContentModel):
    dimensions: str = ""
    weight: str = ""
    display: str = ""
    power: str = ""
    languages: list[str] = Field(default_factory=list)


class Product(ContentModel):
    """A catalog entry.

    `images` keeps gallery order; the first image is the primary one.
    `slug` and `category_id` only exist in JSON content.
    """

    id: str
    slug: str | None = None
    name: LocalizedText = Field(default_factory=LocalizedText)
    description: LocalizedText = Field(default_factory=LocalizedText)
    price: str
    images: list[str] = Field(default_factory=list)
    rating: float | None = None
    reviews: int | None = None
    category: LocalizedText = Field(default_factory=LocalizedText)
    category_id: str | None = Field(default=None, alias="categoryId")
    features: list[str] = Field(default_factory=list)
    specifications: Specifications | None = None

    @property
    def primary_image(self) -> str | None:
        return self.images[0] if self.images else None

    def is_complete(self) -> bool:
        """True when id, English name, price and at least one image are present."""
        return bool(self.id and self.name.en and self.price and self.images)


class Category(ContentModel):
    id: str
    name_en: str = Field(default="", alias="nameEn")
    name_ar: str = Field(default="", alias="nameAr")
    description: str = ""


class ProductCatalog(ContentModel):
    """Top-level shape of `products/catalog.json`."""

    title: str = ""
    description: str = ""
    last_updated: str = Field(default="", alias="lastUpdated")
    categories: list[Category] = Field(default_factory=list)
    products: list[Product] = Field(default_factory=list)


# =============================================================================
# Business hours and contact
# =============================================================================


class BusinessHour(ContentModel):
    """One day's opening status. `hours` is a display string."""

    day: str
    hours: str
    is_open: bool = Field(alias="isOpen")


class HolidayHours(ContentModel):
    note: str = ""


class Contact(ContentModel):
    phone: str = ""
    whatsapp: str = ""
    email: str = ""


class Location(ContentModel):
    street: str = ""
    district: str = ""
    country: str = ""


class BusinessHoursData(ContentModel):
    """Top-level shape of `business/hours.json`.

    `regular_hours` maps lowercase day keys to either a closed label or an
    `{"open": ..., "close": ...}` object. Values of any other shape are kept
    as-is and skipped when building `BusinessHour` records.
    """

    title: str = ""
    description: str = ""
    last_updated: str = Field(default="", alias="lastUpdated")
    regular_hours: dict[str, Any] = Field(default_factory=dict, alias="regularHours")
    holiday_hours: HolidayHours = Field(default_factory=HolidayHours, alias="holidayHours")
    contact: Contact = Field(default_factory=Contact)
    location: Location = Field(default_factory=Location)


class BusinessContact(ContentModel):
    """Projection of contact, location and holiday note for the contact page."""

    contact: Contact
    location: Location
    holiday_hours: HolidayHours = Field(alias="holidayHours")


# =============================================================================
# Load results
# =============================================================================

T = TypeVar("T")


class LoadResult(BaseModel, Generic[T]):
    """Outcome of loading one content collection.

    Distinguishes "legitimately no content" (empty) from "content store is
    broken" (error). `items` is always a list, empty unless status is ok.
    """

    status: LoadStatus
    items: list[T] = Field(default_factory=list)
    source: str | None = None
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.status == LoadStatus.ok

    @classmethod
    def of(cls, items: list[T], source: str | None = None) -> "LoadResult[T]":
        status = LoadStatus.ok if items else LoadStatus.empty
        return cls(status=status, items=items, source=source)

    @classmethod
    def failed(cls, error: BaseException, source: str | None = None) -> "LoadResult[T]":
        return cls(status=LoadStatus.error, source=source, error=str(error))
