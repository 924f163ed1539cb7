"""Catalog content loader: products, categories, business hours and contact details."""

from .config import ContentConfig, load_config
from .errors import ContentError, ContentNotFoundError, MalformedContentError
from .frontmatter import (
    CLOSED_INDICATORS,
    parse_business_hours,
    parse_frontmatter,
    parse_image_list,
    parse_products,
)
from .models import (
    BusinessContact,
    BusinessHour,
    BusinessHoursData,
    Category,
    Contact,
    HolidayHours,
    LoadResult,
    LocalizedText,
    Location,
    Product,
    ProductCatalog,
    Specifications,
)
from .repository import (
    ContentRepository,
    find_product_by_id,
    find_products_by_category,
    get_repository,
    load_business_contact,
    load_business_hours,
    load_categories,
    load_products,
)
from .sources import ContentSource, JsonContentSource, TextContentSource, select_source

__all__ = [
    # Configuration
    "ContentConfig",
    "load_config",
    # Errors
    "ContentError",
    "ContentNotFoundError",
    "MalformedContentError",
    # Repository
    "ContentRepository",
    "get_repository",
    "load_products",
    "load_business_hours",
    "find_product_by_id",
    "find_products_by_category",
    "load_categories",
    "load_business_contact",
    # Sources
    "ContentSource",
    "JsonContentSource",
    "TextContentSource",
    "select_source",
    # Parsing
    "CLOSED_INDICATORS",
    "parse_frontmatter",
    "parse_products",
    "parse_image_list",
    "parse_business_hours",
    # Models
    "BusinessContact",
    "BusinessHour",
    "BusinessHoursData",
    "Category",
    "Contact",
    "HolidayHours",
    "LoadResult",
    "LocalizedText",
    "Location",
    "Product",
    "ProductCatalog",
    "Specifications",
]
