"""Parser for the pseudo-frontmatter text format (`*.mdx` content files).

A file is an optional `---`-delimited header of `key: value` lines followed
by a markdown body. Catalog bodies hold one `### <Product Name>` section per
product with marker lines such as::

    ### Wall Azan Clock
    - **ID**: wall-azan-01
    - **Price**: "450 SAR"
    - **Images**: ["/images/wall-1.jpg", "/images/wall-2.jpg"]

Business-hours bodies hold one `Day: hours` (or `Day; hours`) line per day.

This is a line scanner for a fixed convention, not a markdown parser.
"""

from __future__ import annotations

import logging
import re
from typing import Any, Callable

from pydantic import ValidationError

from shared.types import DAY_ORDER, Weekday

from .models import BusinessHour, Product

logger = logging.getLogger(__name__)

_FRONTMATTER_RE = re.compile(r"\A---\n(.*?)\n---", re.DOTALL)
_SECTION_RE = re.compile(r"^###\s+(.*)$")
_MARKER_RE = re.compile(r"^- \*\*(?P<field>[^*]+)\*\*:(?P<value>.*)$")
_SURROUNDING_QUOTES_RE = re.compile(r"^[\"']|[\"']$")
_LEADING_INT_RE = re.compile(r"^\s*[+-]?\d+")
_LEADING_FLOAT_RE = re.compile(r"^\s*[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")
_DAY_LINE_RE = re.compile(
    r"^\s*(Monday|Tuesday|Wednesday|Thursday|Friday|Saturday|Sunday)\s*[:;]\s*(.*)$",
    re.IGNORECASE,
)

# Values that mean a day is not open (compared lowercased)
CLOSED_INDICATORS = frozenset({"null", "closed", "close", "n/a", "na", "-"})
CLOSED_LABEL = "Closed"


def unquote(value: str) -> str:
    """Trim a value and drop a leading and/or trailing quote character."""
    return _SURROUNDING_QUOTES_RE.sub("", value.strip())


def parse_frontmatter(text: str) -> tuple[dict[str, str], str]:
    """Split a document into its header fields and body.

    Args:
        text: Full file content.

    Returns:
        (header, body). Without a leading `---` block the header is empty
        and the body is the input unchanged.
    """
    text = text.replace("\r\n", "\n")
    match = _FRONTMATTER_RE.match(text)
    if not match:
        return {}, text

    header: dict[str, str] = {}
    for line in match.group(1).split("\n"):
        colon = line.find(":")
        if colon > 0:
            key = line[:colon].strip()
            if key:
                header[key] = unquote(line[colon + 1 :])

    return header, text[match.end() :].strip()


# =============================================================================
# Image lists
# =============================================================================


def _read_quoted(text: str, start: int) -> tuple[str, int]:
    """Read a quoted string starting at text[start]; return (value, next index)."""
    quote = text[start]
    chars: list[str] = []
    i = start + 1
    while i < len(text):
        ch = text[i]
        if ch == "\\" and i + 1 < len(text):
            chars.append(text[i + 1])
            i += 2
            continue
        if ch == quote:
            return "".join(chars), i + 1
        chars.append(ch)
        i += 1
    # Unterminated string runs to end of line
    return "".join(chars), i


def parse_image_list(value: str) -> list[str]:
    """Parse a bracketed list like `["/a.jpg", '/b, c.jpg', /d.jpg]`.

    Quoted items are read whole, so commas and brackets inside quotes are
    part of the path. Unquoted items end at the next comma or `]`.
    Empty items are dropped; order is preserved.
    """
    start = value.find("[")
    if start == -1:
        return []

    images: list[str] = []
    i = start + 1
    n = len(value)
    while i < n:
        ch = value[i]
        if ch.isspace() or ch == ",":
            i += 1
            continue
        if ch == "]":
            break
        if ch in "\"'":
            item, i = _read_quoted(value, i)
        else:
            end = i
            while end < n and value[end] not in ",]":
                end += 1
            item, i = value[i:end], end
        item = item.strip()
        if item:
            images.append(item)

    return images


# =============================================================================
# Products
# =============================================================================


def _set_localized(field: str, language: str) -> Callable[[dict[str, Any], str], None]:
    def setter(product: dict[str, Any], value: str) -> None:
        product[field][language] = unquote(value)

    return setter


def _set_text(field: str) -> Callable[[dict[str, Any], str], None]:
    def setter(product: dict[str, Any], value: str) -> None:
        product[field] = unquote(value)

    return setter


def _set_number(
    field: str, pattern: re.Pattern[str], cast: Callable[[str], Any]
) -> Callable[[dict[str, Any], str], None]:
    """Setter reading the leading number of a value, so "126 reviews" gives 126."""

    def setter(product: dict[str, Any], value: str) -> None:
        match = pattern.match(unquote(value))
        if match is None:
            logger.debug("Ignoring unparseable %s value %r", field, value)
            return
        product[field] = cast(match.group())

    return setter


def _set_images(product: dict[str, Any], value: str) -> None:
    product["images"] = parse_image_list(value)


# Marker label -> how to apply its value to the record being built
MARKERS: dict[str, Callable[[dict[str, Any], str], None]] = {
    "ID": _set_text("id"),
    "Price": _set_text("price"),
    "Rating": _set_number("rating", _LEADING_FLOAT_RE, float),
    "Reviews": _set_number("reviews", _LEADING_INT_RE, int),
    "Images": _set_images,
    "Description EN": _set_localized("description", "en"),
    "Description AR": _set_localized("description", "ar"),
    "Name EN": _set_localized("name", "en"),
    "Name AR": _set_localized("name", "ar"),
    "Category EN": _set_localized("category", "en"),
    "Category AR": _set_localized("category", "ar"),
}


def _split_sections(body: str) -> list[tuple[str, list[str]]]:
    """Group body lines under their `### ` headings. Text before the first heading is ignored."""
    sections: list[tuple[str, list[str]]] = []
    for line in body.replace("\r\n", "\n").split("\n"):
        heading = _SECTION_RE.match(line)
        if heading:
            sections.append((heading.group(1).strip(), []))
        elif sections:
            sections[-1][1].append(line)
    return sections


def parse_product_section(heading: str, lines: list[str]) -> Product | None:
    """Build a product from one section, or None if essential fields are missing.

    Args:
        heading: Section heading text, used as the English name unless a
            `Name EN` marker overrides it.
        lines: Lines following the heading.

    Returns:
        Product with id, English name, price and at least one image, else None.
    """
    fields: dict[str, Any] = {
        "name": {"en": heading, "ar": ""},
        "description": {"en": "", "ar": ""},
        "category": {"en": "", "ar": ""},
        "images": [],
    }

    for line in lines:
        marker = _MARKER_RE.match(line.strip())
        if not marker:
            continue
        setter = MARKERS.get(marker.group("field").strip())
        if setter:
            setter(fields, marker.group("value"))

    if not (fields.get("id") and fields["name"]["en"] and fields.get("price") and fields["images"]):
        logger.debug("Dropping incomplete product section %r", heading)
        return None

    try:
        return Product.model_validate(fields)
    except ValidationError:
        logger.debug("Dropping invalid product section %r", heading, exc_info=True)
        return None


def parse_products(body: str) -> list[Product]:
    """Parse every complete product section of a catalog body, in file order."""
    products: list[Product] = []
    for heading, lines in _split_sections(body):
        if not heading:
            continue
        product = parse_product_section(heading, lines)
        if product is not None:
            products.append(product)
    return products


# =============================================================================
# Business hours
# =============================================================================


def parse_hours_value(raw: str) -> tuple[str, bool]:
    """Normalize a raw hours value to (display, is_open)."""
    value = raw.strip()
    if not value or value.lower() in CLOSED_INDICATORS:
        return CLOSED_LABEL, False
    return value, True


def sort_by_day(hours: list[BusinessHour]) -> list[BusinessHour]:
    """Return hours ordered Monday -> Sunday. Unknown day names sort last."""
    order = {day.value: index for index, day in enumerate(DAY_ORDER)}
    return sorted(hours, key=lambda hour: order.get(hour.day, len(order)))


def parse_business_hours(body: str) -> list[BusinessHour]:
    """Parse `Day: hours` lines into records ordered Monday -> Sunday.

    Days that never appear are omitted.
    """
    hours: list[BusinessHour] = []
    for line in body.replace("\r\n", "\n").split("\n"):
        match = _DAY_LINE_RE.match(line.strip())
        if not match:
            continue
        display, is_open = parse_hours_value(match.group(2))
        hours.append(
            BusinessHour(
                day=Weekday.from_name(match.group(1)).value,
                hours=display,
                is_open=is_open,
            )
        )
    return sort_by_day(hours)
