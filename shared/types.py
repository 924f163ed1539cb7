"""Shared type definitions for the catalog content loader and API.

These enums inherit from both `str` and `Enum` to ensure JSON serializability.
This allows `json.dumps(Weekday.monday)` to work directly without custom encoders.
"""

from enum import Enum


class Language(str, Enum):
    """Language tags used for localized content fields."""

    en = "en"
    ar = "ar"


class Weekday(str, Enum):
    """Canonical English day names, declared in display order.

    Iteration order is Monday -> Sunday and is relied on for sorting
    business hours.
    """

    monday = "Monday"
    tuesday = "Tuesday"
    wednesday = "Wednesday"
    thursday = "Thursday"
    friday = "Friday"
    saturday = "Saturday"
    sunday = "Sunday"

    @classmethod
    def from_name(cls, name: str) -> "Weekday":
        """Look up a day by name, ignoring case and surrounding whitespace."""
        return cls[name.strip().lower()]


# Fixed Monday -> Sunday order
DAY_ORDER: tuple[Weekday, ...] = tuple(Weekday)


class ContentFormat(str, Enum):
    """On-disk content format.

    - auto: pick JSON when the .json file exists, otherwise the text format
    - json: strict JSON files
    - mdx: pseudo-frontmatter text files
    """

    auto = "auto"
    json = "json"
    mdx = "mdx"


class LoadStatus(str, Enum):
    """Outcome of a content load.

    - ok: content was read and produced at least one record
    - empty: content was read but produced no records
    - error: the file was missing, unreadable or malformed
    """

    ok = "ok"
    empty = "empty"
    error = "error"
