"""Shared fixtures: content roots written into tmp_path."""

from __future__ import annotations

import copy
import json
from pathlib import Path
from typing import Any, Callable

import pytest

from content import ContentConfig, ContentRepository

JSON_CATALOG: dict[str, Any] = {
    "title": "Islamic Clocks Catalog",
    "description": "Azan clocks",
    "lastUpdated": "2025-01-15",
    "categories": [
        {
            "id": "wall-clocks",
            "nameEn": "Wall Clocks",
            "nameAr": "ساعات حائط",
            "description": "Large-display azan clocks",
        },
        {
            "id": "desk-clocks",
            "nameEn": "Desk Clocks",
            "nameAr": "ساعات مكتب",
            "description": "Compact azan clocks",
        },
    ],
    "products": [
        {
            "id": "azan-wall-01",
            "slug": "grand-azan-wall-clock",
            "name": {"en": "Grand Azan Wall Clock", "ar": "ساعة الأذان الحائطية"},
            "description": {"en": "LED wall clock", "ar": "ساعة حائط"},
            "price": "450 SAR",
            "images": ["/img/wall-1.jpg", "/img/wall-2.jpg", "/img/wall-3.jpg"],
            "rating": 4.8,
            "reviews": 126,
            "category": {"en": "Wall Clocks", "ar": "ساعات حائط"},
            "categoryId": "wall-clocks",
            "features": ["Automatic prayer times", "Hijri calendar"],
            "specifications": {
                "dimensions": "60 x 40 x 4 cm",
                "weight": "3.2 kg",
                "display": "LED",
                "power": "220V AC",
                "languages": ["Arabic", "English"],
            },
        },
        {
            "id": "azan-desk-02",
            "slug": "compact-azan-desk-clock",
            "name": {"en": "Compact Azan Desk Clock", "ar": "ساعة الأذان المكتبية"},
            "description": {"en": "Bedside clock", "ar": "ساعة سرير"},
            "price": "180 SAR",
            "images": ["/img/desk-1.jpg"],
            "rating": 4.5,
            "reviews": 58,
            "category": {"en": "Desk Clocks", "ar": "ساعات مكتب"},
            "categoryId": "desk-clocks",
            "features": ["Fajr alarm"],
            "specifications": {
                "dimensions": "20 x 12 x 6 cm",
                "weight": "0.6 kg",
                "display": "LCD",
                "power": "USB",
                "languages": ["Arabic"],
            },
        },
    ],
}

JSON_HOURS: dict[str, Any] = {
    "title": "Business Hours",
    "description": "Showroom hours",
    "lastUpdated": "2025-01-15",
    "regularHours": {
        "sunday": "Closed",
        "monday": {"open": "09:00", "close": "18:00"},
        "friday": {"open": "14:00", "close": "20:00"},
    },
    "holidayHours": {"note": "Hours change during Ramadan."},
    "contact": {
        "phone": "+966 11 000 0000",
        "whatsapp": "+966 50 000 0000",
        "email": "info@example.com",
    },
    "location": {
        "street": "King Fahd Road",
        "district": "Al Olaya",
        "country": "Saudi Arabia",
    },
}

MDX_CATALOG = """---
title: "Islamic Clocks Catalog"
lastUpdated: 2025-01-15
---

# Products

### Grand Azan Wall Clock
- **ID**: azan-wall-01
- **Name AR**: ساعة الأذان الحائطية
- **Price**: "450 SAR"
- **Rating**: 4.8
- **Reviews**: 126
- **Images**: ["/img/wall-1.jpg", "/img/wall-2.jpg"]
- **Description EN**: "LED wall clock"
- **Description AR**: "ساعة حائط"
- **Category EN**: Wall Clocks
- **Category AR**: ساعات حائط

### Compact Azan Desk Clock
- **ID**: azan-desk-02
- **Price**: 180 SAR
- **Images**: ["/img/desk-1.jpg"]
- **Category EN**: Desk Clocks
- **Category AR**: ساعات مكتب

### Draft Clock Without Images
- **ID**: draft-03
- **Price**: 99 SAR
"""

MDX_HOURS = """---
title: Business Hours
---

Sunday: closed
Monday: 09:00 - 18:00
Friday; 14:00 - 20:00
"""


def write_content(root: Path, files: dict[str, str | dict[str, Any]]) -> Path:
    """Write content files under root. Dict values are dumped as JSON."""
    for relative, body in files.items():
        path = root / relative
        path.parent.mkdir(parents=True, exist_ok=True)
        text = json.dumps(body, ensure_ascii=False) if isinstance(body, dict) else body
        path.write_text(text, encoding="utf-8")
    return root


@pytest.fixture(autouse=True)
def isolated_cwd(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Run every test from an empty directory so no stray catalog.config.yaml is discovered."""
    workdir = tmp_path / "cwd"
    workdir.mkdir()
    monkeypatch.chdir(workdir)
    return workdir


@pytest.fixture
def json_catalog() -> dict[str, Any]:
    return copy.deepcopy(JSON_CATALOG)


@pytest.fixture
def json_hours() -> dict[str, Any]:
    return copy.deepcopy(JSON_HOURS)


@pytest.fixture
def make_root(tmp_path: Path) -> Callable[[dict[str, str | dict[str, Any]]], Path]:
    """Factory writing the given files into a fresh content root."""
    counter = iter(range(1000))

    def factory(files: dict[str, str | dict[str, Any]]) -> Path:
        return write_content(tmp_path / f"root-{next(counter)}", files)

    return factory


@pytest.fixture
def json_root(tmp_path: Path) -> Path:
    return write_content(
        tmp_path / "json",
        {
            "products/catalog.json": JSON_CATALOG,
            "business/hours.json": JSON_HOURS,
        },
    )


@pytest.fixture
def mdx_root(tmp_path: Path) -> Path:
    return write_content(
        tmp_path / "mdx",
        {
            "products/catalog.mdx": MDX_CATALOG,
            "business/hours.mdx": MDX_HOURS,
        },
    )


@pytest.fixture
def json_repository(json_root: Path) -> ContentRepository:
    return ContentRepository(ContentConfig(content_root=json_root))


@pytest.fixture
def mdx_repository(mdx_root: Path) -> ContentRepository:
    return ContentRepository(ContentConfig(content_root=mdx_root))


@pytest.fixture
def empty_repository(tmp_path: Path) -> ContentRepository:
    return ContentRepository(ContentConfig(content_root=tmp_path / "missing"))
