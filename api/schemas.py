"""Pydantic schemas for API responses that are not content records.

Content records (products, hours, categories, contact) are returned in
their on-disk JSON shape via `ContentModel.to_wire()` so the JSON catalog
passes through the API unchanged.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel


class HoursErrorResponse(BaseModel):
    """Body of a failed /business-hours request. Always carries an empty list."""

    error: str
    hours: list[dict[str, Any]] = []


class HealthResponse(BaseModel):
    """Health check body, reporting which format backs each content file."""

    status: str
    products_format: str
    hours_format: str
