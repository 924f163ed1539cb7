"""Shared types and utilities for the catalog content loader and API."""

from .types import DAY_ORDER, ContentFormat, Language, LoadStatus, Weekday

__all__ = ["Language", "Weekday", "DAY_ORDER", "ContentFormat", "LoadStatus"]
