"""Exceptions raised by content sources.

Sources raise these; `ContentRepository` catches them at its boundary and
degrades to empty results.
"""

from __future__ import annotations

from pathlib import Path


class ContentError(Exception):
    """Base error for content that could not be loaded."""

    def __init__(self, message: str, path: Path | None = None) -> None:
        super().__init__(message)
        self.path = path


class ContentNotFoundError(ContentError):
    """The expected content file is missing or unreadable."""


class MalformedContentError(ContentError):
    """The content file was read but could not be parsed or validated."""
