"""Pydantic schemas for JSON:API."""

from .resource import (
    JSONAPICollectionDocument,
    JSONAPIDocument,
    JSONAPIErrorDocument,
    JSONAPIResource,
)

__all__ = [
    "JSONAPICollectionDocument",
    "JSONAPIDocument",
    "JSONAPIErrorDocument",
    "JSONAPIResource",
]
