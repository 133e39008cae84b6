"""HTTP client for upstream JSON:API services."""

from .auth import TokenAuth
from .base import CollectionPage, JSONAPIClient, ResourceDocument, normalize_links

__all__ = [
    "CollectionPage",
    "JSONAPIClient",
    "ResourceDocument",
    "TokenAuth",
    "normalize_links",
]
