"""Consume JSON:API v1.1 services from a FastAPI application."""

from .client.auth import TokenAuth
from .client.base import CollectionPage, JSONAPIClient, ResourceDocument
from .config import ConsumerSettings, get_settings
from .core.credentials import Credentials
from .core.errors import JSONAPIClientError, MalformedPageLink
from .pagination.links import PaginationLinkTranslator, extract_page_number
from .resources.base import JSONAPIResourceSet, ResourcePage
from .serializers.base import JSONAPISerializer

__all__ = [
    "CollectionPage",
    "ConsumerSettings",
    "Credentials",
    "JSONAPIClient",
    "JSONAPIClientError",
    "JSONAPIResourceSet",
    "JSONAPISerializer",
    "MalformedPageLink",
    "PaginationLinkTranslator",
    "ResourceDocument",
    "ResourcePage",
    "TokenAuth",
    "extract_page_number",
    "get_settings",
]
