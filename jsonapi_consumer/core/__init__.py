"""Core JSON:API document, credential and error helpers."""

from .credentials import Credentials
from .document import JSONAPIDocumentBuilder
from .errors import (
    ForeignLink,
    InvalidDocument,
    JSONAPIClientError,
    MalformedPageLink,
    NotAuthenticated,
    ResourceNotFound,
    ResourceTypeMismatch,
    UnexpectedMediaType,
    UpstreamError,
)

__all__ = [
    "Credentials",
    "ForeignLink",
    "InvalidDocument",
    "JSONAPIClientError",
    "JSONAPIDocumentBuilder",
    "MalformedPageLink",
    "NotAuthenticated",
    "ResourceNotFound",
    "ResourceTypeMismatch",
    "UnexpectedMediaType",
    "UpstreamError",
]
