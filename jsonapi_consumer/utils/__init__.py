"""Utilities for JSON:API query parameters and headers."""

from .content_negotiation import JSONAPI_MEDIA_TYPE, is_json_response, parse_jsonapi_media_type
from .query_params import build_query_params

__all__ = [
    "JSONAPI_MEDIA_TYPE",
    "build_query_params",
    "is_json_response",
    "parse_jsonapi_media_type",
]
