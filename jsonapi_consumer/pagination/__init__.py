"""Pagination link handling for JSON:API consumers."""

from .links import (
    DEFAULT_PAGE_PARAM,
    PAGER_RELATIONS,
    PageLinkSet,
    PaginationLinkTranslator,
    UrlBuilder,
    extract_page_number,
)

__all__ = [
    "DEFAULT_PAGE_PARAM",
    "PAGER_RELATIONS",
    "PageLinkSet",
    "PaginationLinkTranslator",
    "UrlBuilder",
    "extract_page_number",
]
