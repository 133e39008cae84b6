"""FastAPI helpers turning upstream page links into links to local routes."""

from __future__ import annotations

from typing import Any, Mapping
from urllib.parse import urlencode

from fastapi import Query, Request

from jsonapi_consumer.config import get_settings
from jsonapi_consumer.pagination.links import (
    PageLinkSet,
    PaginationLinkTranslator,
    UrlBuilder,
)


def page_url_builder(
    request: Request,
    route_name: str | None = None,
    *,
    query_param: str = "page",
    absolute: bool = False,
    keep_query: bool = True,
    **path_params: Any,
) -> UrlBuilder:
    """Return a url builder pointing at ``route_name`` with ``?page=<n>``.

    Args:
        request: The incoming request of the consuming application.
        route_name: Name of the local listing route; defaults to the current path.
        query_param: Local query parameter carrying the page number.
        absolute: Build absolute URLs instead of path-absolute ones.
        keep_query: Carry the request's other query parameters (filters, sort) over.
        path_params: Path parameters of ``route_name``.

    Examples:
        builder = page_url_builder(request, "posts_index")
        builder(2)  # "/posts?page=2"
    """
    target = request.url_for(route_name, **path_params) if route_name else request.url
    path = target.path
    base = str(request.base_url).rstrip("/") if absolute else ""
    carried = (
        [(key, value) for key, value in request.query_params.multi_items() if key != query_param]
        if keep_query
        else []
    )

    def build(page_number: int) -> str:
        query = urlencode([*carried, (query_param, str(page_number))])
        return f"{base}{path}?{query}"

    return build


def build_pager(
    request: Request,
    page_links: PageLinkSet,
    route_name: str | None = None,
    *,
    translator: PaginationLinkTranslator | None = None,
    page_param: str | None = None,
    **path_params: Any,
) -> dict[str, str]:
    """Translate upstream ``page_links`` into links to a local route.

    ``page_param`` names the upstream page-number parameter; pass the
    client's ``settings.page_number_param`` when it differs from the global
    settings.
    """
    translator = translator or PaginationLinkTranslator(
        page_param or get_settings().page_number_param
    )
    return translator.translate(page_links, page_url_builder(request, route_name, **path_params))


def page_number(
    page: int = Query(1, ge=1, description="Page of the upstream collection to show"),
) -> int:
    """Dependency reading the local ``page`` query parameter."""
    return page


def pager_context(pager: Mapping[str, str], current_page: int) -> dict[str, Any]:
    """Return a template/JSON friendly pager block."""
    return {
        "current": current_page,
        "links": dict(pager),
        "has_previous": "previous" in pager or "prev" in pager,
        "has_next": "next" in pager,
    }
