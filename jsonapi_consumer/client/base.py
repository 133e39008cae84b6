"""Async client for an upstream JSON:API service."""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass, field
from typing import Any, Iterable, Mapping
from urllib.parse import quote

import httpx
from pydantic import ValidationError

from jsonapi_consumer.client.auth import TokenAuth
from jsonapi_consumer.config import ConsumerSettings, get_settings
from jsonapi_consumer.core.credentials import Credentials
from jsonapi_consumer.core.document import JSONAPIDocumentBuilder
from jsonapi_consumer.core.errors import (
    ForeignLink,
    InvalidDocument,
    UnexpectedMediaType,
    error_for_status,
)
from jsonapi_consumer.schemas.resource import JSONAPICollectionDocument, JSONAPIDocument
from jsonapi_consumer.utils.content_negotiation import JSONAPI_MEDIA_TYPE, is_json_response
from jsonapi_consumer.utils.query_params import build_query_params

logger = logging.getLogger(__name__)


def _link_href(value: Any) -> str | None:
    # JSON:API links may be plain strings or link objects with an href.
    if isinstance(value, str):
        return value
    if isinstance(value, Mapping):
        href = value.get("href")
        return href if isinstance(href, str) else None
    return None


def normalize_links(links: Mapping[str, Any] | None) -> dict[str, str]:
    """Flatten a JSON:API links object into relation -> URL, dropping nulls."""
    normalized: dict[str, str] = {}
    for relation, value in (links or {}).items():
        href = _link_href(value)
        if href is not None:
            normalized[relation] = href
    return normalized


@dataclass
class CollectionPage:
    """One page of a remote resource collection."""

    data: list[dict[str, Any]]
    links: dict[str, str] = field(default_factory=dict)
    meta: dict[str, Any] = field(default_factory=dict)
    included: list[dict[str, Any]] = field(default_factory=list)

    @property
    def has_next(self) -> bool:
        return "next" in self.links


@dataclass
class ResourceDocument:
    """A single remote resource with its compound-document extras."""

    data: dict[str, Any] | None
    links: dict[str, str] = field(default_factory=dict)
    meta: dict[str, Any] = field(default_factory=dict)
    included: list[dict[str, Any]] = field(default_factory=list)


class JSONAPIClient:
    """Talk to a JSON:API service on behalf of a given set of credentials.

    Credentials are supplied per call; the client itself holds no user state
    and can be shared across requests of the consuming application.
    """

    document_builder_class: type = JSONAPIDocumentBuilder

    def __init__(
        self,
        base_url: str | None = None,
        *,
        settings: ConsumerSettings | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
        http_client: httpx.AsyncClient | None = None,
    ) -> None:
        self.settings = settings or get_settings()
        self.base_url = (base_url or self.settings.api_url).rstrip("/")
        self._owns_http_client = http_client is None
        self.http_client = http_client or httpx.AsyncClient(
            base_url=self.base_url,
            transport=transport,
            timeout=self.settings.timeout,
            headers={"Accept": JSONAPI_MEDIA_TYPE, "User-Agent": self.settings.user_agent},
        )

    async def __aenter__(self) -> "JSONAPIClient":
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        """Close the underlying HTTP client if this instance created it."""
        if self._owns_http_client:
            await self.http_client.aclose()

    def get_document_builder(self) -> JSONAPIDocumentBuilder:
        """Instantiate the document builder."""
        return self.document_builder_class()

    def resource_path(self, type_: str, resource_id: str | None = None) -> str:
        """Return the path of a collection or of a single resource."""
        path = f"/{quote(type_)}"
        if resource_id is not None:
            path = f"{path}/{quote(str(resource_id), safe='')}"
        return path

    async def list(
        self,
        type_: str,
        *,
        credentials: Credentials,
        page: int | None = None,
        page_size: int | None = None,
        include: Iterable[str] | None = None,
        fields: Mapping[str, Iterable[str]] | None = None,
        sort: Iterable[Any] | None = None,
        filters: Mapping[str, Any] | None = None,
    ) -> CollectionPage:
        """Fetch one page of the ``type_`` collection."""
        params = build_query_params(include=include, fields=fields, sort=sort, filters=filters)
        if page is not None:
            if page < 1:
                raise ValueError("page must be a positive integer.")
            params[self.settings.page_number_param] = str(page)
        if page_size is not None or page is not None:
            params[self.settings.page_size_param] = str(page_size or self.settings.default_page_size)
        payload = await self._request(
            "GET", self.resource_path(type_), credentials=credentials, params=params
        )
        return self._collection_page(payload)

    async def fetch_page(self, url: str, *, credentials: Credentials) -> CollectionPage:
        """Follow an upstream pagination link as given by the server."""
        self._ensure_same_origin(url)
        payload = await self._request("GET", url, credentials=credentials)
        return self._collection_page(payload)

    async def retrieve(
        self,
        type_: str,
        resource_id: str,
        *,
        credentials: Credentials,
        include: Iterable[str] | None = None,
        fields: Mapping[str, Iterable[str]] | None = None,
    ) -> ResourceDocument:
        """Fetch a single resource."""
        params = build_query_params(include=include, fields=fields)
        payload = await self._request(
            "GET",
            self.resource_path(type_, resource_id),
            credentials=credentials,
            params=params,
        )
        return self._resource_document(payload)

    async def create(
        self,
        type_: str,
        attributes: Mapping[str, Any],
        *,
        credentials: Credentials,
        relationships: Mapping[str, Any] | None = None,
    ) -> ResourceDocument:
        """Create a resource and return the server's representation of it."""
        builder = self.get_document_builder()
        body = builder.build_single(
            builder.build_resource(type_, attributes=attributes, relationships=relationships)
        )
        payload = await self._request(
            "POST", self.resource_path(type_), credentials=credentials, json=body
        )
        return self._resource_document(payload)

    async def update(
        self,
        type_: str,
        resource_id: str,
        attributes: Mapping[str, Any],
        *,
        credentials: Credentials,
        relationships: Mapping[str, Any] | None = None,
    ) -> ResourceDocument:
        """Update a resource; a 204 answer yields an empty document."""
        builder = self.get_document_builder()
        body = builder.build_single(
            builder.build_resource(
                type_,
                resource_id=resource_id,
                attributes=attributes,
                relationships=relationships,
            )
        )
        payload = await self._request(
            "PATCH",
            self.resource_path(type_, resource_id),
            credentials=credentials,
            json=body,
        )
        return self._resource_document(payload)

    async def destroy(self, type_: str, resource_id: str, *, credentials: Credentials) -> None:
        """Delete a resource."""
        await self._request(
            "DELETE", self.resource_path(type_, resource_id), credentials=credentials
        )

    async def _request(
        self,
        method: str,
        url: str,
        *,
        credentials: Credentials,
        params: Mapping[str, str] | None = None,
        json: Any | None = None,
    ) -> Any:
        headers = {"Content-Type": JSONAPI_MEDIA_TYPE} if json is not None else None
        t0 = time.perf_counter()
        logger.debug("HTTP %s %s params=%s", method, url, dict(params or {}))
        try:
            response = await self.http_client.request(
                method,
                url,
                params=dict(params) if params else None,
                json=json,
                headers=headers,
                auth=TokenAuth(credentials),
            )
        except httpx.HTTPError as exc:
            ms = int((time.perf_counter() - t0) * 1000)
            logger.warning("HTTP %s %s failed (ms=%s): %s", method, url, ms, exc)
            raise

        payload = self._decode(response)
        if response.is_error:
            logger.warning(
                "HTTP %s %s failed (status=%s)", method, response.url, response.status_code
            )
            raise error_for_status(response.status_code, payload, url=str(response.url))
        return payload

    def _decode(self, response: httpx.Response) -> Any:
        if response.status_code == 204 or not response.content:
            return None
        content_type = response.headers.get("content-type", "")
        if not is_json_response(content_type):
            if response.is_error:
                return None
            raise UnexpectedMediaType(content_type)
        try:
            return response.json()
        except ValueError as exc:
            if response.is_error:
                return None
            raise InvalidDocument(f"Response body is not valid JSON: {exc}") from exc

    def _collection_page(self, payload: Any) -> CollectionPage:
        try:
            document = JSONAPICollectionDocument.model_validate(payload)
        except ValidationError as exc:
            raise InvalidDocument(f"Expected a resource collection document: {exc}") from exc
        return CollectionPage(
            data=[resource.model_dump(exclude_unset=True) for resource in document.data],
            links=normalize_links(document.links),
            meta=dict(document.meta or {}),
            included=[resource.model_dump(exclude_unset=True) for resource in document.included or []],
        )

    def _resource_document(self, payload: Any) -> ResourceDocument:
        if payload is None:
            return ResourceDocument(data=None)
        try:
            document = JSONAPIDocument.model_validate(payload)
        except ValidationError as exc:
            raise InvalidDocument(f"Expected a single resource document: {exc}") from exc
        return ResourceDocument(
            data=document.data.model_dump(exclude_unset=True) if document.data else None,
            links=normalize_links(document.links),
            meta=dict(document.meta or {}),
            included=[resource.model_dump(exclude_unset=True) for resource in document.included or []],
        )

    def _ensure_same_origin(self, url: str) -> None:
        target = httpx.URL(url)
        base = httpx.URL(self.base_url)
        if not target.is_absolute_url:
            return
        same_origin = (target.scheme, target.host, target.port) == (
            base.scheme,
            base.host,
            base.port,
        )
        if not same_origin:
            raise ForeignLink(url, self.base_url)
