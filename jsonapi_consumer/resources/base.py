"""Resource sets binding a JSON:API client to a serializer."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Generic, Iterable, Mapping, TypeVar

from jsonapi_consumer.client.base import CollectionPage, JSONAPIClient
from jsonapi_consumer.core.credentials import Credentials
from jsonapi_consumer.core.errors import InvalidDocument
from jsonapi_consumer.pagination.links import PaginationLinkTranslator, UrlBuilder

ModelT = TypeVar("ModelT")


@dataclass
class ResourcePage(Generic[ModelT]):
    """Deserialized items of one collection page plus its upstream links."""

    items: list[ModelT]
    links: dict[str, str] = field(default_factory=dict)
    meta: dict[str, Any] = field(default_factory=dict)
    page_param: str = "page[number]"

    def pager(
        self,
        url_builder: UrlBuilder,
        translator: PaginationLinkTranslator | None = None,
    ) -> dict[str, str]:
        """Return local first/previous/next/last links for this page."""
        translator = translator or PaginationLinkTranslator(self.page_param)
        return translator.translate(self.links, url_builder)


class JSONAPIResourceSet:
    """Read and write one remote resource type through a serializer."""

    serializer_class: type | None = None
    include: list[str] = []
    sort: list[Any] = []
    use_sparse_fields: bool = False

    def __init__(self, client: JSONAPIClient) -> None:
        self.client = client

    def get_serializer(self) -> Any:
        """Instantiate the serializer."""
        if not self.serializer_class:
            raise ValueError("serializer_class must be set.")
        return self.serializer_class()

    @property
    def type_(self) -> str:
        return self.get_serializer().Meta.type_

    def get_fields(self) -> dict[str, list[str]] | None:
        """Return the sparse fieldset sent with read requests, if enabled."""
        if not self.use_sparse_fields:
            return None
        return self.get_serializer().sparse_fields() or None

    async def list(
        self,
        credentials: Credentials,
        *,
        page: int | None = None,
        page_size: int | None = None,
        filters: Mapping[str, Any] | None = None,
        sort: Iterable[Any] | None = None,
    ) -> ResourcePage[Any]:
        """Fetch and deserialize one page of the collection."""
        collection = await self.client.list(
            self.type_,
            credentials=credentials,
            page=page,
            page_size=page_size,
            include=self.include or None,
            fields=self.get_fields(),
            sort=sort if sort is not None else (self.sort or None),
            filters=filters,
        )
        return self.to_page(collection)

    async def follow(self, url: str, credentials: Credentials) -> ResourcePage[Any]:
        """Fetch the page an upstream pagination link points at."""
        return self.to_page(await self.client.fetch_page(url, credentials=credentials))

    def to_page(self, collection: CollectionPage) -> ResourcePage[Any]:
        serializer = self.get_serializer()
        return ResourcePage(
            items=serializer.from_many(collection.data),
            links=collection.links,
            meta=collection.meta,
            page_param=self.client.settings.page_number_param,
        )

    async def get(self, resource_id: str, credentials: Credentials) -> Any:
        """Fetch and deserialize a single resource."""
        document = await self.client.retrieve(
            self.type_,
            resource_id,
            credentials=credentials,
            include=self.include or None,
            fields=self.get_fields(),
        )
        if document.data is None:
            raise InvalidDocument("Expected a resource object, got null primary data.")
        return self.get_serializer().from_resource(document.data)

    async def create(self, instance: Any, credentials: Credentials) -> Any:
        """Create the resource upstream and return the stored version."""
        serializer = self.get_serializer()
        document = await self.client.create(
            self.type_,
            serializer.to_attributes(instance),
            credentials=credentials,
        )
        if document.data is None:
            raise InvalidDocument("Expected a resource object, got null primary data.")
        return serializer.from_resource(document.data)

    async def update(self, resource_id: str, instance: Any, credentials: Credentials) -> Any:
        """Update the resource upstream; returns ``instance`` on an empty reply."""
        serializer = self.get_serializer()
        document = await self.client.update(
            self.type_,
            resource_id,
            serializer.to_attributes(instance),
            credentials=credentials,
        )
        if document.data is None:
            return instance
        return serializer.from_resource(document.data)

    async def delete(self, resource_id: str, credentials: Credentials) -> None:
        """Delete the resource upstream."""
        await self.client.destroy(self.type_, resource_id, credentials=credentials)
