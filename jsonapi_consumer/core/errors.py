"""Exceptions raised while consuming a JSON:API service."""

from __future__ import annotations

from typing import Any

from pydantic import ValidationError

from jsonapi_consumer.schemas.resource import JSONAPIErrorDocument


class JSONAPIClientError(Exception):
    """Base class for every error raised by this package."""


class MalformedPageLink(JSONAPIClientError, ValueError):
    """A pagination link does not carry a usable page number."""

    def __init__(self, url: str, param: str, *, relation: str | None = None) -> None:
        self.url = url
        self.param = param
        self.relation = relation
        where = f" ({relation})" if relation else ""
        super().__init__(f"Link{where} has no positive integer '{param}': {url}")


class ResourceTypeMismatch(JSONAPIClientError):
    """A resource object's type does not match the serializer's type."""

    def __init__(self, expected: str, actual: str | None) -> None:
        self.expected = expected
        self.actual = actual
        super().__init__(f"Expected resource type '{expected}', got '{actual}'.")


class UnexpectedMediaType(JSONAPIClientError):
    """The upstream answered with something other than JSON:API."""

    def __init__(self, content_type: str) -> None:
        self.content_type = content_type
        super().__init__(f"Unexpected response media type '{content_type}'.")


class InvalidDocument(JSONAPIClientError):
    """The upstream response body is not a well-formed JSON:API document."""


class ForeignLink(JSONAPIClientError):
    """A link points outside the configured upstream origin."""

    def __init__(self, url: str, origin: str) -> None:
        self.url = url
        self.origin = origin
        super().__init__(f"Refusing to follow {url}: not under {origin}.")


class UpstreamError(JSONAPIClientError):
    """The upstream service answered with an error status."""

    def __init__(
        self,
        status_code: int,
        errors: list[dict[str, Any]] | None = None,
        *,
        url: str | None = None,
    ) -> None:
        self.status_code = status_code
        self.errors = errors or []
        self.url = url
        super().__init__(self._message())

    def _message(self) -> str:
        titles = [
            error.get("detail") or error.get("title")
            for error in self.errors
            if error.get("detail") or error.get("title")
        ]
        summary = "; ".join(str(title) for title in titles)
        base = f"Upstream responded with status {self.status_code}"
        return f"{base}: {summary}" if summary else base


class NotAuthenticated(UpstreamError):
    """The upstream rejected the supplied credentials."""


class ResourceNotFound(UpstreamError):
    """The requested resource does not exist upstream."""


def parse_error_objects(payload: Any) -> list[dict[str, Any]]:
    """Return the error objects of a JSON:API error document, or [] if not one."""
    if not isinstance(payload, dict):
        return []
    try:
        document = JSONAPIErrorDocument.model_validate(payload)
    except ValidationError:
        return []
    return [dict(error) for error in document.errors]


def error_for_status(
    status_code: int, payload: Any = None, *, url: str | None = None
) -> UpstreamError:
    """Build the exception matching an upstream error status."""
    errors = parse_error_objects(payload)
    if status_code in {401, 403}:
        return NotAuthenticated(status_code, errors, url=url)
    if status_code == 404:
        return ResourceNotFound(status_code, errors, url=url)
    return UpstreamError(status_code, errors, url=url)
