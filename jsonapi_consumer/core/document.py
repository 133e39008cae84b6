"""JSON:API request document construction."""

from typing import Any, Mapping


class JSONAPIDocumentBuilder:
    """Build JSON:API v1.1 request documents for create and update calls."""

    def build_resource(
        self,
        type_: str,
        *,
        resource_id: str | None = None,
        attributes: Mapping[str, Any] | None = None,
        relationships: Mapping[str, Any] | None = None,
    ) -> dict[str, Any]:
        """Return a resource object; id is omitted for client-side creation."""
        resource: dict[str, Any] = {"type": type_}
        if resource_id is not None:
            resource["id"] = str(resource_id)
        if attributes:
            resource["attributes"] = dict(attributes)
        if relationships:
            resource["relationships"] = {
                name: self._relationship(value) for name, value in relationships.items()
            }
        return resource

    def build_single(
        self,
        resource: Mapping[str, Any],
        *,
        meta: Mapping[str, Any] | None = None,
    ) -> dict[str, Any]:
        """Return a JSON:API document wrapping a single resource object."""
        document: dict[str, Any] = {"data": dict(resource)}
        if meta:
            document["meta"] = dict(meta)
        return document

    def _relationship(self, value: Any) -> dict[str, Any]:
        # Accepts a (type, id) pair or identifier dict, a list of them, None,
        # or a full relationship object.
        if isinstance(value, Mapping) and "data" in value:
            return dict(value)
        if value is None:
            return {"data": None}
        if isinstance(value, list):
            return {"data": [self._identifier(item) for item in value]}
        return {"data": self._identifier(value)}

    def _identifier(self, value: Any) -> dict[str, str]:
        if isinstance(value, Mapping):
            return {"type": str(value["type"]), "id": str(value["id"])}
        type_, resource_id = value
        return {"type": str(type_), "id": str(resource_id)}
