"""Base serializer mapping remote JSON:API resources onto Pydantic models."""

from __future__ import annotations

from typing import Any, Iterable, Mapping

from pydantic import BaseModel

from jsonapi_consumer.core.errors import ResourceTypeMismatch


class JSONAPISerializer:
    """Deserialize JSON:API resource objects into models, and models back."""

    class Meta:
        """Serializer metadata (type, model, fields)."""

        type_: str = ""
        model: Any = None
        fields: list[str] = []

    def from_resource(self, resource: Mapping[str, Any]) -> Any:
        """Build a model instance from a JSON:API resource object."""
        self.check_type(resource)
        values: dict[str, Any] = {"id": self.get_id(resource)}
        values.update(self.get_attributes(resource))
        values.update(self.get_relationship_ids(resource))
        model = self.Meta.model
        if model is None:
            return values
        return model.model_validate(values)

    def from_many(self, resources: Iterable[Mapping[str, Any]]) -> list[Any]:
        """Deserialize a collection of resource objects."""
        return [self.from_resource(resource) for resource in resources]

    def check_type(self, resource: Mapping[str, Any]) -> None:
        """Raise if the resource object is of another type."""
        actual = resource.get("type")
        if self.Meta.type_ and actual != self.Meta.type_:
            raise ResourceTypeMismatch(self.Meta.type_, actual)

    def get_id(self, resource: Mapping[str, Any]) -> str | None:
        """Return the resource id as a string."""
        value = resource.get("id")
        return None if value is None else str(value)

    def get_attributes(self, resource: Mapping[str, Any]) -> dict[str, Any]:
        """Return attributes restricted to ``Meta.fields`` when declared."""
        attributes = dict(resource.get("attributes") or {})
        if self.Meta.fields:
            allowed = [field for field in self.Meta.fields if field != "id"]
            return {field: attributes[field] for field in allowed if field in attributes}
        return attributes

    def get_relationship_ids(self, resource: Mapping[str, Any]) -> dict[str, Any]:
        """Return ``<name>_id`` values for to-one relationships the model declares."""
        model_fields = self._model_fields()
        relationship_ids: dict[str, Any] = {}
        for name, relationship in (resource.get("relationships") or {}).items():
            if not isinstance(relationship, Mapping):
                continue
            rel_data = relationship.get("data")
            if not isinstance(rel_data, Mapping):
                continue
            rel_id = rel_data.get("id")
            if rel_id is None:
                continue
            attr_name = f"{name}_id"
            if attr_name in model_fields:
                relationship_ids[attr_name] = str(rel_id)
        return relationship_ids

    def to_attributes(self, instance: Any) -> dict[str, Any]:
        """Return the attribute dict for create and update payloads."""
        if isinstance(instance, BaseModel):
            values = instance.model_dump()
        else:
            values = dict(instance)
        values.pop("id", None)
        if self.Meta.fields:
            return {key: value for key, value in values.items() if key in self.Meta.fields}
        return {key: value for key, value in values.items() if not key.endswith("_id")}

    def sparse_fields(self) -> dict[str, list[str]]:
        """Return the ``fields[type]`` selection matching ``Meta.fields``."""
        fields = [field for field in self.Meta.fields if field != "id"]
        if not self.Meta.type_ or not fields:
            return {}
        return {self.Meta.type_: fields}

    def _model_fields(self) -> set[str]:
        model = self.Meta.model
        if model is None:
            return set()
        return set(getattr(model, "model_fields", {}))
