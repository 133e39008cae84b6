"""Helpers for building JSON:API query parameters for upstream requests."""

from __future__ import annotations

from typing import Any, Iterable, Mapping


def _join_csv(values: Iterable[str]) -> str:
    return ",".join(item for item in (str(value).strip() for value in values) if item)


def _sort_token(item: Any) -> str:
    # Accepts "-field", ("field", "desc") or {"field": ..., "direction": ...}.
    if isinstance(item, Mapping):
        field, direction = item["field"], item.get("direction", "asc")
    elif isinstance(item, (tuple, list)):
        field, direction = item
    else:
        return str(item)
    return f"-{field}" if str(direction).lower() == "desc" else str(field)


def _filter_params(filters: Mapping[str, Any]) -> dict[str, str]:
    params: dict[str, str] = {}
    for field_name, value in filters.items():
        if isinstance(value, Mapping) and "op" in value:
            # {"field": {"op": "gt", "val": 3}} -> filter[field][gt]=3
            op_value = value.get("val")
            if isinstance(op_value, (list, tuple)):
                op_value = _join_csv(op_value)
            params[f"filter[{field_name}][{value['op']}]"] = str(op_value)
        elif isinstance(value, (list, tuple)):
            params[f"filter[{field_name}]"] = _join_csv(value)
        else:
            params[f"filter[{field_name}]"] = str(value)
    return params


def build_query_params(
    *,
    include: Iterable[str] | None = None,
    fields: Mapping[str, Iterable[str]] | None = None,
    sort: Iterable[Any] | None = None,
    filters: Mapping[str, Any] | None = None,
) -> dict[str, str]:
    """Encode JSON:API query parameter families into a flat query mapping."""
    params: dict[str, str] = {}
    if include:
        joined = _join_csv(include)
        if joined:
            params["include"] = joined
    for resource_type, type_fields in (fields or {}).items():
        params[f"fields[{resource_type}]"] = _join_csv(type_fields)
    if sort:
        joined = _join_csv(_sort_token(item) for item in sort)
        if joined:
            params["sort"] = joined
    if filters:
        params.update(_filter_params(filters))
    return params
