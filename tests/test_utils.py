import pytest

from jsonapi_consumer import schemas
from jsonapi_consumer.core.document import JSONAPIDocumentBuilder
from jsonapi_consumer.utils.content_negotiation import is_json_response, parse_jsonapi_media_type
from jsonapi_consumer.utils.query_params import build_query_params


def test_build_query_params_families():
    params = build_query_params(
        include=["author", "comments.author"],
        fields={"posts": ["title", "body"], "users": ["name"]},
        sort=["-created-at", ("title", "asc"), {"field": "rank", "direction": "desc"}],
        filters={"published": True, "tags": ["a", "b"], "views": {"op": "gt", "val": 3}},
    )

    assert params == {
        "include": "author,comments.author",
        "fields[posts]": "title,body",
        "fields[users]": "name",
        "sort": "-created-at,title,-rank",
        "filter[published]": "True",
        "filter[tags]": "a,b",
        "filter[views][gt]": "3",
    }


def test_build_query_params_empty():
    assert build_query_params() == {}
    assert build_query_params(include=[], sort=[]) == {}


def test_build_query_params_leaves_paging_to_the_client():
    with pytest.raises(TypeError):
        build_query_params(page={"number": 2})


def test_parse_jsonapi_media_type_with_ext_and_profile():
    parsed = parse_jsonapi_media_type(
        'application/vnd.api+json; ext="https://jsonapi.org/ext/atomic"; profile=""'
    )

    assert parsed["media_type"] == "application/vnd.api+json"
    assert parsed["ext"] == ["https://jsonapi.org/ext/atomic"]
    assert parsed["profile"] == []


@pytest.mark.parametrize(
    "content_type,expected",
    [
        ("application/vnd.api+json", True),
        ("application/json; charset=utf-8", True),
        ("APPLICATION/VND.API+JSON", True),
        ("text/html", False),
        ("", False),
    ],
)
def test_is_json_response(content_type, expected):
    assert is_json_response(content_type) is expected


def test_document_builder_relationship_shapes():
    builder = JSONAPIDocumentBuilder()

    resource = builder.build_resource(
        "posts",
        resource_id=3,
        attributes={"title": "x"},
        relationships={
            "author": {"type": "users", "id": 1},
            "tags": [("tags", 1), ("tags", 2)],
            "editor": None,
            "series": {"data": {"type": "series", "id": "9"}},
        },
    )

    assert resource == {
        "type": "posts",
        "id": "3",
        "attributes": {"title": "x"},
        "relationships": {
            "author": {"data": {"type": "users", "id": "1"}},
            "tags": {"data": [{"type": "tags", "id": "1"}, {"type": "tags", "id": "2"}]},
            "editor": {"data": None},
            "series": {"data": {"type": "series", "id": "9"}},
        },
    }
    assert builder.build_single(resource, meta={"source": "test"})["meta"] == {"source": "test"}


def test_schemas_export_only_document_models():
    assert sorted(schemas.__all__) == [
        "JSONAPICollectionDocument",
        "JSONAPIDocument",
        "JSONAPIErrorDocument",
        "JSONAPIResource",
    ]
