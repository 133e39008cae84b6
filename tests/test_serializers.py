from typing import Optional

import pytest
from pydantic import BaseModel

from jsonapi_consumer import JSONAPISerializer
from jsonapi_consumer.core.errors import ResourceTypeMismatch


class Post(BaseModel):
    id: Optional[str] = None
    title: str
    body: str = ""
    author_id: Optional[str] = None


class PostSerializer(JSONAPISerializer):
    class Meta:
        type_ = "posts"
        model = Post
        fields = ["id", "title", "body"]


class LooseSerializer(JSONAPISerializer):
    class Meta:
        type_ = "notes"
        model = None
        fields = []


RESOURCE = {
    "type": "posts",
    "id": 12,
    "attributes": {"title": "Hello", "body": "World", "secret": "x"},
    "relationships": {
        "author": {"data": {"type": "users", "id": 7}},
        "comments": {"data": [{"type": "comments", "id": "1"}]},
        "editor": {"data": None},
    },
}


def test_from_resource_builds_model_with_string_id():
    post = PostSerializer().from_resource(RESOURCE)

    assert post == Post(id="12", title="Hello", body="World", author_id="7")


def test_from_resource_ignores_undeclared_attributes():
    values = LooseSerializer().from_resource(
        {"type": "notes", "id": "1", "attributes": {"text": "a", "pinned": True}}
    )

    assert values == {"id": "1", "text": "a", "pinned": True}


def test_from_many():
    posts = PostSerializer().from_many(
        [
            {"type": "posts", "id": "1", "attributes": {"title": "A"}},
            {"type": "posts", "id": "2", "attributes": {"title": "B"}},
        ]
    )

    assert [post.title for post in posts] == ["A", "B"]


def test_type_mismatch_raises():
    with pytest.raises(ResourceTypeMismatch) as excinfo:
        PostSerializer().from_resource({"type": "users", "id": "1", "attributes": {}})

    assert excinfo.value.expected == "posts"
    assert excinfo.value.actual == "users"


def test_to_attributes_uses_declared_fields():
    post = Post(id="1", title="Hello", body="World", author_id="7")

    assert PostSerializer().to_attributes(post) == {"title": "Hello", "body": "World"}


def test_to_attributes_without_fields_drops_foreign_keys():
    attributes = LooseSerializer().to_attributes({"id": "1", "text": "a", "owner_id": "3"})

    assert attributes == {"text": "a"}


def test_sparse_fields():
    assert PostSerializer().sparse_fields() == {"posts": ["title", "body"]}
    assert LooseSerializer().sparse_fields() == {}
