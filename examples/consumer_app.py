"""Example FastAPI app listing posts from an upstream JSON:API service.

Run with:
    JSONAPI_CONSUMER_API_URL=http://localhost:3000 \
    EXAMPLE_EMAIL=jane@example.com EXAMPLE_TOKEN=secret \
    uvicorn examples.consumer_app:app --reload
"""
from __future__ import annotations

import logging
import os
from typing import AsyncGenerator, Optional

from fastapi import Depends, FastAPI, HTTPException, Request
from pydantic import BaseModel

from jsonapi_consumer import (
    Credentials,
    JSONAPIClient,
    JSONAPIResourceSet,
    JSONAPISerializer,
    MalformedPageLink,
    get_settings,
)
from jsonapi_consumer.core.errors import NotAuthenticated, ResourceNotFound
from jsonapi_consumer.routing import build_pager, page_number, pager_context

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


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


class PostResourceSet(JSONAPIResourceSet):
    serializer_class = PostSerializer
    sort = ["-created-at"]


app = FastAPI(
    title="JSON:API consumer example",
    description="Lists upstream posts with locally rooted pagination links.",
    version="0.1.0",
)


async def get_client() -> AsyncGenerator[JSONAPIClient, None]:
    async with JSONAPIClient(settings=get_settings()) as client:
        yield client


def get_credentials() -> Credentials:
    """Credentials for the signed-in user; read from the environment here."""
    email = os.getenv("EXAMPLE_EMAIL", "")
    token = os.getenv("EXAMPLE_TOKEN", "")
    try:
        return Credentials(email=email, token=token)
    except ValueError as exc:
        raise HTTPException(status_code=401, detail=str(exc)) from exc


def get_post_set(client: JSONAPIClient = Depends(get_client)) -> PostResourceSet:
    return PostResourceSet(client)


@app.get("/posts", name="posts_index")
async def posts_index(
    request: Request,
    page: int = Depends(page_number),
    posts: PostResourceSet = Depends(get_post_set),
    credentials: Credentials = Depends(get_credentials),
) -> dict:
    try:
        result = await posts.list(credentials, page=page)
    except NotAuthenticated as exc:
        raise HTTPException(status_code=401, detail=str(exc)) from exc
    try:
        pager = build_pager(
            request,
            result.links,
            "posts_index",
            page_param=posts.client.settings.page_number_param,
        )
    except MalformedPageLink:
        logger.warning("Upstream returned unusable page links; omitting pager")
        pager = {}
    return {
        "posts": [post.model_dump() for post in result.items],
        "pager": pager_context(pager, page),
    }


@app.get("/posts/{post_id}", name="posts_show")
async def posts_show(
    post_id: str,
    posts: PostResourceSet = Depends(get_post_set),
    credentials: Credentials = Depends(get_credentials),
) -> dict:
    try:
        post = await posts.get(post_id, credentials)
    except ResourceNotFound as exc:
        raise HTTPException(status_code=404, detail=str(exc)) from exc
    return {"post": post.model_dump()}
