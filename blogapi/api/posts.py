"""Post API endpoints."""

from __future__ import annotations

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, Query
from fastapi.responses import PlainTextResponse

from blogapi.api.deps import get_catalog, get_language
from blogapi.schemas.jsonapi import Document, meta_document, post_serializer, posts_serializer
from blogapi.services.catalog_service import Catalog
from blogapi.services.query_service import (
    filter_posts_by_tag,
    find_post_by_slug,
    get_meta,
    get_post,
    list_posts,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/posts", tags=["posts"])


@router.get(
    "",
    response_model=Document,
    response_model_exclude_none=True,
    responses={404: {"content": {"text/plain": {}}, "description": "Post not found"}},
)
async def list_posts_endpoint(
    catalog: Annotated[Catalog, Depends(get_catalog)],
    lang: Annotated[str, Depends(get_language)],
    meta_only: Annotated[str | None, Query(alias="metaOnly")] = None,
    slug: Annotated[str | None, Query(alias="filter[slug]")] = None,
    tag: Annotated[str | None, Query(alias="filter[tag]")] = None,
) -> Document | PlainTextResponse:
    """List posts in the request language, or answer a meta/slug/tag query.

    Precedence: ``metaOnly=true``, then ``filter[slug]``, then ``filter[tag]``.
    """
    if meta_only == "true":
        meta = get_meta(catalog, lang)
        return meta_document(meta.posts_count, meta.tags_count)

    if slug is not None:
        post = find_post_by_slug(catalog, slug)
        if post is None:
            logger.debug("No post with slug %r", slug)
            return PlainTextResponse("Not Found", status_code=404)
        return post_serializer.serialize(post)

    if tag is not None:
        return posts_serializer.serialize(filter_posts_by_tag(catalog, tag, lang))

    return posts_serializer.serialize(list_posts(catalog, lang))


@router.get(
    "/{post_id}",
    response_model=Document,
    response_model_exclude_none=True,
    responses={404: {"content": {"text/plain": {}}, "description": "Post not found"}},
)
async def get_post_endpoint(
    post_id: str,
    catalog: Annotated[Catalog, Depends(get_catalog)],
) -> Document | PlainTextResponse:
    """Get a single post by id, in any language."""
    post = get_post(catalog, post_id)
    if post is None:
        logger.debug("No post with id %r", post_id)
        return PlainTextResponse("NOT FOUND", status_code=404)
    return post_serializer.serialize(post)
