"""Tag API endpoints."""

from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Depends, Query
from fastapi.responses import PlainTextResponse

from blogapi.api.deps import get_catalog, get_language
from blogapi.schemas.jsonapi import Document, tag_serializer
from blogapi.services.catalog_service import Catalog
from blogapi.services.query_service import find_tag_by_slug, list_tags

router = APIRouter(prefix="/api/tags", tags=["tags"])


@router.get(
    "",
    response_model=Document,
    response_model_exclude_none=True,
    responses={404: {"content": {"text/plain": {}}, "description": "Tag not found"}},
)
async def list_tags_endpoint(
    catalog: Annotated[Catalog, Depends(get_catalog)],
    lang: Annotated[str, Depends(get_language)],
    slug: Annotated[str | None, Query(alias="filter[slug]")] = None,
) -> Document | PlainTextResponse:
    """List tags in the request language, or get one by ``filter[slug]``."""
    if slug is not None:
        tag = find_tag_by_slug(catalog, slug, lang)
        if tag is None:
            return PlainTextResponse("Not Found", status_code=404)
        return tag_serializer.serialize(tag)
    return tag_serializer.serialize(list_tags(catalog, lang))
