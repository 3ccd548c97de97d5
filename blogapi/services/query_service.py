"""Read-only queries over the catalog.

Every function takes the request language explicitly and never mutates the
catalog, so concurrent requests can share one instance without locking.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from blogapi.services.catalog_service import Catalog, Post, Tag

# Leading ASCII integer; anything after it is ignored ("12abc" -> 12).
_LEADING_INT = re.compile(r"\s*([+-]?[0-9]+)", re.ASCII)


@dataclass(frozen=True)
class CatalogMeta:
    """Post and tag counts for one language."""

    posts_count: int
    tags_count: int


def _coerce_id(value: int | str) -> int | None:
    if isinstance(value, int):
        return value
    matched = _LEADING_INT.match(value)
    if matched is None:
        return None
    return int(matched.group(1))


def get_post(catalog: Catalog, post_id: int | str) -> Post | None:
    """Get a post by the leading integer of *post_id*; ids without one never match."""
    wanted = _coerce_id(post_id)
    if wanted is None:
        return None
    return next((post for post in catalog.posts if post.id == wanted), None)


def list_posts(catalog: Catalog, lang: str) -> list[Post]:
    """All posts in *lang*, in ingestion order."""
    return [post for post in catalog.posts if post.lang == lang]


def list_tags(catalog: Catalog, lang: str) -> list[Tag]:
    """All tags in *lang*, in registry order."""
    return [tag for tag in catalog.tags if tag.lang == lang]


def get_meta(catalog: Catalog, lang: str) -> CatalogMeta:
    """Count posts and tags in *lang*."""
    return CatalogMeta(
        posts_count=len(list_posts(catalog, lang)),
        tags_count=len(list_tags(catalog, lang)),
    )


def find_post_by_slug(catalog: Catalog, slug: str) -> Post | None:
    """First post with exactly this slug, in any language."""
    return next((post for post in catalog.posts if post.slug == slug), None)


def filter_posts_by_tag(catalog: Catalog, tag_slug: str, lang: str) -> list[Post]:
    """Posts in *lang* that declare *tag_slug*.

    Matching is on the post's whitespace-free raw tag list, so the slug must
    be given exactly as written (without spaces).
    """
    return [
        post for post in catalog.posts if post.lang == lang and tag_slug in post.tag_slugs
    ]


def find_tag_by_slug(catalog: Catalog, slug: str, lang: str) -> Tag | None:
    """The tag with this slug in *lang*."""
    return catalog.tags.get(slug, lang)
