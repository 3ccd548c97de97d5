"""Catalog builder: post files -> in-memory posts and tag registry."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

import yaml

from blogapi.exceptions import MalformedFilenameError
from blogapi.filesystem.frontmatter import parse_frontmatter
from blogapi.services.datetime_service import local_midnight
from blogapi.services.slug_service import humanize_tag, parse_post_filename

if TYPE_CHECKING:
    from collections.abc import Iterator
    from datetime import datetime

    from blogapi.filesystem.content_manager import ContentFile, ContentManager

logger = logging.getLogger(__name__)

DEFAULT_LANG = "en"

# Per-file failures that skip the file instead of aborting ingestion.
_SKIPPABLE_ERRORS = (ValueError, yaml.YAMLError, OSError)


@dataclass
class Tag:
    """A tag shared by every post that declares it in the same language."""

    id: int
    slug: str
    lang: str
    name: str
    post_count: int = 1


@dataclass
class Post:
    """A parsed blog post."""

    id: int
    slug: str
    lang: str
    created_at: datetime
    body: str
    title: str | None = None
    summary: str | None = None
    raw_tags: str = ""
    tags: list[Tag] = field(default_factory=list)
    extra: dict[str, Any] = field(default_factory=dict)
    file_name: str = ""

    @property
    def tag_slugs(self) -> list[str]:
        """Tag slugs as matched by the tag filter; one per entry in ``tags``."""
        return self.raw_tags.split(",") if self.raw_tags else []


class TagRegistry:
    """Ordered, append-only registry of tags keyed by ``(slug, lang)``.

    Tag ids are assigned from 0 in first-seen order.  Ingestion is sequential,
    so ids and post counts are the same on every scan of the same directory.
    """

    def __init__(self) -> None:
        self._tags: list[Tag] = []
        self._index: dict[tuple[str, str], Tag] = {}

    def __iter__(self) -> Iterator[Tag]:
        return iter(self._tags)

    def __len__(self) -> int:
        return len(self._tags)

    def get(self, slug: str, lang: str) -> Tag | None:
        return self._index.get((slug, lang))

    def resolve(self, raw_tag: str, lang: str) -> Tag:
        """Return the tag for *raw_tag* in *lang*, counting one more reference.

        Creates the tag with ``post_count == 1`` the first time it is seen.
        """
        slug = raw_tag.strip()
        tag = self._index.get((slug, lang))
        if tag is not None:
            tag.post_count += 1
            return tag
        tag = Tag(id=len(self._tags), slug=slug, lang=lang, name=humanize_tag(slug))
        self._tags.append(tag)
        self._index[(slug, lang)] = tag
        return tag

    def resolve_all(self, raw_tags: str, lang: str) -> list[Tag]:
        """Resolve each comma-separated tag, left to right; empty entries are ignored."""
        return [self.resolve(token, lang) for token in raw_tags.split(",") if token.strip()]


@dataclass
class Catalog:
    """Posts and tags loaded from the content directory."""

    posts: list[Post] = field(default_factory=list)
    tags: TagRegistry = field(default_factory=TagRegistry)
    skipped: list[str] = field(default_factory=list)


def build_post(
    content_file: ContentFile,
    raw_content: str,
    registry: TagRegistry,
    default_lang: str = DEFAULT_LANG,
    tz: str | None = None,
) -> Post:
    """Parse one post file and register its tags.

    Raises MalformedFilenameError (a ValueError) for names that are not
    ``YYYY-MM-DD-<slug>.md`` or carry an impossible date, and
    ``yaml.YAMLError`` for broken front matter.  The registry is only
    touched once the file has parsed successfully.
    """
    filename = parse_post_filename(content_file.name)
    try:
        created_at = local_midnight(filename.year, filename.month, filename.day, tz)
    except ValueError as exc:
        raise MalformedFilenameError(content_file.name, f"invalid date: {exc}") from exc

    meta = parse_frontmatter(raw_content, default_lang=default_lang)
    # Empty entries are dropped here as in resolve_all, keeping tag_slugs and tags aligned.
    raw_tags = ",".join(
        token for token in meta.tags.replace(" ", "").split(",") if token.strip()
    )

    return Post(
        id=content_file.position,
        slug=filename.post_slug,
        lang=meta.lang,
        created_at=created_at,
        body=meta.body,
        title=meta.title,
        summary=meta.summary,
        raw_tags=raw_tags,
        tags=registry.resolve_all(meta.tags, meta.lang),
        extra=meta.extra,
        file_name=content_file.name,
    )


def build_catalog(
    content_manager: ContentManager,
    default_lang: str = DEFAULT_LANG,
    tz: str | None = None,
) -> Catalog:
    """Scan the content directory once and build the catalog.

    Files are processed one at a time in listing order.  A file that fails to
    read or parse is logged, recorded in ``Catalog.skipped`` and left out;
    the others are still ingested.  Raises ContentDirectoryError if the
    directory itself cannot be listed.
    """
    catalog = Catalog()
    for content_file in content_manager.list_files():
        try:
            raw_content = content_manager.read_file(content_file)
            post = build_post(content_file, raw_content, catalog.tags, default_lang, tz)
        except _SKIPPABLE_ERRORS as exc:
            logger.warning("Skipping %s: %s", content_file.name, exc)
            catalog.skipped.append(f"{content_file.name}: {exc}")
            continue
        catalog.posts.append(post)
    logger.debug(
        "Catalog built from %s: %d posts, %d tags, %d skipped",
        content_manager.content_dir,
        len(catalog.posts),
        len(catalog.tags),
        len(catalog.skipped),
    )
    return catalog
