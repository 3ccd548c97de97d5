"""YAML front matter parser for blog posts."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

import frontmatter

RECOGNIZED_FIELDS: frozenset[str] = frozenset(
    {
        "title",
        "summary",
        "lang",
        "tags",
    }
)


@dataclass
class PostFrontmatter:
    """Front matter attributes and markdown body of one post file."""

    body: str
    lang: str
    title: str | None = None
    summary: str | None = None
    tags: str = ""
    extra: dict[str, Any] = field(default_factory=dict)


def _optional_str(value: object) -> str | None:
    if value is None:
        return None
    return value if isinstance(value, str) else str(value)


def normalize_tags(raw_tags: object | None) -> str:
    """Return the declared tags as one comma-separated string.

    Tags are normally written as ``tags: go-lang, web-development``; a YAML
    list is accepted as well and joined with commas.
    """
    if raw_tags is None:
        return ""
    if isinstance(raw_tags, list):
        return ",".join(str(tag) for tag in raw_tags if tag is not None)
    return str(raw_tags)


def parse_frontmatter(raw_content: str, default_lang: str = "en") -> PostFrontmatter:
    """Split a markdown file into recognized attributes, extras and body.

    A missing or blank ``lang`` falls back to *default_lang*.  Raises
    ``yaml.YAMLError`` on broken front matter.
    """
    post = frontmatter.loads(raw_content)

    lang = _optional_str(post.get("lang"))
    if not lang or not lang.strip():
        lang = default_lang

    # loads() strips the whole text; put back the body's trailing whitespace.
    body = post.content
    if body:
        body += raw_content[len(raw_content.rstrip()) :]

    extra = {key: value for key, value in post.metadata.items() if key not in RECOGNIZED_FIELDS}

    return PostFrontmatter(
        body=body,
        lang=lang.strip(),
        title=_optional_str(post.get("title")),
        summary=_optional_str(post.get("summary")),
        tags=normalize_tags(post.get("tags")),
        extra=extra,
    )
