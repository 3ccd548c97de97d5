"""Slug derivation for post URLs and tag names."""

from __future__ import annotations

import re
from dataclasses import dataclass

from blogapi.exceptions import MalformedFilenameError

# 2017-03-02-some-post-slug.md
POST_FILENAME_PATTERN = re.compile(r"^(?P<date>(\d{4})-(\d{2})-(\d{2}))-(?P<slug>.+)\.md$")


@dataclass(frozen=True)
class PostFilename:
    """Date and slug components of a post file name."""

    year: int
    month: int
    day: int
    date: str
    slug: str

    @property
    def post_slug(self) -> str:
        """URL slug of the form ``YYYY/MM/DD/<slug>``."""
        return build_post_slug(self.date, self.slug)


def parse_post_filename(file_name: str) -> PostFilename:
    """Split ``YYYY-MM-DD-<slug>.md`` into its parts.

    Raises MalformedFilenameError if the name does not match.
    """
    matched = POST_FILENAME_PATTERN.match(file_name)
    if matched is None:
        raise MalformedFilenameError(file_name)
    year, month, day = (int(part) for part in matched.group(2, 3, 4))
    return PostFilename(
        year=year,
        month=month,
        day=day,
        date=matched.group("date"),
        slug=matched.group("slug"),
    )


def build_post_slug(date: str, slug: str) -> str:
    """Turn ``2017-03-02`` and ``some-post`` into ``2017/03/02/some-post``."""
    return f"{date.replace('-', '/')}/{slug}"


def humanize_tag(slug: str) -> str:
    """Derive a display name from a tag slug.

    Hyphens become spaces and the first letter of every word is upper-cased;
    the rest of each word is left alone, so ``go-lang`` -> ``Go Lang`` and
    ``iOS`` stays ``IOS``.
    """
    text = slug.strip().replace("-", " ")
    return re.sub(r"\b\w", lambda m: m.group(0).upper(), text)
