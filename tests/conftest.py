"""Shared test fixtures for the blog content API."""

from __future__ import annotations

from contextlib import asynccontextmanager
from typing import TYPE_CHECKING

import pytest
from httpx import ASGITransport, AsyncClient

from blogapi.config import Settings
from blogapi.main import create_app, load_catalog

if TYPE_CHECKING:
    from collections.abc import AsyncGenerator
    from pathlib import Path


def write_post(
    content_dir: Path,
    file_name: str,
    *,
    lang: str | None = "en",
    tags: str | None = "",
    title: str | None = "A post",
    summary: str | None = "Summary",
    body: str = "Body text.\n",
    extra: dict[str, str] | None = None,
) -> Path:
    """Write a post file with YAML front matter; ``None`` leaves a field out."""
    lines = ["---"]
    for key, value in (("title", title), ("summary", summary), ("lang", lang), ("tags", tags)):
        if value is not None:
            lines.append(f'{key}: "{value}"')
    for key, value in (extra or {}).items():
        lines.append(f"{key}: {value}")
    lines.append("---")
    path = content_dir / file_name
    path.write_text("\n".join(lines) + "\n" + body, encoding="utf-8")
    return path


@asynccontextmanager
async def create_test_client(settings: Settings) -> AsyncGenerator[AsyncClient]:
    """Create an HTTP test client with the catalog loaded.

    Builds the catalog directly because ASGITransport does not run the
    application lifespan.
    """
    app = create_app(settings)
    app.state.catalog = load_catalog(settings)

    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test",
    ) as ac:
        yield ac


@pytest.fixture
def tmp_content_dir(tmp_path: Path) -> Path:
    """Create an empty temporary content directory."""
    content = tmp_path / "content"
    content.mkdir()
    return content


@pytest.fixture
def test_settings(tmp_content_dir: Path) -> Settings:
    """Create test settings pointing at the temporary content directory."""
    return Settings(
        _env_file=None,
        debug=True,
        content_dir=tmp_content_dir,
        default_lang="en",
        timezone="UTC",
    )


@pytest.fixture
def blog_content_dir(tmp_content_dir: Path) -> Path:
    """A small bilingual blog."""
    write_post(
        tmp_content_dir,
        "2017-03-02-some-post-slug.md",
        title="Some Post",
        summary="First post",
        tags="go-lang, web-development",
        body="# Some Post\n\nHello.\n",
    )
    write_post(
        tmp_content_dir,
        "2017-04-10-second-post.md",
        title="Second Post",
        tags="go-lang",
    )
    write_post(
        tmp_content_dir,
        "2017-05-01-premier-article.md",
        title="Premier article",
        lang="fr",
        tags="go-lang",
    )
    return tmp_content_dir
