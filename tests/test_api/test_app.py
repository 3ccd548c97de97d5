"""Tests for application wiring: lifespan, CORS, health, CLI."""

from __future__ import annotations

from typing import TYPE_CHECKING
from unittest.mock import patch

import pytest

from blogapi.config import Settings
from blogapi.exceptions import ContentDirectoryError
from blogapi.main import create_app, lifespan
from tests.conftest import create_test_client, write_post

if TYPE_CHECKING:
    from pathlib import Path


class TestLifespan:
    @pytest.mark.asyncio
    async def test_builds_catalog(self, blog_content_dir: Path, test_settings: Settings) -> None:
        app = create_app(test_settings)
        async with lifespan(app):
            assert len(app.state.catalog.posts) == 3
            assert len(app.state.catalog.tags) == 3

    @pytest.mark.asyncio
    async def test_missing_content_dir_is_fatal(self, tmp_path: Path) -> None:
        settings = Settings(_env_file=None, content_dir=tmp_path / "missing", timezone="UTC")
        app = create_app(settings)
        with pytest.raises(ContentDirectoryError):
            async with lifespan(app):
                pass


class TestCors:
    @pytest.mark.asyncio
    async def test_any_origin_allowed(
        self, blog_content_dir: Path, test_settings: Settings
    ) -> None:
        async with create_test_client(test_settings) as ac:
            resp = await ac.get("/api/posts", headers={"Origin": "https://blog.example"})
        assert resp.headers["access-control-allow-origin"] == "*"

    @pytest.mark.asyncio
    async def test_preflight(self, blog_content_dir: Path, test_settings: Settings) -> None:
        async with create_test_client(test_settings) as ac:
            resp = await ac.options(
                "/api/tags",
                headers={
                    "Origin": "https://blog.example",
                    "Access-Control-Request-Method": "GET",
                    "Access-Control-Request-Headers": "X-Accept-Language",
                },
            )
        assert resp.status_code == 200
        assert resp.headers["access-control-allow-origin"] == "*"


class TestHealth:
    @pytest.mark.asyncio
    async def test_ok(self, blog_content_dir: Path, test_settings: Settings) -> None:
        async with create_test_client(test_settings) as ac:
            resp = await ac.get("/api/health")
        assert resp.status_code == 200
        body = resp.json()
        assert body["status"] == "ok"
        assert body["posts"] == 3
        assert body["tags"] == 3
        assert body["skipped"] == 0

    @pytest.mark.asyncio
    async def test_degraded_when_files_skipped(
        self, tmp_content_dir: Path, test_settings: Settings
    ) -> None:
        write_post(tmp_content_dir, "2017-03-02-good.md")
        write_post(tmp_content_dir, "bad-name.md")
        async with create_test_client(test_settings) as ac:
            resp = await ac.get("/api/health")
            posts = await ac.get("/api/posts")
        assert resp.json()["status"] == "degraded"
        assert resp.json()["skipped"] == 1
        assert len(posts.json()["data"]) == 1


class TestCliEntry:
    def test_cli_entry_uses_app_settings(self) -> None:
        from blogapi.main import app, cli_entry

        original_settings = app.state.settings
        app.state.settings = Settings(_env_file=None, host="127.0.0.1", port=9999, debug=True)
        try:
            with patch("uvicorn.run") as mock_run:
                cli_entry([])
            mock_run.assert_called_once_with(
                "blogapi.main:app",
                host="127.0.0.1",
                port=9999,
                reload=True,
            )
        finally:
            app.state.settings = original_settings

    def test_cli_entry_content_dir_argument(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        from blogapi.main import app, cli_entry

        monkeypatch.setenv("CONTENT_DIR", str(tmp_path / "unused"))
        original_settings = app.state.settings
        try:
            with patch("uvicorn.run") as mock_run:
                cli_entry([str(tmp_path)])
            assert app.state.settings.content_dir == tmp_path
            mock_run.assert_called_once()
        finally:
            app.state.settings = original_settings
