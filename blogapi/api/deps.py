"""Shared API dependencies: settings, catalog, request language."""

from __future__ import annotations

from typing import Annotated

from fastapi import Header, Request

from blogapi.config import Settings
from blogapi.services.catalog_service import Catalog


def get_settings(request: Request) -> Settings:
    """Get application settings from app state."""
    settings: Settings = request.app.state.settings
    return settings


def get_catalog(request: Request) -> Catalog:
    """Get the catalog built at startup from app state."""
    catalog: Catalog = request.app.state.catalog
    return catalog


def get_language(
    request: Request,
    x_accept_language: Annotated[str | None, Header()] = None,
) -> str:
    """Language context for this request.

    Taken from ``X-Accept-Language``; an absent or blank header falls back to
    the configured default language.
    """
    if x_accept_language and x_accept_language.strip():
        return x_accept_language.strip()
    return get_settings(request).default_lang
