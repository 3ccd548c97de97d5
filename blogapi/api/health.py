"""Health check endpoint."""

from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Depends
from pydantic import BaseModel

from blogapi import __version__
from blogapi.api.deps import get_catalog
from blogapi.services.catalog_service import Catalog

router = APIRouter(tags=["health"])


class HealthResponse(BaseModel):
    status: str
    version: str
    posts: int
    tags: int
    skipped: int


@router.get("/api/health", response_model=HealthResponse)
async def health_check(
    catalog: Annotated[Catalog, Depends(get_catalog)],
) -> HealthResponse:
    """Health check endpoint for monitoring and load balancers."""
    return HealthResponse(
        status="ok" if not catalog.skipped else "degraded",
        version=__version__,
        posts=len(catalog.posts),
        tags=len(catalog.tags),
        skipped=len(catalog.skipped),
    )
