"""
Top‑level router for the JSON API.

This router aggregates the domain routers under a unified prefix.  It
is included by the application under ``/api``.
"""

from fastapi import APIRouter

from .endpoints import stats, videos

router = APIRouter()

router.include_router(videos.router, prefix="/videos", tags=["videos"])
router.include_router(stats.router, prefix="/stats", tags=["stats"])
