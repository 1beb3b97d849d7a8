"""
Top‑level router for version 1 of the API.

This router aggregates domain‑specific routers.  The guitars router
defines its own ``/guitars`` paths so that the collection address
(``/guitars``) has no trailing slash.
"""

from fastapi import APIRouter

from .endpoints import guitars

router = APIRouter()

router.include_router(guitars.router, tags=["guitars"])
