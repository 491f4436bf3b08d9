"""
Top-level router.

Aggregates the coaster and admin routers.  Paths are not versioned:
the collection lives at ``/coasters`` and the portal at ``/admin``.
"""

from fastapi import APIRouter

from .endpoints import admin, coasters

router = APIRouter()

router.include_router(coasters.router, prefix="/coasters", tags=["coasters"])
router.include_router(admin.router, prefix="/admin", tags=["admin"])
