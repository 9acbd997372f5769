"""
Top-level router for version 1 of the API.

This router aggregates the domain routers.  When a new domain is
added, include its router here.
"""

from fastapi import APIRouter

from .endpoints import admin_reservations, auth, members, reservations, themes, times

router = APIRouter()

# auth defines /login and /login/check itself
router.include_router(auth.router, tags=["auth"])
router.include_router(members.router, prefix="/members", tags=["members"])
router.include_router(times.router, prefix="/times", tags=["times"])
router.include_router(themes.router, prefix="/themes", tags=["themes"])
router.include_router(reservations.router, prefix="/reservations", tags=["reservations"])
router.include_router(admin_reservations.router, prefix="/admin/reservations", tags=["admin"])
