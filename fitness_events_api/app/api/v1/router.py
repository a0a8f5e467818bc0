"""
Top-level router for version 1 of the API.

Aggregates the domain routers under their prefixes.  When a new
domain is added, include its router here.
"""

from fastapi import APIRouter

from .endpoints import admin, events, invoice, trainers, users

router = APIRouter()

router.include_router(users.router, prefix="/users", tags=["users"])
router.include_router(events.router, prefix="/events", tags=["events"])
router.include_router(trainers.router, prefix="/trainers", tags=["trainers"])
router.include_router(admin.router, prefix="/admin", tags=["admin"])
router.include_router(invoice.router, prefix="/invoice", tags=["invoice"])
