"""
Top‑level router for version 1 of the API.

This router aggregates resource routers under a unified prefix.  When
new resources are introduced, include their routers here.
"""

from fastapi import APIRouter

from .endpoints import memos

router = APIRouter()

router.include_router(memos.router, prefix="/memos", tags=["memos"])
