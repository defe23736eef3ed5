"""
Top-level API router.

This router aggregates domain-specific routers under a unified
prefix.  When new endpoints are added, update this file to include
their routers.
"""

from fastapi import APIRouter

from .endpoints import books

router = APIRouter()

router.include_router(books.router, prefix="/books", tags=["books"])
