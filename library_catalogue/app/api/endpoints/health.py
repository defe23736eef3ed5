"""
Health check endpoint.

Reports that the application is up together with the number of books
currently held in memory.
"""

from typing import Any, Dict

from fastapi import APIRouter

from library_catalogue.app.core.store import get_store

router = APIRouter()


@router.get("", response_model=Dict[str, Any])
async def health() -> Dict[str, Any]:
    return {"status": "ok", "books": len(get_store())}
