"""
Top-level package for the Library Catalogue API.

All functionality lives in submodules under ``app``; run the service
with ``uvicorn library_catalogue.app.main:app`` or via ``run.py``.
"""

__all__ = []
