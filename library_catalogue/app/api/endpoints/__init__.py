"""
Endpoint subpackage.

Each module in this package defines an APIRouter for a specific
domain.  Catalogue routers are aggregated in ``api/router.py``; the
health router is mounted directly by the application.
"""
