"""
API package.

``router.py`` exposes a top-level ``router`` which includes the
domain-specific routers defined in ``endpoints``.  The application
mounts it under ``/api``.
"""
