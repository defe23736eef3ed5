"""
Application package initializer.

This package contains the main entrypoint for the API and its
submodules: ``core`` (configuration, logging and the in-memory store),
``schemas``, ``services`` and ``api``.
"""

from .main import app  # noqa: F401
