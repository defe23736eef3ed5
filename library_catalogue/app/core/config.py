"""
Simple configuration management.

The ``Settings`` dataclass reads configuration directly from
environment variables.  Defaults are provided for all fields, so the
catalogue starts with no configuration at all.  Override values by
exporting the corresponding variables before the application is
imported.
"""

import os
from dataclasses import dataclass
from typing import Optional


def _env_flag(name: str, default: str) -> bool:
    return os.getenv(name, default).lower() in {"1", "true", "yes"}


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = os.getenv("PROJECT_NAME", "Library Catalogue API")
    api_version: str = os.getenv("API_VERSION", "1.0.0")
    debug: bool = _env_flag("DEBUG", "false")
    log_level: str = os.getenv("LOG_LEVEL", "INFO")

    # Optional path of a log file.  When unset, logs only go to the
    # console.
    log_file: Optional[str] = os.getenv("LOG_FILE") or None

    # Address the uvicorn server binds to when started through ``run.py``.
    host: str = os.getenv("HOST", "0.0.0.0")
    port: int = int(os.getenv("PORT", "8000"))

    # Seed the catalogue with the five sample books on startup.
    load_sample_data: bool = _env_flag("LOAD_SAMPLE_DATA", "true")


# Instantiate settings once so other modules can import it without
# repeatedly reading environment variables.  Because the dataclass
# computes values at class definition time, environment variables
# should be set before importing this module.
settings = Settings()
