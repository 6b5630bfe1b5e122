"""
Application settings.

Reads the env helpers once and exposes a frozen Settings object used by the
session, the exporters, the API server and main.py.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path

from signal_graph.config.env import (
    get_api_host,
    get_api_port,
    get_default_candidate_id,
    get_export_dir,
)


@dataclass(frozen=True)
class Settings:
    default_candidate_id: str
    export_dir: Path
    api_host: str
    api_port: int
    log_level: str
    log_format: str


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """
    Return the current application settings.

    Cached for the life of the process; call get_settings.cache_clear() after
    changing the environment (tests do this through monkeypatch).
    """
    return Settings(
        default_candidate_id=get_default_candidate_id(),
        export_dir=get_export_dir(),
        api_host=get_api_host(),
        api_port=get_api_port(),
        log_level=os.getenv("LOG_LEVEL", "INFO").strip().upper() or "INFO",
        log_format=os.getenv("LOG_FORMAT", "json").strip().lower() or "json",
    )
