"""
Environment variable loading for Signal Graph.

- SIGNAL_GRAPH_DEFAULT_CANDIDATE: candidate id a fresh session starts with (default: Candidate_001)
- SIGNAL_GRAPH_EXPORT_DIR: directory for CSV / JSON exports (default: exports)
- API_HOST / API_PORT: bind address for the API server
- Loads .env from project root when available.
"""

from __future__ import annotations

import os
from pathlib import Path

from dotenv import load_dotenv

# Project root: config is signal_graph/config/, root is 2 levels up
_CONFIG_DIR = Path(__file__).resolve().parent
_PACKAGE_DIR = _CONFIG_DIR.parent
_ROOT = _PACKAGE_DIR.parent
_ENV_PATH = _ROOT / ".env"

DEFAULT_CANDIDATE_ID = "Candidate_001"
DEFAULT_EXPORT_DIR = "exports"
DEFAULT_API_HOST = "0.0.0.0"
DEFAULT_API_PORT = 8000


def load_signal_graph_env() -> None:
    """Load .env from project root. Safe to call multiple times; never overrides real env."""
    if _ENV_PATH.is_file():
        load_dotenv(_ENV_PATH, override=False)


def get_default_candidate_id() -> str:
    """Return SIGNAL_GRAPH_DEFAULT_CANDIDATE, falling back to Candidate_001 when unset or blank."""
    load_signal_graph_env()
    return (os.getenv("SIGNAL_GRAPH_DEFAULT_CANDIDATE") or "").strip() or DEFAULT_CANDIDATE_ID


def get_export_dir() -> Path:
    """Return the export directory. Relative paths resolve against the working directory."""
    load_signal_graph_env()
    raw = (os.getenv("SIGNAL_GRAPH_EXPORT_DIR") or "").strip() or DEFAULT_EXPORT_DIR
    return Path(raw)


def get_api_host() -> str:
    load_signal_graph_env()
    return (os.getenv("API_HOST") or "").strip() or DEFAULT_API_HOST


def get_api_port() -> int:
    """Return API_PORT as int; a malformed value falls back to 8000."""
    load_signal_graph_env()
    raw = (os.getenv("API_PORT") or "").strip()
    if not raw:
        return DEFAULT_API_PORT
    try:
        return int(raw)
    except ValueError:
        return DEFAULT_API_PORT
