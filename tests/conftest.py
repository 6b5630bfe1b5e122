"""
Pytest fixtures for Signal Graph tests. Isolates settings/env per test and gives the API a fresh session.
"""

from __future__ import annotations

import pytest


@pytest.fixture(autouse=True)
def clean_settings(tmp_path, monkeypatch):
    """
    Point exports at a temp dir and drop cached settings before and after each test.
    Unset the default-candidate override so sessions start with Candidate_001.
    """
    from signal_graph.config import get_settings

    monkeypatch.delenv("SIGNAL_GRAPH_DEFAULT_CANDIDATE", raising=False)
    monkeypatch.setenv("SIGNAL_GRAPH_EXPORT_DIR", str(tmp_path / "exports"))
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def session():
    from signal_graph.analysis_engine import EvaluationSession

    return EvaluationSession()


@pytest.fixture
def client(session):
    """FastAPI TestClient wired to a per-test EvaluationSession."""
    from fastapi.testclient import TestClient

    from signal_graph.api_server.server import app, get_session

    app.dependency_overrides[get_session] = lambda: session
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()
