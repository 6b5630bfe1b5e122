"""
Test that signal_logging can be imported without circular import and logger works.
"""

from __future__ import annotations

import json

import pytest


@pytest.fixture
def reset_logging():
    """Restore the default JSON/INFO configuration after a test reconfigures logging."""
    from signal_graph.signal_logging import configure_structlog

    yield
    configure_structlog()


def _records(err: str) -> list[dict]:
    return [json.loads(line) for line in err.splitlines() if line.strip()]


def test_logging_import():
    """Import get_logger from signal_logging and use the logger."""
    from signal_graph.signal_logging import get_logger

    logger = get_logger("test")
    assert logger is not None
    assert hasattr(logger, "info")
    assert hasattr(logger, "debug")
    assert hasattr(logger, "warning")
    assert hasattr(logger, "error")
    # Smoke test: call info (should not raise)
    logger.info("test_message", key="value")


def test_logs_are_json_on_stderr(capsys, reset_logging):
    """Records go to stderr, never stdout, with event_type, level, logger and timestamp."""
    from signal_graph.signal_logging import configure_structlog, get_logger

    configure_structlog("json", "INFO")
    get_logger("test.stream").info("stream_check", score=3)
    captured = capsys.readouterr()
    assert captured.out == ""
    record = _records(captured.err)[-1]
    assert record["event_type"] == "stream_check"
    assert record["message"] == "stream_check"
    assert record["level"] == "info"
    assert record["logger"] == "test.stream"
    assert record["score"] == 3
    assert "timestamp" in record


def test_bind_candidate_logger(capsys, reset_logging):
    """bind_candidate adds candidate_id to every record."""
    from signal_graph.signal_logging import bind_candidate, configure_structlog

    configure_structlog("json", "INFO")
    bind_candidate("Candidate_001", "test.bound").info("candidate_bound_message", score=0)
    record = _records(capsys.readouterr().err)[-1]
    assert record["candidate_id"] == "Candidate_001"
    assert record["logger"] == "test.bound"


def test_configure_logging_applies_settings_level(monkeypatch, capsys, reset_logging):
    """LOG_LEVEL from Settings filters module loggers created before configuration."""
    from signal_graph.config import get_settings
    from signal_graph.signal_logging import configure_logging, get_logger

    logger = get_logger("test.level")
    monkeypatch.setenv("LOG_LEVEL", "WARNING")
    monkeypatch.setenv("LOG_FORMAT", "json")
    get_settings.cache_clear()
    configure_logging()
    logger.info("hidden_event")
    logger.warning("shown_event")
    err = capsys.readouterr().err
    assert "hidden_event" not in err
    assert "shown_event" in err


def test_configure_logging_console_format(monkeypatch, capsys, reset_logging):
    """LOG_FORMAT=console switches to the console renderer."""
    from signal_graph.config import get_settings
    from signal_graph.signal_logging import configure_logging, get_logger

    monkeypatch.setenv("LOG_FORMAT", "console")
    get_settings.cache_clear()
    configure_logging()
    get_logger("test.console").info("console_event")
    err = capsys.readouterr().err
    assert "console_event" in err
    assert not err.lstrip().startswith("{")


def test_session_logs_carry_candidate_id(capsys, reset_logging):
    """Session events are bound to the active candidate."""
    from signal_graph.analysis_engine import EvaluationSession
    from signal_graph.signal_logging import configure_structlog

    configure_structlog("json", "INFO")
    session = EvaluationSession("Candidate_Log")
    session.toggle("ssn_mismatch")
    records = [r for r in _records(capsys.readouterr().err) if r["event_type"] == "session_flag_toggled"]
    assert records[-1]["candidate_id"] == "Candidate_Log"
    assert records[-1]["signal_id"] == "ssn_mismatch"


def test_normalize_event_renames_event():
    """The event processor moves structlog's 'event' to event_type and mirrors it into message."""
    from signal_graph.signal_logging.logger import _normalize_event

    out = _normalize_event(None, "info", {"event": "candidate_evaluated", "score": 8})
    assert out["event_type"] == "candidate_evaluated"
    assert out["message"] == "candidate_evaluated"
    assert "event" not in out
    assert out["score"] == 8
