"""
Evaluation session: the single active candidate and its selected signals.

Selection changes go through toggle / load_profile / clear; evaluate() recomputes
score, tier and graph from scratch each time. Mutations hold a lock because the
API server calls into one shared session from its worker threads.
"""

from __future__ import annotations

import threading

from signal_graph.analysis_engine.profiles import load_profile as load_profile_fixture
from signal_graph.analysis_engine.models import EvaluationResult, SelectionSet
from signal_graph.analysis_engine.scorer import evaluate
from signal_graph.analysis_engine.signals import SIGNAL_REGISTRY, SignalRegistry
from signal_graph.config import get_settings
from signal_graph.core.exceptions import InvalidCandidateId
from signal_graph.signal_logging import bind_candidate


def _clean_candidate_id(candidate_id: str | None) -> str:
    cleaned = (candidate_id or "").strip()
    if not cleaned:
        raise InvalidCandidateId(candidate_id)
    return cleaned


class EvaluationSession:
    def __init__(
        self,
        candidate_id: str | None = None,
        registry: SignalRegistry = SIGNAL_REGISTRY,
    ):
        if candidate_id is None:
            candidate_id = get_settings().default_candidate_id
        self._registry = registry
        self._selection = SelectionSet(candidate_id=_clean_candidate_id(candidate_id))
        self._lock = threading.Lock()

    @property
    def candidate_id(self) -> str:
        with self._lock:
            return self._selection.candidate_id

    @property
    def selection(self) -> SelectionSet:
        """Copy of the current selection; changing it does not affect the session."""
        with self._lock:
            return self._selection.copy()

    def set_candidate(self, candidate_id: str) -> None:
        cleaned = _clean_candidate_id(candidate_id)
        with self._lock:
            self._selection.candidate_id = cleaned
        bind_candidate(cleaned, __name__).info("session_candidate_set")

    def toggle(self, signal_id: str) -> bool:
        """Select signal_id if absent, deselect it if present. Returns True when now selected."""
        with self._lock:
            flags = self._selection.flags
            if signal_id in flags:
                flags.discard(signal_id)
                selected = False
            else:
                flags.add(signal_id)
                selected = True
            candidate_id = self._selection.candidate_id
        log = bind_candidate(candidate_id, __name__)
        if signal_id not in self._registry:
            log.warning("unknown_signal_reference", signal_id=signal_id)
        log.info("session_flag_toggled", signal_id=signal_id, selected=selected)
        return selected

    def clear(self) -> None:
        with self._lock:
            self._selection.flags.clear()
            candidate_id = self._selection.candidate_id
        bind_candidate(candidate_id, __name__).info("session_flags_cleared")

    def load_profile(self, index: int) -> SelectionSet:
        """Replace candidate and selection with synthetic profile `index`. Raises ProfileNotFound."""
        loaded = load_profile_fixture(index)
        with self._lock:
            self._selection = loaded.copy()
        bind_candidate(loaded.candidate_id, __name__).info(
            "session_profile_loaded",
            profile_index=index,
            flag_count=len(loaded.flags),
        )
        return loaded

    def evaluate(self) -> EvaluationResult:
        return evaluate(self.selection, self._registry)
