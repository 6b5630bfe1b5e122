"""
Application-level exceptions.

Scoring and graph building never raise these: unknown signal ids degrade to
weight 0 and the raw id as label. They are raised at the edges, where a caller
asks for something strictly (a single signal, a profile slot, a candidate id).
"""

from __future__ import annotations


class SignalGraphError(Exception):
    """Base class. `code` is a stable identifier used in API error bodies and logs."""

    code = "signal_graph_error"

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return self.message


class UnknownSignalReference(SignalGraphError, KeyError):
    code = "unknown_signal"

    def __init__(self, signal_id: str) -> None:
        super().__init__(f"Unknown signal: {signal_id!r}")
        self.signal_id = signal_id


class ProfileNotFound(SignalGraphError, IndexError):
    code = "profile_not_found"

    def __init__(self, index: int, available: int) -> None:
        super().__init__(f"No synthetic profile at index {index} (valid: 0..{available - 1})")
        self.index = index
        self.available = available


class InvalidCandidateId(SignalGraphError, ValueError):
    code = "invalid_candidate_id"

    def __init__(self, candidate_id: str | None) -> None:
        super().__init__("candidate_id must be non-empty")
        self.candidate_id = candidate_id
