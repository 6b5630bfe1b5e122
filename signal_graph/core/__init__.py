"""
Core utilities: shared exceptions used by the analysis engine, API server and tools.
"""

from signal_graph.core.exceptions import (
    InvalidCandidateId,
    ProfileNotFound,
    SignalGraphError,
    UnknownSignalReference,
)

__all__ = [
    "InvalidCandidateId",
    "ProfileNotFound",
    "SignalGraphError",
    "UnknownSignalReference",
]
