"""
Data models for analysis engine input and output.

SelectionSet is the per-session input (candidate + selected signal ids);
EvaluationResult is derived from it on every change and never stored.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Iterable

from signal_graph.analysis_engine.graph import SignalGraph
from signal_graph.analysis_engine.signals import SIGNAL_REGISTRY, SignalRegistry


class RiskTier(str, Enum):
    HIGH = "HIGH"
    MODERATE = "MODERATE"
    LOW = "LOW"


@dataclass
class SelectionSet:
    """
    Signal ids attributed to one candidate.

    `flags` is a set: duplicates collapse and insertion order is irrelevant.
    Use ordered_flags() for display/export order (catalog order).
    """

    candidate_id: str
    flags: set[str] = field(default_factory=set)

    @classmethod
    def of(cls, candidate_id: str, flags: Iterable[str] = ()) -> SelectionSet:
        return cls(candidate_id=candidate_id, flags=set(flags))

    def copy(self) -> SelectionSet:
        return SelectionSet(candidate_id=self.candidate_id, flags=set(self.flags))

    def ordered_flags(self, registry: SignalRegistry = SIGNAL_REGISTRY) -> list[str]:
        return registry.order(self.flags)

    def __contains__(self, signal_id: object) -> bool:
        return signal_id in self.flags

    def __len__(self) -> int:
        return len(self.flags)


@dataclass(frozen=True)
class EvaluationResult:
    candidate_id: str
    flags: tuple[str, ...]
    score: int
    tier: RiskTier
    feedback: str
    graph: SignalGraph

    def to_dict(self) -> dict[str, Any]:
        return {
            "candidate_id": self.candidate_id,
            "flags": list(self.flags),
            "score": self.score,
            "tier": self.tier.value,
            "feedback": self.feedback,
            "graph": self.graph.to_dict(),
        }
