"""
Risk score computation: weighted sum and tier classification.

Score is the plain sum of selected signal weights (unknown ids count 0).
Tiers: score >= 10 -> HIGH, 1..9 -> MODERATE, <= 0 -> LOW. The thresholds are
demo constants and are kept literally; they are not a validated risk model.
"""

from __future__ import annotations

from typing import Iterable

from signal_graph.analysis_engine.graph import build_graph
from signal_graph.analysis_engine.models import EvaluationResult, RiskTier, SelectionSet
from signal_graph.analysis_engine.signals import SIGNAL_REGISTRY, SignalRegistry
from signal_graph.signal_logging import bind_candidate

HIGH_RISK_THRESHOLD = 10
MODERATE_RISK_THRESHOLD = 1

TIER_FEEDBACK = {
    RiskTier.HIGH: "High risk: Proceed with caution.",
    RiskTier.MODERATE: "Moderate risk: Review context.",
    RiskTier.LOW: "Low risk: Signs of stability or reform.",
}


def score(selection: Iterable[str], registry: SignalRegistry = SIGNAL_REGISTRY) -> int:
    """Sum of weights over the unique ids in selection. Empty selection -> 0."""
    return sum(registry.weight_of(signal_id) for signal_id in set(selection))


def classify(total: int) -> RiskTier:
    if total >= HIGH_RISK_THRESHOLD:
        return RiskTier.HIGH
    if total >= MODERATE_RISK_THRESHOLD:
        return RiskTier.MODERATE
    return RiskTier.LOW


def feedback_for(tier: RiskTier) -> str:
    return TIER_FEEDBACK[tier]


def evaluate(selection: SelectionSet, registry: SignalRegistry = SIGNAL_REGISTRY) -> EvaluationResult:
    """
    Score, classify and graph one candidate's selection.

    Never raises for unknown signal ids; they contribute 0 and appear in the
    graph under their raw id.
    """
    flags = registry.order(selection.flags)
    total = score(flags, registry)
    tier = classify(total)
    unknown = [f for f in flags if f not in registry]
    result = EvaluationResult(
        candidate_id=selection.candidate_id,
        flags=tuple(flags),
        score=total,
        tier=tier,
        feedback=feedback_for(tier),
        graph=build_graph(selection.candidate_id, flags, registry),
    )
    bind_candidate(selection.candidate_id, __name__).debug(
        "candidate_evaluated",
        flag_count=len(flags),
        unknown_flags=unknown,
        score=total,
        tier=tier.value,
    )
    return result
