"""
Analysis engine package: signal registry, risk scoring and signal graph.

Turns a candidate's selected signal ids into a weighted score, a risk tier and
a candidate -> signal graph. Also holds the synthetic demo profiles and the
single-candidate evaluation session.
"""

from signal_graph.analysis_engine.signals import (
    SIGNAL_REGISTRY,
    SIGNALS,
    Signal,
    SignalRegistry,
    label_of,
    lookup,
    weight_of,
)
from signal_graph.analysis_engine.graph import (
    GraphEdge,
    GraphNode,
    SignalGraph,
    build_graph,
)
from signal_graph.analysis_engine.models import (
    EvaluationResult,
    RiskTier,
    SelectionSet,
)
from signal_graph.analysis_engine.scorer import (
    classify,
    evaluate,
    feedback_for,
    score,
)
from signal_graph.analysis_engine.profiles import (
    SYNTHETIC_PROFILES,
    SyntheticProfile,
    load_profile,
    profile_scores,
)
from signal_graph.analysis_engine.session import EvaluationSession

__all__ = [
    "SIGNAL_REGISTRY",
    "SIGNALS",
    "Signal",
    "SignalRegistry",
    "label_of",
    "lookup",
    "weight_of",
    "GraphEdge",
    "GraphNode",
    "SignalGraph",
    "build_graph",
    "EvaluationResult",
    "RiskTier",
    "SelectionSet",
    "classify",
    "evaluate",
    "feedback_for",
    "score",
    "SYNTHETIC_PROFILES",
    "SyntheticProfile",
    "load_profile",
    "profile_scores",
    "EvaluationSession",
]
