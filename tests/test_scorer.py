"""
Tests for risk scoring: weighted sum, tier thresholds, feedback and full evaluation.
"""

from __future__ import annotations

import pytest

from signal_graph.analysis_engine import (
    SIGNAL_REGISTRY,
    RiskTier,
    SelectionSet,
    classify,
    evaluate,
    feedback_for,
    score,
)
from signal_graph.analysis_engine.scorer import HIGH_RISK_THRESHOLD, MODERATE_RISK_THRESHOLD


@pytest.mark.parametrize(
    "flags, expected_score, expected_tier",
    [
        (["criminal_felony_old", "employment_gap", "alias_mismatch", "pattern_reform"], 8, RiskTier.MODERATE),
        (["criminal_felony_recent", "ssn_mismatch", "education_unverified"], 21, RiskTier.HIGH),
        (["criminal_misdemeanor", "multiple_employers", "address_instability"], 8, RiskTier.MODERATE),
        ([], 0, RiskTier.LOW),
    ],
)
def test_concrete_scenarios(flags, expected_score, expected_tier):
    """Catalog scenarios: 4+4+5-5=8 MODERATE, 8+7+6=21 HIGH, 3+2+3=8 MODERATE, empty=0 LOW."""
    assert score(flags) == expected_score
    assert classify(score(flags)) == expected_tier


def test_score_is_sum_of_weights():
    """score(S) equals the sum of weight_of over S for every catalog subset we try."""
    ids = SIGNAL_REGISTRY.ids()
    for size in range(len(ids) + 1):
        subset = ids[:size]
        assert score(subset) == sum(SIGNAL_REGISTRY.weight_of(i) for i in subset)
    assert score(ids) == 39


def test_score_unknown_ids_contribute_zero():
    """Unknown ids add 0 and never raise."""
    assert score(["does_not_exist"]) == 0
    assert score(["does_not_exist", "ssn_mismatch"]) == 7


def test_score_duplicates_collapse():
    """A repeated id is counted once."""
    assert score(["ssn_mismatch", "ssn_mismatch"]) == 7


def test_mitigating_signal_only_is_low():
    """pattern_reform alone scores -5 -> LOW."""
    total = score(["pattern_reform"])
    assert total == -5
    assert classify(total) == RiskTier.LOW


@pytest.mark.parametrize(
    "value, tier",
    [
        (-100, RiskTier.LOW),
        (-1, RiskTier.LOW),
        (0, RiskTier.LOW),
        (1, RiskTier.MODERATE),
        (9, RiskTier.MODERATE),
        (10, RiskTier.HIGH),
        (1000, RiskTier.HIGH),
    ],
)
def test_classify_boundaries(value, tier):
    """(-inf,0] LOW, [1,9] MODERATE, [10,inf) HIGH; boundaries inclusive."""
    assert classify(value) == tier


def test_classify_partitions_range():
    """Every integer in a wide range lands in exactly the tier its range says."""
    for value in range(-50, 51):
        tier = classify(value)
        if value <= 0:
            assert tier == RiskTier.LOW
        elif value < HIGH_RISK_THRESHOLD:
            assert tier == RiskTier.MODERATE
        else:
            assert tier == RiskTier.HIGH
    assert MODERATE_RISK_THRESHOLD == 1
    assert HIGH_RISK_THRESHOLD == 10


def test_feedback_messages():
    """Each tier has its operator-facing message."""
    assert feedback_for(RiskTier.HIGH) == "High risk: Proceed with caution."
    assert feedback_for(RiskTier.MODERATE) == "Moderate risk: Review context."
    assert feedback_for(RiskTier.LOW) == "Low risk: Signs of stability or reform."


def test_evaluate_full_result():
    """evaluate() bundles score, tier, feedback, ordered flags and graph."""
    selection = SelectionSet.of(
        "Candidate_Synth_002",
        ["education_unverified", "criminal_felony_recent", "ssn_mismatch"],
    )
    result = evaluate(selection)
    assert result.candidate_id == "Candidate_Synth_002"
    assert result.flags == ("criminal_felony_recent", "education_unverified", "ssn_mismatch")
    assert result.score == 21
    assert result.tier == RiskTier.HIGH
    assert result.feedback == "High risk: Proceed with caution."
    assert len(result.graph.nodes) == 4
    assert len(result.graph.edges) == 3

    data = result.to_dict()
    assert data["tier"] == "HIGH"
    assert data["flags"] == ["criminal_felony_recent", "education_unverified", "ssn_mismatch"]
    assert data["graph"]["nodes"][0] == {
        "id": "Candidate_Synth_002",
        "label": "Candidate_Synth_002",
        "kind": "entity",
    }


def test_evaluate_with_unknown_id():
    """Unknown id: score unaffected, still appears in flags and graph."""
    result = evaluate(SelectionSet.of("X", ["does_not_exist"]))
    assert result.score == 0
    assert result.tier == RiskTier.LOW
    assert result.flags == ("does_not_exist",)
    assert result.graph.nodes[1].label == "does_not_exist"
