"""
Synthetic candidate profiles used to preload demo scenarios.

Three fixed fixtures (candidate id + preset signals). Loading a profile hands
out a fresh SelectionSet so callers cannot alter the canonical fixtures.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from signal_graph.analysis_engine.models import SelectionSet
from signal_graph.analysis_engine.scorer import score
from signal_graph.core.exceptions import ProfileNotFound


@dataclass(frozen=True)
class SyntheticProfile:
    candidate_id: str
    flags: tuple[str, ...]

    def to_selection(self) -> SelectionSet:
        return SelectionSet.of(self.candidate_id, self.flags)

    def to_dict(self) -> dict[str, Any]:
        return {"candidate_id": self.candidate_id, "flags": list(self.flags)}


SYNTHETIC_PROFILES: tuple[SyntheticProfile, ...] = (
    SyntheticProfile(
        candidate_id="Candidate_Synth_001",
        flags=("criminal_felony_old", "employment_gap", "alias_mismatch", "pattern_reform"),
    ),
    SyntheticProfile(
        candidate_id="Candidate_Synth_002",
        flags=("criminal_felony_recent", "ssn_mismatch", "education_unverified"),
    ),
    SyntheticProfile(
        candidate_id="Candidate_Synth_003",
        flags=("criminal_misdemeanor", "multiple_employers", "address_instability"),
    ),
)


def get_profile(index: int) -> SyntheticProfile:
    # Negative indexes are rejected rather than counted from the end.
    if not 0 <= index < len(SYNTHETIC_PROFILES):
        raise ProfileNotFound(index, len(SYNTHETIC_PROFILES))
    return SYNTHETIC_PROFILES[index]


def load_profile(index: int) -> SelectionSet:
    """Return a fresh SelectionSet for profile `index` (0..2); raises ProfileNotFound otherwise."""
    return get_profile(index).to_selection()


def profile_scores() -> list[dict[str, Any]]:
    """Bar-chart data: one {name, score} per synthetic profile, in fixture order."""
    return [{"name": p.candidate_id, "score": score(p.flags)} for p in SYNTHETIC_PROFILES]
