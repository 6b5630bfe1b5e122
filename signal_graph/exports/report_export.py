"""
JSON report export: the evaluation of one candidate as a single document.

Carries the same content a printed summary would (candidate, score, tier,
feedback, selected signals with labels/weights, graph) plus the synthetic
profile comparison used for the bar chart.
"""

from __future__ import annotations

import json
from datetime import datetime, timezone
from pathlib import Path
from typing import Any

from signal_graph import __version__
from signal_graph.analysis_engine.models import EvaluationResult
from signal_graph.analysis_engine.profiles import profile_scores
from signal_graph.analysis_engine.signals import SIGNAL_REGISTRY, SignalRegistry
from signal_graph.config import get_settings
from signal_graph.exports.csv_export import safe_file_stem
from signal_graph.signal_logging import get_logger

logger = get_logger(__name__)


def report_filename(candidate_id: str) -> str:
    return f"{safe_file_stem(candidate_id)}_report.json"


def build_report(
    result: EvaluationResult,
    registry: SignalRegistry = SIGNAL_REGISTRY,
) -> dict[str, Any]:
    return {
        "candidate_id": result.candidate_id,
        "score": result.score,
        "tier": result.tier.value,
        "feedback": result.feedback,
        "signals": [
            {"id": flag, "label": registry.label_of(flag), "weight": registry.weight_of(flag)}
            for flag in result.flags
        ],
        "graph": result.graph.to_dict(),
        "profile_comparison": profile_scores(),
        "generated_at": datetime.now(timezone.utc).isoformat(),
        "version": __version__,
    }


def write_report(
    result: EvaluationResult,
    export_dir: Path | None = None,
    registry: SignalRegistry = SIGNAL_REGISTRY,
) -> Path:
    """Write <candidate_id>_report.json into export_dir (default: Settings.export_dir)."""
    out_dir = Path(export_dir) if export_dir is not None else get_settings().export_dir
    out_dir.mkdir(parents=True, exist_ok=True)
    path = out_dir / report_filename(result.candidate_id)
    with path.open("w", encoding="utf-8") as fh:
        json.dump(build_report(result, registry), fh, indent=2)
    logger.info(
        "report_exported",
        candidate_id=result.candidate_id,
        score=result.score,
        tier=result.tier.value,
        path=str(path),
    )
    return path
