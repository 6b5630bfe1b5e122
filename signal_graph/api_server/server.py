"""
FastAPI server: signal catalog, stateless evaluation and the active session.

GET /signals and /profiles expose the fixed catalog and demo fixtures.
POST /evaluate scores an arbitrary selection without touching session state.
/session/* endpoints drive the single active candidate: set candidate, toggle
flags, load a profile, read the graph, export CSV.
"""

from __future__ import annotations

from typing import Any

from fastapi import Depends, FastAPI, HTTPException
from fastapi.responses import JSONResponse, PlainTextResponse
from pydantic import BaseModel, ConfigDict, Field

from signal_graph import __version__
from signal_graph.analysis_engine import (
    SIGNAL_REGISTRY,
    SYNTHETIC_PROFILES,
    EvaluationResult,
    EvaluationSession,
    SelectionSet,
    evaluate,
    profile_scores,
)
from signal_graph.core.exceptions import (
    InvalidCandidateId,
    ProfileNotFound,
    SignalGraphError,
    UnknownSignalReference,
)
from signal_graph.exports.csv_export import CSV_MEDIA_TYPE, csv_filename, render_csv
from signal_graph.signal_logging import get_logger

logger = get_logger(__name__)


# -----------------------------------------------------------------------------
# Session dependency
# -----------------------------------------------------------------------------

_session: EvaluationSession | None = None


def get_session() -> EvaluationSession:
    """Dependency: the process-wide evaluation session, created on first use."""
    global _session
    if _session is None:
        _session = EvaluationSession()
    return _session


# -----------------------------------------------------------------------------
# Request / response models
# -----------------------------------------------------------------------------

class SignalResponse(BaseModel):
    id: str = Field(..., description="Signal id")
    label: str = Field(..., description="Display label")
    weight: int = Field(..., description="Signed weight; negative values mitigate risk")


class ProfileResponse(BaseModel):
    index: int = Field(..., ge=0, description="Profile slot")
    candidate_id: str
    flags: list[str] = Field(default_factory=list)


class ChartPoint(BaseModel):
    name: str = Field(..., description="Candidate id")
    score: int


class GraphNodeModel(BaseModel):
    id: str
    label: str
    kind: str = Field(..., description="entity | signal")


class GraphEdgeModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    source: str = Field(..., alias="from")
    target: str = Field(..., alias="to")
    weight: int = Field(..., ge=1)


class GraphModel(BaseModel):
    nodes: list[GraphNodeModel] = Field(default_factory=list)
    edges: list[GraphEdgeModel] = Field(default_factory=list)


class EvaluationResponse(BaseModel):
    """Score, tier and graph for one candidate."""

    candidate_id: str
    flags: list[str] = Field(default_factory=list, description="Selected signal ids in catalog order")
    score: int
    tier: str = Field(..., description="HIGH | MODERATE | LOW")
    feedback: str
    graph: GraphModel


class EvaluateRequest(BaseModel):
    """POST /evaluate body."""

    candidate_id: str = Field(..., min_length=1, max_length=256)
    flags: list[str] = Field(default_factory=list, description="Signal ids; duplicates collapse")


class CandidateRequest(BaseModel):
    """PUT /session/candidate body."""

    candidate_id: str = Field(..., min_length=1, max_length=256)


class ToggleResponse(BaseModel):
    signal_id: str
    selected: bool
    evaluation: EvaluationResponse


def _evaluation_response(result: EvaluationResult) -> EvaluationResponse:
    return EvaluationResponse.model_validate(result.to_dict())


# -----------------------------------------------------------------------------
# App and routes
# -----------------------------------------------------------------------------

app = FastAPI(
    title="Signal Graph API",
    description="Weighted risk signals, scoring and signal graph for synthetic candidate profiles.",
    version=__version__,
)


@app.get("/health")
def health() -> dict[str, str]:
    """Liveness probe: API is up."""
    return {"status": "ok"}


@app.get("/signals", response_model=list[SignalResponse])
def list_signals() -> list[SignalResponse]:
    """Signal catalog in display order."""
    return [SignalResponse(id=s.id, label=s.label, weight=s.weight) for s in SIGNAL_REGISTRY]


@app.get("/signals/{signal_id}", response_model=SignalResponse)
def get_signal(signal_id: str) -> SignalResponse:
    signal = SIGNAL_REGISTRY.require(signal_id)
    return SignalResponse(id=signal.id, label=signal.label, weight=signal.weight)


@app.get("/profiles", response_model=list[ProfileResponse])
def list_profiles() -> list[ProfileResponse]:
    return [
        ProfileResponse(index=i, candidate_id=p.candidate_id, flags=list(p.flags))
        for i, p in enumerate(SYNTHETIC_PROFILES)
    ]


@app.get("/profiles/scores", response_model=list[ChartPoint])
def get_profile_scores() -> list[ChartPoint]:
    """Bar-chart comparison of the synthetic profiles."""
    return [ChartPoint(**point) for point in profile_scores()]


@app.post("/evaluate", response_model=EvaluationResponse)
def evaluate_selection(body: EvaluateRequest) -> EvaluationResponse:
    """Stateless: score and graph the given selection. Unknown ids count as weight 0."""
    candidate_id = body.candidate_id.strip()
    if not candidate_id:
        raise InvalidCandidateId(body.candidate_id)
    result = evaluate(SelectionSet.of(candidate_id, body.flags))
    logger.info("evaluate_called", candidate_id=candidate_id, score=result.score, tier=result.tier.value)
    return _evaluation_response(result)


@app.get("/session", response_model=EvaluationResponse)
def get_session_evaluation(session: EvaluationSession = Depends(get_session)) -> EvaluationResponse:
    return _evaluation_response(session.evaluate())


@app.put("/session/candidate", response_model=EvaluationResponse)
def set_session_candidate(
    body: CandidateRequest,
    session: EvaluationSession = Depends(get_session),
) -> EvaluationResponse:
    session.set_candidate(body.candidate_id)
    return _evaluation_response(session.evaluate())


@app.post("/session/flags/{signal_id}/toggle", response_model=ToggleResponse)
def toggle_session_flag(
    signal_id: str,
    session: EvaluationSession = Depends(get_session),
) -> ToggleResponse:
    selected = session.toggle(signal_id)
    return ToggleResponse(
        signal_id=signal_id,
        selected=selected,
        evaluation=_evaluation_response(session.evaluate()),
    )


@app.delete("/session/flags", response_model=EvaluationResponse)
def clear_session_flags(session: EvaluationSession = Depends(get_session)) -> EvaluationResponse:
    session.clear()
    return _evaluation_response(session.evaluate())


@app.post("/session/profiles/{index}", response_model=EvaluationResponse)
def load_session_profile(
    index: int,
    session: EvaluationSession = Depends(get_session),
) -> EvaluationResponse:
    session.load_profile(index)
    return _evaluation_response(session.evaluate())


@app.get("/session/graph")
def get_session_graph(session: EvaluationSession = Depends(get_session)) -> dict[str, Any]:
    """Force-graph payload (nodes with name/color/type, links with source/target/value)."""
    return session.evaluate().graph.to_force_graph()


@app.get("/session/export.csv")
def export_session_csv(session: EvaluationSession = Depends(get_session)) -> PlainTextResponse:
    selection = session.selection
    logger.info("csv_export_requested", candidate_id=selection.candidate_id, flag_count=len(selection))
    return PlainTextResponse(
        content=render_csv(selection),
        media_type=CSV_MEDIA_TYPE,
        headers={"Content-Disposition": f'attachment; filename="{csv_filename(selection.candidate_id)}"'},
    )


# -----------------------------------------------------------------------------
# Error handlers
# -----------------------------------------------------------------------------

@app.exception_handler(UnknownSignalReference)
def unknown_signal_handler(request: Any, exc: UnknownSignalReference) -> JSONResponse:
    return JSONResponse(status_code=404, content={"detail": str(exc), "code": exc.code})


@app.exception_handler(ProfileNotFound)
def profile_not_found_handler(request: Any, exc: ProfileNotFound) -> JSONResponse:
    return JSONResponse(status_code=404, content={"detail": str(exc), "code": exc.code})


@app.exception_handler(InvalidCandidateId)
def invalid_candidate_handler(request: Any, exc: InvalidCandidateId) -> JSONResponse:
    return JSONResponse(status_code=400, content={"detail": str(exc), "code": exc.code})


@app.exception_handler(SignalGraphError)
def signal_graph_error_handler(request: Any, exc: SignalGraphError) -> JSONResponse:
    logger.exception("signal_graph_error", code=exc.code, error=str(exc))
    return JSONResponse(status_code=500, content={"detail": "Internal error", "code": exc.code})


@app.exception_handler(HTTPException)
def http_exception_handler(request: Any, exc: HTTPException) -> JSONResponse:
    """Consistent JSON error response for HTTPException."""
    return JSONResponse(
        status_code=exc.status_code,
        content={"detail": exc.detail},
    )
