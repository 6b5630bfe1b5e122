"""
CSV export of a candidate's selected signals.

Two rows, joined with "\\n" and no trailing newline:

    Candidate ID,Flags
    <candidate_id>,<flag ids joined by ",">

Flags are written in catalog order. Values are comma-joined as-is with no
quoting, so a candidate id or flag id containing a comma is not escaped.
"""

from __future__ import annotations

import re
from pathlib import Path

from signal_graph.analysis_engine.models import SelectionSet
from signal_graph.analysis_engine.signals import SIGNAL_REGISTRY, SignalRegistry
from signal_graph.config import get_settings
from signal_graph.signal_logging import get_logger

logger = get_logger(__name__)

CSV_HEADER = ("Candidate ID", "Flags")
CSV_MEDIA_TYPE = "text/csv;charset=utf-8"

# Path separators, NUL and quotes never reach a file name or Content-Disposition.
_UNSAFE_FILENAME_CHARS = re.compile(r"[\\/\x00\"]")


def safe_file_stem(candidate_id: str) -> str:
    """candidate_id with path separators replaced, so exports stay inside their directory."""
    return _UNSAFE_FILENAME_CHARS.sub("_", candidate_id)


def csv_filename(candidate_id: str) -> str:
    return f"{safe_file_stem(candidate_id)}_profile.csv"


def render_csv(selection: SelectionSet, registry: SignalRegistry = SIGNAL_REGISTRY) -> str:
    rows = [
        list(CSV_HEADER),
        [selection.candidate_id, ",".join(selection.ordered_flags(registry))],
    ]
    return "\n".join(",".join(row) for row in rows)


def write_csv(
    selection: SelectionSet,
    export_dir: Path | None = None,
    registry: SignalRegistry = SIGNAL_REGISTRY,
) -> Path:
    """
    Write <candidate_id>_profile.csv into export_dir (default: Settings.export_dir).

    Creates the directory if needed and returns the written path.
    """
    out_dir = Path(export_dir) if export_dir is not None else get_settings().export_dir
    out_dir.mkdir(parents=True, exist_ok=True)
    path = out_dir / csv_filename(selection.candidate_id)
    path.write_text(render_csv(selection, registry), encoding="utf-8")
    logger.info(
        "csv_exported",
        candidate_id=selection.candidate_id,
        flag_count=len(selection.flags),
        path=str(path),
    )
    return path
