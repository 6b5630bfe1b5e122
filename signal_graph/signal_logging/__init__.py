"""
Structured logging for Signal Graph.

JSON logs on stderr with timestamp, candidate_id, event_type, score and tier.
Use get_logger() in every module for aggregation-friendly output.
"""

from signal_graph.signal_logging.logger import (
    bind_candidate,
    configure_logging,
    configure_structlog,
    get_logger,
)

__all__ = ["bind_candidate", "configure_logging", "configure_structlog", "get_logger"]
