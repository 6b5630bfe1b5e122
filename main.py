"""
Main entrypoint: Signal Graph API server.

Env: API_HOST, API_PORT, LOG_LEVEL, LOG_FORMAT, SIGNAL_GRAPH_DEFAULT_CANDIDATE,
SIGNAL_GRAPH_EXPORT_DIR (see signal_graph.config.env). A .env file at the
project root is loaded when present.

Equivalent: uvicorn signal_graph.api_server.app:app --host 0.0.0.0 --port 8000
"""

from signal_graph.signal_logging import configure_logging, get_logger

logger = get_logger("main")


def main() -> None:
    """Run the FastAPI server in the main thread."""
    from signal_graph.api_server.app import app
    from signal_graph.config import get_settings
    import uvicorn

    settings = get_settings()
    configure_logging(settings)
    logger.info(
        "main_server_starting",
        host=settings.api_host,
        port=settings.api_port,
        default_candidate=settings.default_candidate_id,
    )
    uvicorn.run(app, host=settings.api_host, port=settings.api_port, log_level=settings.log_level.lower())


if __name__ == "__main__":
    main()
