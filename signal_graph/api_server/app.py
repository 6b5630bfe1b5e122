"""
FastAPI/ASGI application entrypoint.

Run with: uvicorn signal_graph.api_server.app:app --host 0.0.0.0 --port 8000
"""

from signal_graph.api_server.server import app
from signal_graph.config import get_settings
from signal_graph.signal_logging import configure_logging

configure_logging(get_settings())

__all__ = ["app"]
