"""ASGI Entry Point - Root Module.

Exposes the application for `uvicorn main:app`.
It imports from the event_finder package.
"""

from event_finder.api import create_app
from event_finder.main import configure_logging, get_config

configure_logging()

app = create_app(config=get_config())

__all__ = [
    "app",
]
