"""Server Entry Point.

Thin wrapper that configures logging, loads configuration, and serves
the API with uvicorn.
"""

import logging
import os

import uvicorn

from event_finder.api import create_app
from event_finder.core.config import Config
from event_finder.shell.config_loader import load_config, load_config_from_env


logger = logging.getLogger(__name__)


def configure_logging(level: str | None = None) -> None:
    """Configure root logging once for the process."""
    level = (level or os.environ.get("LOG_LEVEL", "INFO")).upper()
    logging.basicConfig(
        level=getattr(logging, level, logging.INFO),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )


def get_config() -> Config:
    """Load configuration from file or environment."""
    if os.environ.get("CONFIG_PATH"):
        return load_config(os.environ["CONFIG_PATH"])
    elif os.environ.get("PORT") or os.environ.get("SEED_SAMPLE_EVENTS"):
        # Simple env-based config
        return load_config_from_env()
    else:
        # Try default config path
        return load_config()


def run() -> None:
    """Start the HTTP server."""
    configure_logging()
    config = get_config()
    logging.getLogger().setLevel(getattr(logging, config.log_level, logging.INFO))

    app = create_app(config=config)

    logger.info("Starting %s on %s:%d", config.title, config.host, config.port)
    uvicorn.run(app, host=config.host, port=config.port, log_level=config.log_level.lower())


if __name__ == "__main__":
    run()
