"""Configuration Loader - Imperative Shell.

This module handles loading configuration from YAML files and
environment variables. All I/O is contained here.

The Config model is defined in event_finder/core/config.py
to avoid information leakage between layers.
"""

import logging
import os
from datetime import date, datetime
from pathlib import Path
from typing import Any

import yaml

from event_finder.core.config import Config
from event_finder.core.validation import validate_event_data


logger = logging.getLogger(__name__)

_TRUE_VALUES = {"1", "true", "yes", "on"}


def _parse_bool(value: Any, default: bool) -> bool:
    """Parse a YAML or env value as a boolean."""
    if value is None:
        return default
    if isinstance(value, bool):
        return value
    return str(value).strip().lower() in _TRUE_VALUES


def _parse_origins(value: Any) -> list[str]:
    """Parse CORS origins from a list or comma-separated string."""
    if isinstance(value, str):
        return [o.strip() for o in value.split(",") if o.strip()]
    return [str(o) for o in value]


def load_config_from_dict(data: dict[str, Any]) -> Config:
    """Load configuration from a dictionary.

    Args:
        data: Configuration dictionary

    Returns:
        Parsed Config object
    """
    defaults = Config()
    origins = data.get("cors_origins")

    return Config(
        host=str(data.get("host", defaults.host)),
        port=int(data.get("port", defaults.port)),
        log_level=str(data.get("log_level", defaults.log_level)).upper(),
        seed_sample_events=_parse_bool(data.get("seed_sample_events"), defaults.seed_sample_events),
        seed_events_path=data.get("seed_events_path"),
        cors_origins=_parse_origins(origins) if origins is not None else defaults.cors_origins,
        title=str(data.get("title", defaults.title)),
        version=str(data.get("version", defaults.version)),
    )


def load_config(config_path: str | Path | None = None) -> Config:
    """Load configuration from a YAML file.

    This method performs file I/O.

    Args:
        config_path: Path to YAML config file.
                    If None, uses CONFIG_PATH env var or default.

    Returns:
        Parsed Config object

    Raises:
        yaml.YAMLError: If config file is invalid YAML
    """
    if config_path is None:
        config_path = os.environ.get("CONFIG_PATH", "config/config.yaml")

    path = Path(config_path)

    logger.info("Loading configuration from %s", path)

    if not path.exists():
        logger.warning("Config file not found: %s, using defaults", path)
        return Config()

    with open(path, "r") as f:
        data = yaml.safe_load(f)

    if data is None:
        logger.warning("Config file is empty, using defaults")
        return Config()

    config = load_config_from_dict(data)

    logger.info(
        "Loaded config: port %d, seed sample events %s",
        config.port,
        config.seed_sample_events,
    )

    return config


def load_config_from_env() -> Config:
    """Load configuration from environment variables.

    Useful for container deployments without a YAML file.

    Environment variables:
        HOST: Bind address
        PORT: Listen port
        LOG_LEVEL: Logging level name
        SEED_SAMPLE_EVENTS: Load built-in sample events (true/false)
        SEED_EVENTS_PATH: YAML file with extra events
        CORS_ORIGINS: Comma-separated allowed origins

    Returns:
        Config object from environment
    """
    data: dict[str, Any] = {}
    env_keys = {
        "HOST": "host",
        "PORT": "port",
        "LOG_LEVEL": "log_level",
        "SEED_SAMPLE_EVENTS": "seed_sample_events",
        "SEED_EVENTS_PATH": "seed_events_path",
        "CORS_ORIGINS": "cors_origins",
    }
    for env_name, key in env_keys.items():
        value = os.environ.get(env_name)
        if value:
            data[key] = value

    return load_config_from_dict(data)


def load_seed_events(path: str | Path) -> list[dict[str, Any]]:
    """Load event creation payloads from a YAML list.

    This method performs file I/O. Entries that fail validation are
    skipped with a warning.

    Args:
        path: Path to a YAML file containing a list of event payloads

    Returns:
        Valid payloads in file order

    Raises:
        FileNotFoundError: If the file doesn't exist
        yaml.YAMLError: If the file is invalid YAML
    """
    with open(path, "r") as f:
        data = yaml.safe_load(f)

    if data is None:
        return []

    if not isinstance(data, list):
        logger.warning("Seed file %s does not contain a list, ignoring", path)
        return []

    payloads = []
    for i, entry in enumerate(data):
        if not isinstance(entry, dict):
            logger.warning("Skipping seed entry %d: not a mapping", i)
            continue

        # YAML turns unquoted timestamps into datetime objects
        if isinstance(entry.get("date"), (date, datetime)):
            entry = {**entry, "date": entry["date"].isoformat()}

        result = validate_event_data(entry)
        if not result.valid:
            logger.warning("Skipping seed entry %d: %s", i, result.message)
            continue

        payloads.append(entry)

    logger.info("Loaded %d seed events from %s", len(payloads), path)
    return payloads
