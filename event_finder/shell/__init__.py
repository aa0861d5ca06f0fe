"""Imperative Shell - I/O and side effects.

This module contains all code that holds state or touches the outside:
- In-memory event store (mutable state, locking)
- Configuration loading (environment/files)

Keep this layer thin and simple. All business logic should be in core.
"""

from event_finder.shell.event_store import EventStore
from event_finder.shell.config_loader import load_config, load_config_from_env, load_seed_events

__all__ = [
    "EventStore",
    "load_config",
    "load_config_from_env",
    "load_seed_events",
]
