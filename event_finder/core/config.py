"""Configuration models - Pure data structures.

These are domain models for configuration. The actual loading
(I/O) is handled by the shell layer.
"""

from dataclasses import dataclass, field


@dataclass
class Config:
    """Application configuration.

    This is a pure data structure - no I/O or side effects.

    Attributes:
        host: Interface the HTTP server binds to
        port: Port the HTTP server listens on
        log_level: Root logging level name
        seed_sample_events: Load the built-in sample events at startup
        seed_events_path: Optional YAML file with extra events to load
        cors_origins: Allowed CORS origins
        title: API title shown in docs
        version: API version string
    """
    host: str = "0.0.0.0"
    port: int = 5000
    log_level: str = "INFO"
    seed_sample_events: bool = True
    seed_events_path: str | None = None
    cors_origins: list[str] = field(default_factory=lambda: ["*"])
    title: str = "Event Finder API"
    version: str = "1.0.0"
