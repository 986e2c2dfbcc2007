"""Centralized configuration for facet-search using Pydantic Settings."""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Strictly typed configuration loaded from environment variables.

    Every field can be overridden with a ``FACET_SEARCH_`` prefixed variable,
    e.g. ``FACET_SEARCH_LOG_LEVEL=debug``.
    """

    model_config = SettingsConfigDict(
        env_prefix="FACET_SEARCH_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        validate_default=True,
        extra="ignore",
    )

    # Logging
    log_level: str = Field(default="info", description="Root logging level")
    log_json: bool = Field(default=True, description="Emit structured JSON logs")
    logger_levels: dict[str, str] = Field(
        default_factory=dict, description="Per-logger level overrides (logger name -> level)"
    )

    # Tracing
    service_name: str = Field(default="facet-search", description="OpenTelemetry service.name")
    tracing_enabled: bool = Field(default=True, description="Install a tracer provider at bootstrap")

    # Search metrics
    metrics_window_size: int = Field(default=1000, ge=1, description="Searches kept in the rolling metrics window")
    slow_search_threshold_ms: float = Field(
        default=10.0, gt=0, description="Searches slower than this are counted as slow"
    )

    def resolved_log_level(self) -> str:
        """Log level normalised for the logging module."""
        return self.log_level.upper()


_settings_holder: dict[str, Settings | None] = {"settings": None}


def get_settings() -> Settings:
    """Return the process-wide settings, loaded on first use."""
    if _settings_holder["settings"] is None:
        _settings_holder["settings"] = Settings()
    return _settings_holder["settings"]  # type: ignore[return-value]


def reset_settings() -> None:
    """Drop the cached settings so the next call reloads the environment."""
    _settings_holder["settings"] = None
