"""Process bootstrap: apply Settings to logging, tracing and search metrics."""

import logging

from facet_search.config import Settings, get_settings
from facet_search.observability.logging import configure_logging
from facet_search.observability.tracing import init_tracing
from facet_search.search.metrics import configure_metrics_collector


logger = logging.getLogger(__name__)


def configure_runtime(settings: Settings | None = None) -> Settings:
    """Configure logging, tracing and metrics from settings.

    Call once at process start, before building a search engine.
    """
    settings = settings or get_settings()

    configure_logging(
        settings.resolved_log_level(),
        settings.log_json,
        logger_levels=settings.logger_levels,
    )
    if settings.tracing_enabled:
        init_tracing(settings.service_name)
    configure_metrics_collector(settings.metrics_window_size, settings.slow_search_threshold_ms)

    logger.info("Runtime configured (log_level=%s, tracing=%s)", settings.log_level, settings.tracing_enabled)
    return settings
