"""Shared test fixtures and configuration."""

import os
from pathlib import Path
import sys

import pytest


REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))


TEST_ENV = {
    "FACET_SEARCH_LOG_LEVEL": "info",
    "FACET_SEARCH_LOG_JSON": "true",
    "FACET_SEARCH_TRACING_ENABLED": "false",
    "FACET_SEARCH_METRICS_WINDOW_SIZE": "1000",
    "FACET_SEARCH_SLOW_SEARCH_THRESHOLD_MS": "10.0",
}


for key, value in TEST_ENV.items():
    os.environ[key] = value

from facet_search.config import reset_settings
from facet_search.search.metrics import get_metrics_collector
from tests.fixtures.sample_catalog import SampleDataBuilder


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    """Apply test env defaults and drop cached settings around each test."""
    for key, value in TEST_ENV.items():
        monkeypatch.setenv(key, value)
    reset_settings()
    yield
    reset_settings()


@pytest.fixture(autouse=True)
def reset_global_metrics():
    get_metrics_collector().reset()
    yield
    get_metrics_collector().reset()


@pytest.fixture
def catalog():
    """Ten random items."""
    return SampleDataBuilder(10).create_items()


@pytest.fixture
def large_catalog():
    """A thousand random items."""
    return SampleDataBuilder(1000).create_items()
