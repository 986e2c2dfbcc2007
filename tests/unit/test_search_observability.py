"""Unit tests for observability module."""

import json
import logging
from types import SimpleNamespace
from uuid import UUID

from opentelemetry.sdk.trace.export import SimpleSpanProcessor
from opentelemetry.sdk.trace.export.in_memory_span_exporter import InMemorySpanExporter
from opentelemetry.trace import StatusCode
import pytest

from facet_search.domain import RED, SMALL, SearchOptions
from facet_search.observability import (
    JsonFormatter,
    configure_logging,
    create_span,
    get_trace_context,
    init_tracing,
    set_trace_context,
    tracing as tracing_module,
)
from facet_search.observability.context import reset_trace_context, span_ids
from facet_search.search.engine import FacetSearchEngine
from tests.fixtures.sample_catalog import item_with


def _record(msg: str, level: int = logging.INFO) -> logging.LogRecord:
    return logging.LogRecord(
        name="facet_search.search.engine",
        level=level,
        pathname="engine.py",
        lineno=1,
        msg=msg,
        args=(),
        exc_info=None,
    )


class TestJsonFormatter:
    """Tests for structured JSON logging."""

    def test_format_includes_trace_context(self):
        data = json.loads(JsonFormatter().format(_record("indexed")))

        assert data["message"] == "indexed"
        assert data["level"] == "INFO"
        assert data["component"] == "engine"
        assert "timestamp" in data
        assert "trace_id" in data
        assert "span_id" in data

    def test_format_includes_extra_fields(self):
        record = _record("search done")
        record.selected_colors = 2
        data = json.loads(JsonFormatter().format(record))

        assert data["selected_colors"] == 2

    def test_format_truncates_and_redacts(self):
        record = _record("x" * 5000)
        record.api_key = "secret"
        data = json.loads(JsonFormatter().format(record))

        assert data["message"].endswith("...")
        assert data["api_key"] == "[REDACTED]"

    def test_json_default_handles_uuid_set_and_bytes(self):
        formatter = JsonFormatter()
        assert formatter._json_default(UUID(int=1)) == "00000000-0000-0000-0000-000000000001"
        assert formatter._json_default({3, 1, 2}) == [1, 2, 3]
        assert formatter._json_default(b"ok") == "ok"

    def test_json_default_handles_unorderable_set(self):
        value = JsonFormatter()._json_default({1, "a"})
        assert isinstance(value, list)
        assert len(value) == 2


class TestConfigureLogging:
    """Tests for root logger setup."""

    @pytest.fixture(autouse=True)
    def restore_root(self):
        root = logging.getLogger()
        handlers, level = root.handlers[:], root.level
        yield
        root.handlers[:] = handlers
        root.setLevel(level)
        logging.getLogger("facet_search.search").setLevel(logging.NOTSET)

    def test_installs_json_handler(self):
        configure_logging("debug", json_output=True)
        root = logging.getLogger()

        assert root.level == logging.DEBUG
        assert len(root.handlers) == 1
        assert isinstance(root.handlers[0].formatter, JsonFormatter)

    def test_plain_text_handler(self):
        configure_logging("warning", json_output=False)
        root = logging.getLogger()

        assert root.level == logging.WARNING
        assert not isinstance(root.handlers[0].formatter, JsonFormatter)

    def test_per_logger_overrides(self):
        configure_logging("info", logger_levels={"facet_search.search": "error"})
        assert logging.getLogger("facet_search.search").level == logging.ERROR


class TestTraceContext:
    """Tests for trace context propagation."""

    def test_empty_outside_any_span(self):
        assert get_trace_context() == {}
        data = json.loads(JsonFormatter().format(_record("idle")))
        assert data["trace_id"] == ""
        assert data["span_id"] == ""

    def test_set_and_reset_restore_previous_context(self):
        outer = set_trace_context("aa" * 16, "bb" * 8)
        inner = set_trace_context("aa" * 16, "cc" * 8, tenant="alpha")
        assert get_trace_context() == {"trace_id": "aa" * 16, "span_id": "cc" * 8, "tenant": "alpha"}

        reset_trace_context(inner)
        assert get_trace_context()["span_id"] == "bb" * 8

        reset_trace_context(outer)
        assert get_trace_context() == {}

    def test_span_ids_formats_hex(self):
        span_ctx = SimpleNamespace(trace_id=0x1234, span_id=0x5678)
        fake_span = SimpleNamespace(get_span_context=lambda: span_ctx)
        ids = span_ids(fake_span)
        assert ids["trace_id"] == "0" * 28 + "1234"
        assert ids["span_id"] == "0" * 12 + "5678"


class TestTracing:
    """Tests for OpenTelemetry spans around searches."""

    @pytest.fixture
    def exporter(self):
        provider = init_tracing("test-service")
        exporter = InMemorySpanExporter()
        provider.add_span_processor(SimpleSpanProcessor(exporter))
        # The global provider can only be set once per process; bind the tracer directly
        tracing_module._tracer_holder["tracer"] = provider.get_tracer(__name__)
        yield exporter
        tracing_module._tracer_holder["tracer"] = None

    def test_init_tracing_applies_resource_attributes(self):
        provider = init_tracing("test-service", resource_attributes={"service.version": "2.0.0"})
        assert provider.resource.attributes["service.version"] == "2.0.0"
        assert provider.resource.attributes["service.name"] == "test-service"

    def test_get_tracer_without_init_returns_tracer(self):
        tracing_module._tracer_holder["tracer"] = None
        assert tracing_module.get_tracer() is not None

    def test_create_span_sets_attributes(self, exporter):
        with create_span("test.operation", attributes={"test.key": "value"}):
            pass

        (span,) = exporter.get_finished_spans()
        assert span.name == "test.operation"
        assert span.attributes["test.key"] == "value"

    def test_create_span_records_errors(self, exporter):
        with pytest.raises(RuntimeError), create_span("test.failure"):
            raise RuntimeError("boom")

        (span,) = exporter.get_finished_spans()
        assert span.status.status_code == StatusCode.ERROR

    def test_search_emits_span(self, exporter):
        engine = FacetSearchEngine([item_with(RED, SMALL)])

        engine.search(SearchOptions(colors=[RED]))

        spans = [span for span in exporter.get_finished_spans() if span.name == "facet_search.search"]
        assert len(spans) == 1
        assert spans[0].attributes["search.selected_colors"] == 1
        assert spans[0].attributes["search.selected_sizes"] == 0
        assert spans[0].attributes["search.result_count"] == 1

    def test_log_records_inside_span_carry_its_ids(self, exporter):
        with create_span("outer") as span:
            data = json.loads(JsonFormatter().format(_record("inside")))
            ctx = span.get_span_context()

        assert data["trace_id"] == format(ctx.trace_id, "032x")
        assert data["span_id"] == format(ctx.span_id, "016x")

    def test_span_exit_restores_previous_ids(self, exporter):
        with create_span("outer") as outer:
            with create_span("inner") as inner:
                assert get_trace_context()["span_id"] == format(inner.get_span_context().span_id, "016x")
            assert get_trace_context()["span_id"] == format(outer.get_span_context().span_id, "016x")
            assert get_trace_context()["trace_id"] == format(outer.get_span_context().trace_id, "032x")

        assert get_trace_context() == {}

    def test_span_exit_restores_ids_after_error(self, exporter):
        with pytest.raises(RuntimeError), create_span("test.failure"):
            raise RuntimeError("boom")

        assert get_trace_context() == {}

    def test_search_debug_record_is_correlated_with_search_span(self, exporter):
        formatted: list[str] = []

        class _Capture(logging.Handler):
            def emit(self, record: logging.LogRecord) -> None:
                formatted.append(self.format(record))

        handler = _Capture(level=logging.DEBUG)
        handler.setFormatter(JsonFormatter())
        engine_logger = logging.getLogger("facet_search.search.engine")
        previous_level = engine_logger.level
        engine_logger.addHandler(handler)
        engine_logger.setLevel(logging.DEBUG)
        try:
            engine = FacetSearchEngine([item_with(RED, SMALL)])
            engine.search(SearchOptions(colors=[RED]))
        finally:
            engine_logger.removeHandler(handler)
            engine_logger.setLevel(previous_level)

        (span,) = [span for span in exporter.get_finished_spans() if span.name == "facet_search.search"]
        records = [json.loads(line) for line in formatted if "Search matched" in line]
        assert len(records) == 1
        assert records[0]["trace_id"] == format(span.context.trace_id, "032x")
        assert records[0]["span_id"] == format(span.context.span_id, "016x")
        assert records[0]["selected_colors"] == 1
