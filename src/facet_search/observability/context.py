"""Trace context carried into log records while a span is active."""

from __future__ import annotations

from contextvars import ContextVar, Token
from typing import TYPE_CHECKING


if TYPE_CHECKING:
    from opentelemetry.trace import Span

# Empty outside of any span; JsonFormatter falls back to blank ids
trace_context: ContextVar[dict | None] = ContextVar("trace_context", default=None)


def get_trace_context() -> dict:
    """Get the trace context of the active span, or an empty dict."""
    return dict(trace_context.get() or {})


def set_trace_context(trace_id: str, span_id: str, **extra: object) -> Token:
    """Set trace context for the current context.

    Returns the token that restores the previous context.
    """
    return trace_context.set({"trace_id": trace_id, "span_id": span_id, **extra})


def reset_trace_context(token: Token) -> None:
    """Restore the context that was active before ``set_trace_context``."""
    trace_context.reset(token)


def span_ids(span: Span) -> dict[str, str]:
    """Hex trace and span ids of an OpenTelemetry span, as W3C formats them."""
    ctx = span.get_span_context()
    return {
        "trace_id": format(ctx.trace_id, "032x"),
        "span_id": format(ctx.span_id, "016x"),
    }
