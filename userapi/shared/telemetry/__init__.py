"""Shared telemetry: logging setup, OpenTelemetry config, and tracing helpers."""

from userapi.shared.telemetry.logging import get_logger, setup_logging
from userapi.shared.telemetry.tracing import add_span_attributes, get_trace_id, traced

__all__ = [
    "setup_logging",
    "get_logger",
    "traced",
    "add_span_attributes",
    "get_trace_id",
]
