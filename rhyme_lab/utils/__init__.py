"""Utility helpers shared across the :mod:`rhyme_lab` package."""

from __future__ import annotations

from .logging_config import configure_logging, resolve_log_level
from .observability import (
    StructuredLoggerAdapter,
    add_span_attributes,
    create_counter,
    create_histogram,
    get_logger,
    record_exception,
    start_span,
)

__all__ = [
    "configure_logging",
    "StructuredLoggerAdapter",
    "add_span_attributes",
    "create_counter",
    "create_histogram",
    "get_logger",
    "record_exception",
    "resolve_log_level",
    "start_span",
]
