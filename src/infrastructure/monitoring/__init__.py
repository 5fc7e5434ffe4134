"""
Infrastructure Monitoring Module

Structured logging with correlation IDs, the acting employee and
OpenTelemetry trace context, with passwords masked out of every record.
"""

from .logging import (
    configure_logging,
    correlation_context,
    employee_context,
    get_correlation_id,
    mask_sensitive_data,
    setup_structured_logging,
)

__all__ = [
    "setup_structured_logging",
    "configure_logging",
    "correlation_context",
    "employee_context",
    "get_correlation_id",
    "mask_sensitive_data",
]
