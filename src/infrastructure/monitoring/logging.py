"""
Structured Logging for the Back Office

JSON structured logs with correlation IDs, the acting employee, OpenTelemetry
trace context and masking of passwords and other secrets.
"""

import json
import logging
import re
import sys
import uuid
from collections.abc import Generator
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any

from opentelemetry import trace

from src.application.config import LoggingConfig

# Context variables for correlation tracking
correlation_id_var: ContextVar[str | None] = ContextVar("correlation_id", default=None)
employee_id_var: ContextVar[int | None] = ContextVar("employee_id", default=None)


@dataclass
class SensitiveDataConfig:
    """Configuration for sensitive data masking."""

    # Credentials submitted through forms
    credential_patterns: list[str] = field(
        default_factory=lambda: [
            r"old[_-]?password",
            r"new[_-]?password",
            r"change[_-]?password",
        ]
    )

    # API keys and secrets
    api_key_patterns: list[str] = field(
        default_factory=lambda: [
            r"api[_-]?key",
            r"secret[_-]?key",
            r"access[_-]?token",
            r"authorization",
        ]
    )

    # Replacement text
    mask_replacement: str = "***MASKED***"

    # Fields to completely exclude from logs
    excluded_fields: set[str] = field(
        default_factory=lambda: {
            "password",
            "passwd",
            "plain_password",
            "password_hash",
            "secret",
            "token",
        }
    )


class EmployeeLogRecord(logging.LogRecord):
    """Log record enriched with request context."""

    def __init__(self, *args: Any, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)

        # Add correlation tracking
        self.correlation_id = correlation_id_var.get()
        self.acting_employee_id = employee_id_var.get()

        # Add tracing context
        span = trace.get_current_span()
        if span.is_recording():
            span_context = span.get_span_context()
            self.trace_id = format(span_context.trace_id, "032x") if span_context.trace_id else None
            self.span_id = format(span_context.span_id, "016x") if span_context.span_id else None
        else:
            self.trace_id = None
            self.span_id = None


class SensitiveDataMasker:
    """Masks sensitive data in log messages and extra fields."""

    def __init__(self, config: SensitiveDataConfig) -> None:
        self.config = config
        self._patterns = self.config.credential_patterns + self.config.api_key_patterns
        self._compiled_patterns = self._compile_patterns()

    def _compile_patterns(self) -> list[re.Pattern[str]]:
        """Compile all sensitive data patterns."""
        compiled = []
        for pattern in self._patterns:
            try:
                # Match key:value or key=value pairs
                full_pattern = rf'("{pattern}":\s*"[^"]*"|{pattern}=\S+|{pattern}:\s*\S+)'
                compiled.append(re.compile(full_pattern, re.IGNORECASE))
            except re.error as e:
                logging.getLogger(__name__).warning(f"Invalid regex pattern '{pattern}': {e}")

        return compiled

    def mask_message(self, message: str) -> str:
        """Mask sensitive data in log message."""
        masked_message = message

        for pattern in self._compiled_patterns:
            masked_message = pattern.sub(lambda m: self._replace_value(m.group(0)), masked_message)

        return masked_message

    def mask_extra_fields(self, extra: dict[str, Any]) -> dict[str, Any]:
        """Mask sensitive data in extra log fields."""
        if not extra:
            return extra

        masked_extra = {}

        for key, value in extra.items():
            # Exclude sensitive fields entirely
            if key.lower() in self.config.excluded_fields:
                continue

            if self._is_sensitive_field(key):
                masked_extra[key] = self.config.mask_replacement
            elif isinstance(value, str):
                masked_extra[key] = self.mask_message(value)
            elif isinstance(value, dict):
                masked_extra[key] = self.mask_extra_fields(value)  # type: ignore[assignment]
            else:
                masked_extra[key] = value

        return masked_extra

    def _is_sensitive_field(self, field_name: str) -> bool:
        """Check if field name indicates sensitive data."""
        field_lower = field_name.lower()
        return any(re.search(pattern, field_lower) for pattern in self._patterns)

    def _replace_value(self, match: str) -> str:
        """Replace matched value with mask."""
        if match.startswith('"'):
            key_part = match.split(":", 1)[0]
            return f'{key_part}: "{self.config.mask_replacement}"'
        elif "=" in match:
            key_part = match.split("=", 1)[0]
            return f"{key_part}={self.config.mask_replacement}"
        elif ":" in match:
            key_part = match.split(":", 1)[0]
            return f"{key_part}: {self.config.mask_replacement}"
        else:
            return self.config.mask_replacement


class EmployeeJSONFormatter(logging.Formatter):
    """JSON formatter for structured back-office logs."""

    # LogRecord attributes that are not user supplied extras
    STANDARD_FIELDS = frozenset(
        {
            "name",
            "msg",
            "args",
            "levelname",
            "levelno",
            "pathname",
            "filename",
            "module",
            "exc_info",
            "exc_text",
            "stack_info",
            "lineno",
            "funcName",
            "created",
            "msecs",
            "relativeCreated",
            "thread",
            "threadName",
            "processName",
            "process",
            "taskName",
            "message",
            "correlation_id",
            "acting_employee_id",
            "trace_id",
            "span_id",
        }
    )

    def __init__(
        self,
        sensitive_data_config: SensitiveDataConfig | None = None,
        include_extra: bool = True,
        sort_keys: bool = True,
    ):
        super().__init__()
        self.include_extra = include_extra
        self.sort_keys = sort_keys
        self.masker = SensitiveDataMasker(sensitive_data_config or SensitiveDataConfig())

    def format(self, record: logging.LogRecord) -> str:
        """Format log record as JSON."""
        log_entry: dict[str, Any] = {
            "timestamp": datetime.fromtimestamp(record.created).isoformat() + "Z",
            "level": record.levelname,
            "logger": record.name,
            "message": self.masker.mask_message(record.getMessage()),
            "module": record.module,
            "function": record.funcName,
            "line": record.lineno,
        }

        # Add request context
        if getattr(record, "correlation_id", None):
            log_entry["correlation_id"] = record.correlation_id
        if getattr(record, "acting_employee_id", None):
            log_entry["acting_employee_id"] = record.acting_employee_id
        if getattr(record, "trace_id", None):
            log_entry["trace_id"] = record.trace_id
        if getattr(record, "span_id", None):
            log_entry["span_id"] = record.span_id

        if record.exc_info:
            log_entry["exception"] = {
                "type": record.exc_info[0].__name__ if record.exc_info[0] else None,
                "message": self.masker.mask_message(str(record.exc_info[1]))
                if record.exc_info[1]
                else None,
                "traceback": self.formatException(record.exc_info),
            }

        if self.include_extra:
            extra = {
                key: self._serialize_value(value)
                for key, value in record.__dict__.items()
                if key not in self.STANDARD_FIELDS and not key.startswith("_")
            }

            if extra:
                log_entry["extra"] = self.masker.mask_extra_fields(extra)

        return json.dumps(log_entry, sort_keys=self.sort_keys, default=self._serialize_value)

    def _serialize_value(self, value: Any) -> Any:
        """Serialize complex values for JSON output."""
        if isinstance(value, (set, frozenset, tuple)):
            return list(value)
        elif isinstance(value, (str, int, float, bool, list, dict)) or value is None:
            return value
        return str(value)


# Correlation ID management
def generate_correlation_id() -> str:
    """Generate a new correlation ID."""
    return str(uuid.uuid4())


def get_correlation_id() -> str | None:
    """Get current correlation ID."""
    return correlation_id_var.get()


@contextmanager
def correlation_context(correlation_id: str | None = None) -> Generator[str, None, None]:
    """Context manager for correlation ID scope."""
    if correlation_id is None:
        correlation_id = generate_correlation_id()

    token = correlation_id_var.set(correlation_id)
    try:
        yield correlation_id
    finally:
        correlation_id_var.reset(token)


@contextmanager
def employee_context(employee_id: int) -> Generator[None, None, None]:
    """Context manager binding the acting employee to log records."""
    token = employee_id_var.set(employee_id)
    try:
        yield
    finally:
        employee_id_var.reset(token)


def mask_sensitive_data(
    data: str | dict[str, Any], config: SensitiveDataConfig | None = None
) -> str | dict[str, Any]:
    """Utility function to mask sensitive data."""
    masker = SensitiveDataMasker(config or SensitiveDataConfig())

    if isinstance(data, str):
        return masker.mask_message(data)
    return masker.mask_extra_fields(data)


def setup_structured_logging(
    level: str = "INFO",
    format_type: str = "json",
    sensitive_data_config: SensitiveDataConfig | None = None,
    log_file: str | None = None,
) -> None:
    """
    Setup structured logging for the back office.

    Args:
        level: Logging level
        format_type: Formatter type ('json' or 'text')
        sensitive_data_config: Sensitive data masking configuration
        log_file: Optional log file path
    """

    # Clear any existing handlers
    root_logger = logging.getLogger()
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    formatter: logging.Formatter
    if format_type == "json":
        formatter = EmployeeJSONFormatter(sensitive_data_config)
    else:
        formatter = logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setFormatter(formatter)
    root_logger.addHandler(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file)
        file_handler.setFormatter(formatter)
        root_logger.addHandler(file_handler)

    root_logger.setLevel(getattr(logging, level.upper()))

    # Set record factory to use EmployeeLogRecord
    logging.setLogRecordFactory(EmployeeLogRecord)

    logging.getLogger(__name__).info("Structured logging configured successfully")


def configure_logging(config: LoggingConfig) -> None:
    """Setup structured logging from the application's logging configuration."""
    setup_structured_logging(level=config.level, format_type=config.format, log_file=config.file)
