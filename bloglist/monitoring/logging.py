"""
Structured logging with credential sanitization.

This module provides structured logging using structlog with:
- JSON output for production
- Pretty console output for development
- Automatic redaction of bearer tokens and email addresses
- Request ID correlation

Security
--------
Sensitive fields are automatically redacted from logs:
- Authorization headers
- Cookie values
- JWTs embedded in messages
- Email addresses (pattern detection)

Examples
--------
>>> from bloglist.monitoring import get_logger
>>> logger = get_logger("my_module")
>>> logger.info("Blog created", blog_id="123")
"""

from logging import INFO, StreamHandler, root
from logging.handlers import RotatingFileHandler
from pathlib import Path
from re import Pattern
from re import compile as re_compile
from typing import Any

from structlog import configure
from structlog import get_logger as struct_logger
from structlog.contextvars import bind_contextvars, clear_contextvars, merge_contextvars
from structlog.dev import ConsoleRenderer, RichTracebackFormatter
from structlog.processors import (
    JSONRenderer,
    StackInfoRenderer,
    UnicodeDecoder,
    add_log_level,
    format_exc_info,
)
from structlog.stdlib import (
    BoundLogger,
    LoggerFactory,
    PositionalArgumentsFormatter,
    ProcessorFormatter,
    add_logger_name,
    filter_by_level,
)
from structlog.types import EventDict, Processor, WrappedLogger

from bloglist.configs.settings import settings
from bloglist.utils.helpers import today_str

# Sensitive headers to redact
SENSITIVE_HEADERS: frozenset[str] = frozenset(
    {
        "authorization",
        "cookie",
        "proxy-authorization",
        "x-api-key",
    },
)

# JWTs first, they contain dots that the email pattern could bite into
REDACTION_PATTERNS: list[tuple[Pattern, str]] = [
    (re_compile(r"eyJ[a-zA-Z0-9_-]*\.eyJ[a-zA-Z0-9_-]*\.[a-zA-Z0-9_-]*"), "[REDACTED_JWT]"),
    (re_compile(r"[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}"), "[REDACTED_EMAIL]"),
]

CONTROL_CHARS = str.maketrans({"\n": "\\n", "\r": "\\r", "\t": "\\t", "\x00": ""})


def sanitize_log_message(message: str) -> str:
    r"""
    Remove control characters and sanitize log messages.

    Examples
    --------
    >>> sanitize_log_message("Hello\nWorld")
    'Hello\\nWorld'
    """
    return message.translate(CONTROL_CHARS)


def sanitize_headers(headers: dict[str, Any]) -> dict[str, Any]:
    """
    Return headers with sensitive values redacted.

    Examples
    --------
    >>> sanitize_headers({"Authorization": "Bearer token123", "Content-Type": "json"})
    {'Authorization': '[REDACTED]', 'Content-Type': 'json'}
    """
    return {k: "[REDACTED]" if k.lower() in SENSITIVE_HEADERS else v for k, v in headers.items()}


def redact_secrets(message: str) -> str:
    """
    Redact tokens and email addresses from log messages.

    Examples
    --------
    >>> redact_secrets("User user@example.com logged in")
    'User [REDACTED_EMAIL] logged in'
    """
    for pattern, replacement in REDACTION_PATTERNS:
        message = pattern.sub(replacement, message)
    return message


def add_timestamp(
    logger: WrappedLogger,
    method_name: str,
    event_dict: EventDict,
) -> EventDict:
    """Add a local timestamp to the log entry."""
    event_dict["timestamp"] = today_str()
    return event_dict


def sanitize_event_dict(
    logger: WrappedLogger,
    method_name: str,
    event_dict: EventDict,
) -> EventDict:
    """Sanitize every string value of the event dictionary."""
    for key, value in event_dict.items():
        if isinstance(value, str):
            event_dict[key] = redact_secrets(sanitize_log_message(value))
        elif key.lower() == "headers" and isinstance(value, dict):
            event_dict[key] = sanitize_headers(value)

    return event_dict


def get_renderer(*, colors: bool = True) -> Processor:
    """
    Get the final structlog renderer based on environment.

    Args:
        colors: Whether to enable colors in ConsoleRenderer.

    Returns:
        Console renderer for development, JSON renderer otherwise.
    """
    if settings.ENVIRONMENT == "development":
        return ConsoleRenderer(
            colors=colors,
            pad_level=False,
            exception_formatter=RichTracebackFormatter(),
        )
    return JSONRenderer()


def _formatter(*, colors: bool) -> ProcessorFormatter:
    return ProcessorFormatter(
        processors=[
            ProcessorFormatter.remove_processors_meta,
            sanitize_event_dict,
            get_renderer(colors=colors),
        ],
        foreign_pre_chain=[
            add_log_level,
            add_timestamp,
        ],
    )


def configure_logging() -> None:
    """Configure structured logging for the application."""
    # Hot reload re-runs this; drop handlers from the previous run
    root.handlers.clear()
    root.setLevel(settings.LOG_LEVEL.upper())

    configure(
        processors=[
            filter_by_level,
            merge_contextvars,
            add_logger_name,
            add_log_level,
            add_timestamp,
            PositionalArgumentsFormatter(),
            StackInfoRenderer(),
            format_exc_info,
            UnicodeDecoder(),
            ProcessorFormatter.wrap_for_formatter,
        ],
        context_class=dict,
        logger_factory=LoggerFactory(),
        wrapper_class=BoundLogger,
        cache_logger_on_first_use=True,
    )

    console_handler = StreamHandler()
    console_handler.setFormatter(_formatter(colors=True))
    root.addHandler(console_handler)
    configure_file_logging()


def configure_file_logging() -> None:
    """Attach a rotating file handler when file logging is enabled."""
    if not settings.LOG_TO_FILE:
        return

    log_file = Path(settings.LOG_FILE)
    log_file.parent.mkdir(parents=True, exist_ok=True)
    file_handler = RotatingFileHandler(
        log_file,
        maxBytes=5 * 1024 * 1024,
        backupCount=5,
    )
    file_handler.setLevel(INFO)
    file_handler.setFormatter(_formatter(colors=False))
    root.addHandler(file_handler)


def get_logger(name: str) -> BoundLogger:
    """
    Get a structured logger instance.

    Examples
    --------
    >>> logger = get_logger("bloglist.routes.blog")
    >>> logger.info("Blog created", blog_id="123")
    """
    return struct_logger(name)


def bind_request_id(request_id: str) -> None:
    """Bind request ID to the current logging context."""
    bind_contextvars(request_id=request_id)


def clear_context() -> None:
    """Clear all bound context variables."""
    clear_contextvars()
