"""
Structured logging for the posts API.

Configures structlog on top of the standard library root logger so that
module loggers created with ``getLogger(__name__)`` and structlog loggers
share one output:

- pretty console output in development, JSON everywhere else
- bearer tokens and e-mail addresses redacted from every string value
- control characters escaped to prevent log injection
- request id and OpenTelemetry trace context attached when present

Examples
--------
>>> from blog_api.monitoring import get_logger
>>> logger = get_logger("blog_api.routes.posts")
>>> logger.info("Post created", post_id="123")
"""

from logging import StreamHandler, root
from re import Pattern
from re import compile as re_compile
from typing import Any

from opentelemetry.trace import get_current_span
from structlog import configure
from structlog import get_logger as struct_logger
from structlog.contextvars import (
    bind_contextvars,
    clear_contextvars,
    get_contextvars,
    merge_contextvars,
)
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
    ExtraAdder,
    LoggerFactory,
    PositionalArgumentsFormatter,
    ProcessorFormatter,
    add_logger_name,
    filter_by_level,
)
from structlog.types import EventDict, Processor, WrappedLogger

from blog_api.configs.settings import settings
from blog_api.utils.helpers import today_str

SENSITIVE_HEADERS: frozenset[str] = frozenset(
    {
        "authorization",
        "cookie",
        "proxy-authorization",
        "x-api-key",
    },
)

# JWTs first: they contain dots an e-mail pattern could partially match
PII_PATTERNS: list[tuple[Pattern, str]] = [
    (re_compile(r"eyJ[a-zA-Z0-9_-]*\.eyJ[a-zA-Z0-9_-]*\.[a-zA-Z0-9_-]*"), "[REDACTED_JWT]"),
    (re_compile(r"[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}"), "[REDACTED_EMAIL]"),
]

CONTROL_CHARS = str.maketrans({"\n": "\\n", "\r": "\\r", "\t": "\\t", "\x00": ""})


def sanitize_log_message(message: str) -> str:
    r"""
    Escape control characters in a log message.

    Examples
    --------
    >>> sanitize_log_message("Hello\nWorld")
    'Hello\\nWorld'
    """
    return str(message).translate(CONTROL_CHARS)


def sanitize_headers(headers: dict[str, Any]) -> dict[str, Any]:
    """
    Return headers with sensitive values redacted.

    Examples
    --------
    >>> sanitize_headers({"Authorization": "Bearer token123", "Content-Type": "json"})
    {'Authorization': '[REDACTED]', 'Content-Type': 'json'}
    """
    return {k: "[REDACTED]" if k.lower() in SENSITIVE_HEADERS else v for k, v in headers.items()}


def redact_pii(message: str) -> str:
    """
    Redact tokens and e-mail addresses.

    Examples
    --------
    >>> redact_pii("User user@example.com logged in")
    'User [REDACTED_EMAIL] logged in'
    """
    for pattern, replacement in PII_PATTERNS:
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


def add_trace_context(
    logger: WrappedLogger,
    method_name: str,
    event_dict: EventDict,
) -> EventDict:
    """Add OpenTelemetry trace and span ids when a span is active."""
    context = get_current_span().get_span_context()
    if context.is_valid:
        event_dict["trace_id"] = format(context.trace_id, "032x")
        event_dict["span_id"] = format(context.span_id, "016x")
    return event_dict


def sanitize_event_dict(
    logger: WrappedLogger,
    method_name: str,
    event_dict: EventDict,
) -> EventDict:
    """Redact PII and escape control characters in every string value."""
    for key, value in event_dict.items():
        if isinstance(value, str):
            event_dict[key] = redact_pii(sanitize_log_message(value))
        elif key.lower() == "headers" and isinstance(value, dict):
            event_dict[key] = sanitize_headers(value)
    return event_dict


def get_renderer(*, colors: bool = True) -> Processor:
    """
    Pick the final renderer for the environment.

    Args:
        colors: Whether to enable colors in the console renderer.

    Returns:
        ConsoleRenderer in development, JSONRenderer otherwise.
    """
    if settings.ENVIRONMENT == "development":
        return ConsoleRenderer(
            colors=colors,
            pad_level=False,
            exception_formatter=RichTracebackFormatter(),
        )
    return JSONRenderer()


def configure_logging() -> None:
    """Configure structlog and the root handler for the application."""
    # Hot reloading re-imports the app; avoid stacking handlers
    root.handlers.clear()
    root.setLevel(settings.LOG_LEVEL.upper())

    configure(
        processors=[
            filter_by_level,
            merge_contextvars,
            add_logger_name,
            add_log_level,
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
    console_handler.setFormatter(
        ProcessorFormatter(
            processors=[
                ProcessorFormatter.remove_processors_meta,
                sanitize_event_dict,
                get_renderer(colors=True),
            ],
            foreign_pre_chain=[
                merge_contextvars,
                add_log_level,
                add_timestamp,
                add_trace_context,
                ExtraAdder(),
            ],
        ),
    )
    root.addHandler(console_handler)


def get_logger(name: str) -> BoundLogger:
    """Get a structured logger instance."""
    return struct_logger(name)


def bind_request_id(request_id: str) -> None:
    """Bind the request id to the current logging context."""
    bind_contextvars(request_id=request_id)


def get_request_id() -> str | None:
    """Return the request id bound to the current context, if any."""
    return get_contextvars().get("request_id")


def clear_context() -> None:
    """Clear all bound context variables."""
    clear_contextvars()
