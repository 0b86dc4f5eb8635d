"""
Structured logging configuration for the booking relay.

Uses structlog for structured, context-aware logging with:
- JSON output for production
- Pretty console output for development
- Request ID propagation across one submission
"""

import logging
import sys
from contextlib import contextmanager
from contextvars import ContextVar
from typing import Any, Generator

import structlog
from structlog.types import Processor

# Context variables for request-scoped data
_request_id: ContextVar[str | None] = ContextVar('request_id', default=None)
_submission_kind: ContextVar[str | None] = ContextVar('submission_kind', default=None)


def get_request_id() -> str | None:
    """Get the current request ID from context."""
    return _request_id.get()


def get_submission_kind() -> str | None:
    """Get the current submission kind from context."""
    return _submission_kind.get()


def add_context_info(
    logger: structlog.types.WrappedLogger,
    method_name: str,
    event_dict: dict[str, Any],
) -> dict[str, Any]:
    """Processor that adds context variables to log entries."""
    request_id = get_request_id()
    kind = get_submission_kind()

    if request_id:
        event_dict['request_id'] = request_id
    if kind:
        event_dict['submission_kind'] = kind

    return event_dict


def configure_logging(
    json_output: bool = False,
    log_level: str = 'INFO',
) -> None:
    """
    Configure structlog for the application.

    Args:
        json_output: If True, output JSON logs (for production).
                    If False, output pretty console logs (for development).
        log_level: Minimum level name, e.g. "INFO" or "DEBUG"
    """
    level_num = getattr(logging, log_level.upper(), logging.INFO)

    logging.basicConfig(
        format='%(message)s',
        stream=sys.stdout,
        level=level_num,
    )

    shared_processors: list[Processor] = [
        structlog.contextvars.merge_contextvars,
        add_context_info,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt='iso'),
        structlog.processors.StackInfoRenderer(),
    ]

    if json_output:
        processors: list[Processor] = [
            *shared_processors,
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(),
        ]
    else:
        processors = [
            *shared_processors,
            structlog.dev.ConsoleRenderer(colors=True),
        ]

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(level_num),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=True,
    )


def get_logger(name: str | None = None) -> structlog.stdlib.BoundLogger:
    """Get a structured logger instance."""
    return structlog.get_logger(name)


@contextmanager
def logging_context(
    request_id: str | None = None,
    submission_kind: str | None = None,
) -> Generator[None, None, None]:
    """
    Context manager for setting logging context variables.

    Usage:
        with logging_context(request_id="abc123", submission_kind="booking"):
            logger.info("dispatch.received")  # Includes both fields
    """
    old_request = _request_id.get()
    old_kind = _submission_kind.get()

    try:
        if request_id is not None:
            _request_id.set(request_id)
        if submission_kind is not None:
            _submission_kind.set(submission_kind)
        yield
    finally:
        _request_id.set(old_request)
        _submission_kind.set(old_kind)
