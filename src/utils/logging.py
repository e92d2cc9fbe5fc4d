"""Figma wrapper logging config

## Setup

Logging is automatically configured when this module is imported. It uses structlog for structured logging. Logs are
pretty-printed in local env (FIGMA_WRAPPER_ENVIRONMENT='local') and are JSON-formatted in other envs.

Example usage:

```
from src.utils.logging import get_logger

logger = get_logger(__name__)
logger.info("Fetched file", file_key="abc123", node_count=42)
```

## Log context

Use add_log_context() to add context that will be included in all subsequent log messages within the current async
context:

```
from src.utils.logging import add_log_context, get_logger

add_log_context(file_key="abc123", request_id="req-456")

logger = get_logger(__name__)
logger.info("Rendering images")  # Includes file_key and request_id
```

Use clear_log_context() to reset all context.

### Standard logging integration

We configure Python's standard `logging` module to route through structlog. This means that library code using
`logging.getLogger()` (httpx included) will automatically include context and be formatted correctly for the env.
"""

from __future__ import annotations

import logging
import os
from typing import Any

import structlog
import structlog.contextvars

from src.utils.config import get_environment


def _is_local_environment() -> bool:
    """Check if we're running in a local development environment."""
    return get_environment() == "local"


def _get_log_renderer() -> structlog.types.Processor:
    """Get the appropriate console renderer based on environment.

    Can be overridden with LOG_RENDERER environment variable:
    - 'console': Force ConsoleRenderer (human-readable with colors)
    - 'json': Force JSONRenderer (structured JSON output)

    Returns:
        ConsoleRenderer for local dev, JSONRenderer otherwise
    """
    log_renderer = os.getenv("LOG_RENDERER", "").lower()
    if log_renderer == "console":
        use_console = True
    elif log_renderer == "json":
        use_console = False
    else:
        use_console = _is_local_environment()

    if use_console:
        return structlog.dev.ConsoleRenderer(
            colors=True,
            pad_event=0,
            force_colors=False,
            repr_native_str=False,
            exception_formatter=structlog.dev.plain_traceback,
            sort_keys=True,
            event_key="message",
        )
    else:
        return structlog.processors.JSONRenderer()


def configure_logging() -> None:
    """Configure structlog with environment-appropriate settings using built-in contextvars.

    Local development: Human-readable console output with colors
    Everything else: JSON format for log aggregation
    """
    common_processors: list[structlog.types.Processor] = [
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.UnicodeDecoder(),
        structlog.contextvars.merge_contextvars,
        structlog.processors.EventRenamer("message"),
        structlog.stdlib.filter_by_level,  # Must come after add_log_level
    ]

    structlog.configure(
        processors=common_processors + [structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    # filter_by_level expects a structlog logger, stdlib loggers filter on their own
    foreign_processors = [p for p in common_processors if p != structlog.stdlib.filter_by_level]
    stream_handler = logging.StreamHandler()
    stream_handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            processor=_get_log_renderer(),
            foreign_pre_chain=foreign_processors,
        )
    )

    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    root_logger.addHandler(stream_handler)

    log_level = os.getenv("LOG_LEVEL", "INFO").upper()
    numeric_log_level = getattr(logging, log_level, logging.INFO)
    root_logger.setLevel(numeric_log_level)

    # httpx logs every request at INFO; keep it quiet unless we're debugging
    if numeric_log_level > logging.DEBUG:
        logging.getLogger("httpx").setLevel(logging.WARNING)


# Initialize structlog configuration when module is imported
configure_logging()


def add_log_context(**kwargs: Any) -> None:
    """Add values to the logging context. Simple wrapper for structlog's contextvars.

    Args:
        **kwargs: Key-value pairs to add to the logging context
    """
    structlog.contextvars.bind_contextvars(**kwargs)


def remove_log_context(*keys: str) -> None:
    """Remove values from the logging context. Simple wrapper for structlog's contextvars.
    Args:
        *keys: Keys to remove from the logging context
    """
    structlog.contextvars.unbind_contextvars(*keys)


def clear_log_context() -> None:
    """Clear all values from the logging context."""
    structlog.contextvars.clear_contextvars()


# Type alias for structlog's bound_contextvars return type
LogContext = structlog.contextvars.bound_contextvars


def get_logger(name: str, **kwargs: Any) -> structlog.BoundLogger:
    """Get a logger instance. Wrapper around structlog.get_logger for convenience.

    Args:
        name: Logger name (usually __name__ from the calling module)

    Example:
        ```python
        from src.utils.logging import get_logger

        logger = get_logger(__name__, component="figma_client")
        logger.info("Starting")  # Includes component
        ```
    """
    return structlog.get_logger(name, **kwargs)
