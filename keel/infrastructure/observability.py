'''
Structured logging configuration for keel.

Library modules log through the stdlib logging module with %-style
messages. configure_logging() renders those records, and any structlog
events, as one orjson JSON object per line with the logger name, level,
ISO 8601 UTC timestamp, rendered traceback and any context bound with
bind_context(). Call it once at process startup.
'''

from __future__ import annotations

import logging
import os
import sys
from typing import Any, TextIO

import orjson
import structlog

__all__ = ['LOG_LEVEL_ENV', 'bind_context', 'clear_context', 'configure_logging', 'get_logger']

LOG_LEVEL_ENV = 'KEEL_LOG_LEVEL'

_DEFAULT_LEVEL = 'INFO'


def _orjson_dumps_str(*args: Any, **kwargs: Any) -> str:

    return orjson.dumps(*args, **kwargs).decode()


def _resolve_level(log_level: str | None) -> int:

    '''
    Resolve a level name to its numeric value.

    Falls back to the KEEL_LOG_LEVEL environment variable, then INFO.
    Unknown names resolve to INFO.

    Args:
        log_level (str | None): Level name or None

    Returns:
        int: Numeric logging level
    '''

    name = log_level or os.environ.get(LOG_LEVEL_ENV) or _DEFAULT_LEVEL
    level = getattr(logging, name.upper(), None)
    return level if isinstance(level, int) else logging.INFO


def _event_processors() -> list[structlog.types.Processor]:

    '''Return the processors applied to every event, stdlib or structlog.'''

    return [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt='iso', utc=True),
        structlog.processors.format_exc_info,
    ]


def configure_logging(log_level: str | None = None, stream: TextIO | None = None) -> None:

    '''
    Route stdlib and structlog logging to JSON lines on one stream.

    Args:
        log_level (str | None): Minimum log level name, None to read KEEL_LOG_LEVEL
        stream (TextIO | None): Destination for stdlib records, stdout when None

    Returns:
        None
    '''

    numeric_level = _resolve_level(log_level)

    structlog.configure(
        processors=[
            *_event_processors(),
            structlog.processors.JSONRenderer(serializer=orjson.dumps),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(numeric_level),
        logger_factory=structlog.BytesLoggerFactory(),
        cache_logger_on_first_use=True,
    )

    handler = logging.StreamHandler(stream if stream is not None else sys.stdout)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            processors=[
                structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                structlog.processors.JSONRenderer(serializer=_orjson_dumps_str),
            ],
            foreign_pre_chain=[
                structlog.stdlib.add_logger_name,
                *_event_processors(),
            ],
        )
    )

    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    root_logger.addHandler(handler)
    root_logger.setLevel(numeric_level)


def get_logger(name: str | None = None) -> Any:

    '''
    Return a structlog logger, optionally bound to a logger name.

    Args:
        name (str | None): Logger name recorded under the "logger" key

    Returns:
        Any: Bound structlog logger
    '''

    if name is None:
        return structlog.get_logger()
    return structlog.get_logger().bind(logger=name)


def bind_context(**values: Any) -> None:

    '''Bind fields such as order_id or symbol into every later log line of this context.'''

    structlog.contextvars.bind_contextvars(**values)


def clear_context() -> None:

    structlog.contextvars.clear_contextvars()
