from __future__ import annotations

import logging
import sys

import structlog

from aristeides.core.config import resolve_log_level, settings

LOGGER_NAME = "aristeides"

# Bus events go through this stdlib logger, so LOG_LEVEL and the host's
# logging handlers decide what is emitted. Without handlers only WARNING and
# above reach stderr; nothing is written to stdout.
_stdlib_logger = logging.getLogger(LOGGER_NAME)
_stdlib_logger.setLevel(settings.LOG_LEVEL)


def configure_logging(level: str | None = None, json: bool | None = None) -> None:
    """Configure structlog and a stdout handler for the bus.

    Embedding applications that already configure logging can skip this;
    the bus only ever calls ``log`` and never reconfigures on its own.
    """
    level_name = resolve_log_level(level if level is not None else settings.LOG_LEVEL)
    render_json = settings.LOG_JSON if json is None else json

    processors: list = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
        structlog.processors.StackInfoRenderer(),
    ]
    if render_json:
        processors.append(structlog.processors.format_exc_info)
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer())

    logging.basicConfig(format="%(message)s", stream=sys.stdout)
    _stdlib_logger.setLevel(level_name)

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(logging.getLevelName(level_name)),
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=False,
    )


log = structlog.wrap_logger(_stdlib_logger, wrapper_class=structlog.stdlib.BoundLogger)
