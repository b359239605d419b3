"""Structured logging setup.

Every module obtains its logger with ``get_logger(__name__)`` and logs
key-value events. ``configure_logging`` is called once by entry points;
library use without it falls back to structlog's defaults.
"""

import logging
import sys

import structlog

from compliance_readiness.settings import Settings


def configure_logging(settings: Settings | None = None) -> None:
    """Configure structlog rendering and level filtering; events go to stderr.

    Args:
        settings: Settings providing log_level and log_json. Defaults to a
            freshly loaded Settings instance.
    """
    settings = settings or Settings()
    level = logging.getLevelName(settings.log_level.upper())
    if not isinstance(level, int):
        level = logging.INFO

    renderer: structlog.typing.Processor
    if settings.log_json:
        renderer = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=False)

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso", utc=True),
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(level),
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
        cache_logger_on_first_use=False,
    )
    structlog.contextvars.bind_contextvars(service=settings.service_name)


def get_logger(name: str) -> structlog.typing.FilteringBoundLogger:
    """Return a structured logger bound to the given module name.

    Args:
        name: Logger name, conventionally ``__name__``.

    Returns:
        A structlog bound logger accepting key-value event fields.
    """
    return structlog.get_logger(name)
