"""structlog setup for the declension service.

Engines, the registry and the HTTP layer each log under their own
``declension.<domain>`` logger. The HTTP layer binds ``correlation_id``,
``language`` and ``case`` into the context so every event of one inflection
call carries them.
"""
import logging
import sys
from enum import Enum
from functools import lru_cache
from uuid import uuid4

import structlog
from structlog.types import EventDict, Processor

from declension import __version__

SERVICE = "declension"


def _enum_values(logger, method_name: str, event_dict: EventDict) -> EventDict:
    """Render case, policy and class enums by their identifier."""
    for key, value in event_dict.items():
        if isinstance(value, Enum):
            event_dict[key] = value.value
    return event_dict


def _service(logger, method_name: str, event_dict: EventDict) -> EventDict:
    event_dict.setdefault("service", SERVICE)
    event_dict.setdefault("version", __version__)
    return event_dict


_PRE_CHAIN: tuple[Processor, ...] = (
    structlog.contextvars.merge_contextvars,
    structlog.stdlib.add_log_level,
    structlog.stdlib.add_logger_name,
    structlog.processors.TimeStamper(fmt="iso", utc=True),
    _enum_values,
    _service,
)


def configure_logging(level: str = "INFO", json_logs: bool = False) -> None:
    """Send structlog events and stdlib records (uvicorn's too) through one renderer.

    Args:
        level: Root level name; unknown names fall back to INFO.
        json_logs: One JSON object per line instead of the console renderer.
    """
    if json_logs:
        renderer = structlog.processors.JSONRenderer(ensure_ascii=False)
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=sys.stdout.isatty())

    structlog.configure(
        processors=[
            *_PRE_CHAIN,
            structlog.processors.format_exc_info,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(structlog.stdlib.ProcessorFormatter(
        foreign_pre_chain=list(_PRE_CHAIN),
        processors=[structlog.stdlib.ProcessorFormatter.remove_processors_meta, renderer],
    ))

    root = logging.getLogger()
    root.handlers = [handler]
    root.setLevel(getattr(logging, level.upper(), logging.INFO))

    # uvicorn attaches its own handlers; its records should reach ours instead
    for name in ("uvicorn", "uvicorn.error", "uvicorn.access"):
        logging.getLogger(name).handlers = []


@lru_cache(maxsize=None)
def get_logger(domain: str) -> structlog.stdlib.BoundLogger:
    return structlog.get_logger(f"{SERVICE}.{domain}")


def api_logger() -> structlog.stdlib.BoundLogger:
    return get_logger("api")


def engine_logger() -> structlog.stdlib.BoundLogger:
    return get_logger("engine")


def registry_logger() -> structlog.stdlib.BoundLogger:
    return get_logger("registry")


def new_correlation_id() -> str:
    return uuid4().hex[:8]


def bind_context(**values) -> None:
    structlog.contextvars.bind_contextvars(**values)


def clear_context() -> None:
    structlog.contextvars.clear_contextvars()


def current_correlation_id() -> str | None:
    return structlog.contextvars.get_contextvars().get("correlation_id")
