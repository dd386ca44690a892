"""
Logging

structlog is configured once, the first time this module is imported.
Services ask for a named logger and pass every detail as a keyword field,
never formatted into the message.

Renderers:
==========
    APP_ENV=development   aligned, coloured console lines
    anything else         one JSON object per line on stdout

    2024-01-15T10:30:00 [info     ] Review added   [review_service] app=Movie Journal env=development review_id=12

Every event is stamped with the application name and environment. While
someone is signed in, the desktop shell binds their id with
signed_in_as() so ledger events can be traced back to the account.

Usage:
======
    from moviejournal.shared.core.logging import get_logger

    logger = get_logger("review_service")
    logger.info("Review added", review_id=review.id, user_id=review.user_id)
"""

import logging
import sys
from typing import Any, MutableMapping

import structlog
from structlog.typing import Processor

from moviejournal.config.settings import settings


def add_app_info(logger: Any, method_name: str, event_dict: MutableMapping[str, Any]) -> MutableMapping[str, Any]:
    """structlog processor: stamp app name and environment, keeping explicit fields."""
    event_dict.setdefault("app", settings.APP_NAME)
    event_dict.setdefault("env", settings.APP_ENV)
    return event_dict


def build_processors(json_output: bool) -> list[Processor]:
    """Processor chain ending in the JSON or the console renderer."""
    processors: list[Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        add_app_info,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
    ]
    if json_output:
        processors += [structlog.processors.format_exc_info, structlog.processors.JSONRenderer()]
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=sys.stdout.isatty()))
    return processors


def configure_logging(level: str, json_output: bool) -> None:
    """
    Route structlog through the stdlib root logger at the given level.

    Args:
        level: Level name such as "DEBUG" or "info"
        json_output: JSON lines when True, console lines otherwise
    """
    logging.basicConfig(format="%(message)s", stream=sys.stdout, level=level.upper())
    structlog.configure(
        processors=build_processors(json_output),
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def get_logger(name: str | None = None) -> structlog.stdlib.BoundLogger:
    return structlog.get_logger(name)


def signed_in_as(user_id: int) -> None:
    """Attach user_id to every event logged from this context until signed_out()."""
    structlog.contextvars.bind_contextvars(user_id=user_id)


def signed_out() -> None:
    structlog.contextvars.unbind_contextvars("user_id")


configure_logging(settings.LOG_LEVEL, json_output=not settings.is_development)

logger = get_logger("moviejournal")
