"""Logging setup for the select codec.

Codec modules log through ``logging.getLogger(__name__)`` and attach their
data with ``extra=``. The formatter installed here lifts those keys into the
structlog event dict, so the JSON renderer emits them as top-level fields.
"""

from __future__ import annotations

import logging
import os
import sys

import structlog

from grid_common.config.env import parse_bool_env

LOG_LEVEL_ENV = "GS_LOG_LEVEL"
LOG_JSON_ENV = "GS_LOG_JSON"
LOG_FILE_ENV = "GS_LOG_FILE"


def _resolve_level(value: str | int | None, debug: bool) -> int:
    if debug:
        return logging.DEBUG
    if isinstance(value, int):
        return value
    if not value:
        return logging.INFO
    if value.strip().isdigit():
        return int(value)
    return logging._nameToLevel.get(value.strip().upper(), logging.INFO)


def _event_processors() -> list[structlog.types.Processor]:
    return [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_logger_name,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
    ]


def _build_formatter(json_output: bool) -> structlog.stdlib.ProcessorFormatter:
    renderer: structlog.types.Processor
    if json_output:
        renderer = structlog.processors.JSONRenderer(sort_keys=True)
    else:
        renderer = structlog.dev.ConsoleRenderer()
    return structlog.stdlib.ProcessorFormatter(
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            renderer,
        ],
        # Records from stdlib loggers carry codec fields as LogRecord extras.
        foreign_pre_chain=[*_event_processors(), structlog.stdlib.ExtraAdder()],
    )


def _build_handlers(
    formatter: logging.Formatter, log_file: str | None
) -> list[logging.Handler]:
    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stderr)]
    if log_file:
        handlers.append(logging.FileHandler(log_file))
    for handler in handlers:
        handler.setFormatter(formatter)
    return handlers


def configure_logging(
    *,
    level: str | int | None = None,
    debug: bool = False,
    log_file: str | None = None,
    json: bool | None = None,
    force: bool = False,
) -> None:
    """Route codec logging through a structlog formatter.

    Arguments win over ``GS_LOG_LEVEL``, ``GS_LOG_JSON`` and ``GS_LOG_FILE``.
    When the root logger already has handlers they are left alone unless
    ``force`` is set.
    """
    resolved_level = _resolve_level(level or os.environ.get(LOG_LEVEL_ENV), debug)
    if json is None:
        json = bool(parse_bool_env(os.environ.get(LOG_JSON_ENV)))
    if log_file is None:
        log_file = os.environ.get(LOG_FILE_ENV)

    structlog.configure(
        processors=[
            *_event_processors(),
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    root_logger = logging.getLogger()
    if root_logger.handlers and not force:
        return
    if force:
        for handler in list(root_logger.handlers):
            root_logger.removeHandler(handler)

    root_logger.setLevel(resolved_level)
    for handler in _build_handlers(_build_formatter(json), log_file):
        root_logger.addHandler(handler)
