"""Structured logging for the WorkOS client.

One handler lives on the ``workos`` logger; every other logger the client
uses (``workos.http``, ``workos.diagnostics``) is a handler-less child that
propagates to it, so each record is written once. ``WORKOS_LOG_LEVEL`` wins
over the level requested in code.

Events are emitted through :func:`log_event` as one JSON object per record,
which :class:`JsonFormatter` flattens into the output line.
"""
from __future__ import annotations

import contextlib
import json
import logging
import os
import sys
from logging.handlers import RotatingFileHandler
from typing import Any, Dict, Iterable, Optional, Union

from ..config.defaults import WORKOS_DEFAULT_LOG_LEVEL
from .log_support import JsonFormatter, LogContext

BASE_LOGGER_NAME = "workos"
LOG_LEVEL_ENV = "WORKOS_LOG_LEVEL"

_READY = "_workos_ready"
_CONSOLE = "_workos_console"
_FILE = "_workos_file"
_PLAIN_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s"
_FILE_MAX_BYTES = 10 * 1024 * 1024
_FILE_BACKUPS = 5

_LEVELS = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARN": logging.WARNING,
    "WARNING": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL,
}


def resolve_level(value: Optional[str], default: int = logging.INFO) -> int:
    """Level constant for a case-insensitive name; ``default`` when unknown."""
    if not value:
        return default
    return _LEVELS.get(value.strip().upper(), default)


def _formatter(json_mode: bool) -> logging.Formatter:
    return JsonFormatter() if json_mode else logging.Formatter(_PLAIN_FORMAT)


def _tagged(handlers: Iterable[logging.Handler], tag: str) -> list:
    return [h for h in handlers if getattr(h, tag, False)]


def _discard(logger: logging.Logger, handler: logging.Handler) -> None:
    logger.removeHandler(handler)
    with contextlib.suppress(Exception):
        handler.close()


def _base_logger(json_mode: bool, level: Optional[int]) -> logging.Logger:
    logger = logging.getLogger(BASE_LOGGER_NAME)
    first = not getattr(logger, _READY, False)
    if first or level is not None:
        default = resolve_level(WORKOS_DEFAULT_LOG_LEVEL) if level is None else level
        logger.setLevel(resolve_level(os.getenv(LOG_LEVEL_ENV), default=default))

    if first:
        console = logging.StreamHandler(sys.stderr)
        setattr(console, _CONSOLE, True)
        logger.handlers[:] = [console]
        logger.propagate = False
        setattr(logger, _READY, True)

    for console in _tagged(logger.handlers, _CONSOLE):
        console.setLevel(logger.level)
        if console.formatter is None or json_mode != isinstance(console.formatter, JsonFormatter):
            console.setFormatter(_formatter(json_mode))
    return logger


def get_logger(
    name: str = BASE_LOGGER_NAME, json_mode: bool = True, level: Optional[int] = None
) -> logging.Logger:
    """Return ``name`` attached to the shared ``workos`` handler.

    The base level is set on first use (``WORKOS_DEFAULT_LOG_LEVEL``) and
    whenever ``level`` is given; ``WORKOS_LOG_LEVEL`` wins in both cases.
    Without ``level`` an existing level, such as one set by
    :func:`configure_logger`, is kept.
    Non-base names are reset to ``NOTSET`` and propagate.
    """
    base = _base_logger(json_mode, level)
    if name == BASE_LOGGER_NAME:
        return base

    logger = logging.getLogger(name)
    for stray in _tagged(list(logger.handlers), _CONSOLE):
        _discard(logger, stray)
    logger.setLevel(logging.NOTSET)
    logger.propagate = True
    return logger


def configure_logger(
    *,
    level: Union[int, str, None] = None,
    file_path: Optional[str] = None,
    json_mode: bool = True,
) -> logging.Logger:
    """Adjust the ``workos`` logger at runtime.

    Args:
        level: Numeric level or name. ``None`` keeps the current level.
        file_path: Attach (or keep) a rotating log file at this path;
            ``None`` detaches any file handler added here before.
        json_mode: Formatter for the file handler.

    Handlers added by the application are not touched.
    """
    logger = get_logger(BASE_LOGGER_NAME, json_mode=json_mode)
    if isinstance(level, str):
        logger.setLevel(resolve_level(level, default=logger.level))
    elif level is not None:
        logger.setLevel(level)
    for handler in logger.handlers:
        handler.setLevel(logger.level)

    target = os.path.abspath(os.path.expanduser(file_path)) if file_path else None
    kept = None
    for handler in _tagged(list(logger.handlers), _FILE):
        if target is not None and getattr(handler, "baseFilename", None) == target:
            kept = handler
        else:
            _discard(logger, handler)
    if target is None:
        return logger

    if kept is None:
        os.makedirs(os.path.dirname(target), exist_ok=True)
        kept = RotatingFileHandler(target, maxBytes=_FILE_MAX_BYTES, backupCount=_FILE_BACKUPS, encoding="utf-8")
        setattr(kept, _FILE, True)
        logger.addHandler(kept)
    kept.setLevel(logger.level)
    kept.setFormatter(_formatter(json_mode))
    return logger


def log_event(
    logger: logging.Logger,
    event: str,
    ctx: Optional[LogContext] = None,
    *,
    level: int = logging.INFO,
    **fields: Any,
) -> None:
    """Log ``event`` as a JSON object: context first, then non-``None`` fields.

    Nothing is built when ``level`` is disabled for ``logger``.
    """
    if not logger.isEnabledFor(level):
        return
    payload: Dict[str, Any] = {"event": event}
    if ctx is not None:
        payload.update(ctx.to_dict())
    payload.update((k, v) for k, v in fields.items() if v is not None)
    logger.log(level, json.dumps(payload, ensure_ascii=False, default=str))


__all__ = [
    "BASE_LOGGER_NAME",
    "LOG_LEVEL_ENV",
    "LogContext",
    "resolve_level",
    "get_logger",
    "configure_logger",
    "log_event",
]
