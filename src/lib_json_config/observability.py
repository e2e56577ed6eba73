"""Logging for file reads, writes and translations of configuration documents.

Purpose
    Attach an ``operation``/``path`` context and the caller's trace id to
    every record this package emits, so one ``read_config`` call can be
    followed from the file store up to the composition root.

Contents
    - ``TRACE_ID``: trace id of the current read/write/translate call.
    - ``get_logger``: the ``lib_json_config`` logger.
    - ``bind_trace_id``: sets or clears ``TRACE_ID``.
    - ``log_debug`` / ``log_info`` / ``log_error``: emit ``config_*`` and
      ``translation_*`` events with their context under ``extra["context"]``.
    - ``make_event``: builds the ``operation``/``path`` fields for those events.

System Integration
    Used by the adapters, the translator, and the composition root. The path
    accessor, merge engine, and type diff stay silent.
"""

from __future__ import annotations

import logging
from contextvars import ContextVar
from typing import Any, Final, Mapping

TRACE_ID: ContextVar[str | None] = ContextVar("lib_json_config_trace_id", default=None)
"""Trace id stamped onto every record emitted by the ``log_*`` helpers."""

_LOGGER: Final[logging.Logger] = logging.getLogger("lib_json_config")
_LOGGER.addHandler(logging.NullHandler())


def get_logger() -> logging.Logger:
    """Return the ``lib_json_config`` logger.

    It carries only a ``NullHandler``; attach a handler to see the
    ``config_*`` and ``translation_*`` events.
    """

    return _LOGGER


def bind_trace_id(trace_id: str | None) -> None:
    """Bind or clear the active trace identifier.

    Examples
    --------
    >>> bind_trace_id('abc123')
    >>> TRACE_ID.get()
    'abc123'
    >>> bind_trace_id(None)
    >>> TRACE_ID.get() is None
    True
    """

    TRACE_ID.set(trace_id)


def log_debug(message: str, **fields: Any) -> None:
    """Log a DEBUG event such as ``config_file_read``."""

    _emit(logging.DEBUG, message, fields)


def log_info(message: str, **fields: Any) -> None:
    """Log an INFO event such as ``config_read``."""

    _emit(logging.INFO, message, fields)


def log_error(message: str, **fields: Any) -> None:
    """Log an ERROR event such as ``config_file_invalid``."""

    _emit(logging.ERROR, message, fields)


def make_event(
    operation: str,
    path: str | None,
    payload: Mapping[str, Any] | None = None,
) -> dict[str, Any]:
    """Build a structured logging payload for document lifecycle events.

    Inputs
        operation: Name of the operation being observed (``read``, ``write``).
        path: Filesystem path associated with the event, if available.
        payload: Optional mapping with extra diagnostic detail.
    Outputs
        dict[str, Any]: Data safe to unpack into :func:`log_*` helpers.

    Examples
    --------
    >>> make_event('read', '/etc/demo.json', {'keys': 3})
    {'operation': 'read', 'path': '/etc/demo.json', 'keys': 3}
    """

    event: dict[str, Any] = {"operation": operation, "path": path}
    if payload:
        event |= dict(payload)
    return event


def _emit(level: int, message: str, fields: Mapping[str, Any]) -> None:
    """Log *message* with *fields* and the trace id under ``extra["context"]``."""

    _LOGGER.log(level, message, extra={"context": _with_trace(fields)})


def _with_trace(fields: Mapping[str, Any]) -> dict[str, Any]:
    """Return *fields* prefixed with the current ``trace_id``."""

    context = {"trace_id": TRACE_ID.get()}
    context.update(fields)
    return context
