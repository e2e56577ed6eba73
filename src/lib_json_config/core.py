"""Composition root for ``lib_json_config``.

Purpose
-------
Provide the entry points that connect the JSON text and file adapters with the
:class:`~lib_json_config.application.config.Config` object while emitting
structured observability signals.

Contents
--------
* :data:`_STORE` – default file store instance.
* :func:`read_config` – load a file into a :class:`Config`.
* :func:`write_config` – overwrite a file with a rendered document.
* :func:`config_from_string` – parse an object body, braces optional.
* :func:`render_config` – render a document as canonical JSON text.

System Role
-----------
Everything that touches text or storage flows through here; the path engine
itself never does. Each call clears the active trace identifier so log events
from separate calls do not correlate by accident.
"""

from __future__ import annotations

from typing import Any, Mapping

from .adapters.file_store.json_file import JSONFileStore
from .adapters.json_codec.default import parse_fragment, render_document
from .application.config import Config
from .application.matching import unique_key_match_of
from .application.merge import update
from .application.paths import get_value, has_key, has_key_nested, set_value
from .application.ports import DocumentStore
from .application.translation import Translation, split_path
from .application.type_diff import TypeReport, compare_types
from .domain.errors import (
    ConfigError,
    ConfigIOError,
    InvalidFormat,
    KeyNotFound,
    ParseError,
    RenderError,
    TypeMismatch,
)
from .domain.values import ValueKind, kind_of
from .observability import bind_trace_id, log_debug, log_info, make_event

_STORE: DocumentStore = JSONFileStore()


def read_config(path: str, *, store: DocumentStore | None = None) -> Config:
    """Return the document stored at *path* as a :class:`Config`.

    Raises
    ------
    ConfigIOError
        When the file cannot be read.
    ParseError
        When its content is not a JSON object.

    Examples
    --------
    >>> from pathlib import Path
    >>> from tempfile import TemporaryDirectory
    >>> tmp = TemporaryDirectory()
    >>> target = Path(tmp.name) / "config.json"
    >>> _ = target.write_text('{"service": {"timeout": 5}}', encoding="utf-8")
    >>> read_config(str(target)).lookup("service", "timeout")
    (5.0, True)
    >>> tmp.cleanup()
    """

    bind_trace_id(None)
    document = (store or _STORE).load(path)
    log_info("config_read", **make_event("read", path, {"keys": len(document)}))
    return Config(document)


def write_config(
    config: Mapping[str, Any],
    path: str,
    *,
    indent: int | None = None,
    store: DocumentStore | None = None,
) -> None:
    """Overwrite *path* with the JSON rendering of *config*.

    Raises
    ------
    RenderError
        When the document holds values JSON cannot represent.
    ConfigIOError
        When the file cannot be written.
    """

    bind_trace_id(None)
    (store or _STORE).dump(config, path, indent=indent)
    log_info("config_written", **make_event("write", path, {"keys": len(config)}))


def config_from_string(text: str) -> Config:
    """Parse *text* as a JSON object whose outer braces may be omitted.

    Examples
    --------
    >>> config_from_string('"a": 1, "b": {"c": 3}').as_dict()
    {'a': 1.0, 'b': {'c': 3.0}}
    >>> len(config_from_string(""))
    0
    """

    bind_trace_id(None)
    document = parse_fragment(text)
    log_debug("config_parsed", **make_event("parse", None, {"keys": len(document)}))
    return Config(document)


def render_config(config: Mapping[str, Any], *, indent: int | None = None) -> str:
    """Return canonical JSON text for *config*."""

    return render_document(config, indent=indent)


__all__ = [
    "Config",
    "ConfigError",
    "ConfigIOError",
    "InvalidFormat",
    "KeyNotFound",
    "ParseError",
    "RenderError",
    "Translation",
    "TypeMismatch",
    "TypeReport",
    "ValueKind",
    "compare_types",
    "config_from_string",
    "get_value",
    "has_key",
    "has_key_nested",
    "kind_of",
    "read_config",
    "render_config",
    "set_value",
    "split_path",
    "unique_key_match_of",
    "update",
    "write_config",
]
