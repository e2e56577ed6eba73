"""Public package surface for ``lib_json_config``.

Re-exports the composition root, the document operations, the error taxonomy,
and the logging hooks so ``import lib_json_config`` is all a consumer needs.
"""

from __future__ import annotations

from .core import (
    Config,
    ConfigError,
    ConfigIOError,
    InvalidFormat,
    KeyNotFound,
    ParseError,
    RenderError,
    Translation,
    TypeMismatch,
    TypeReport,
    ValueKind,
    compare_types,
    config_from_string,
    get_value,
    has_key,
    has_key_nested,
    kind_of,
    read_config,
    render_config,
    set_value,
    split_path,
    unique_key_match_of,
    update,
    write_config,
)
from .observability import bind_trace_id, get_logger

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
    "bind_trace_id",
    "compare_types",
    "config_from_string",
    "get_logger",
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
