"""Nested key-path access over configuration documents.

Purpose
-------
Read, probe, and assign values addressed by an ordered sequence of keys that
descends through nested documents.

Contents
    - ``get_value``: locate a value and report whether it exists.
    - ``has_key`` / ``has_key_nested``: membership tests.
    - ``set_value``: assign a value, creating intermediate documents on demand.
    - ``_descend``: shared walk that enforces the "intermediates are documents"
      contract.

System Role
-----------
Absent keys are a normal outcome and surface as ``(None, False)``. Walking
*through* a scalar or array is a caller error and raises
:class:`~lib_json_config.domain.errors.TypeMismatch`.
"""

from __future__ import annotations

from collections.abc import Mapping, MutableMapping
from typing import Any

from ..domain.errors import TypeMismatch
from ..domain.values import clone_value, is_document, kind_of


def get_value(document: Mapping[str, Any], *keys: str) -> tuple[Any, bool]:
    """Return ``(value, True)`` for the value at *keys* or ``(None, False)``.

    The returned value is the live object stored in *document*, not a copy.

    Raises
    ------
    TypeMismatch
        When an intermediate key holds something other than a document.
    ValueError
        When no keys are given.

    Examples
    --------
    >>> doc = {"service": {"timeout": 5.0}}
    >>> get_value(doc, "service", "timeout")
    (5.0, True)
    >>> get_value(doc, "service", "retries")
    (None, False)
    >>> get_value(doc, "service", "timeout", "unit")
    Traceback (most recent call last):
    ...
    lib_json_config.domain.errors.TypeMismatch: expected document at service/timeout, found number
    """

    _require_keys(keys)
    parent, found = _descend(document, keys)
    if not found or keys[-1] not in parent:
        return None, False
    return parent[keys[-1]], True


def has_key(document: Mapping[str, Any], key: str) -> bool:
    """Return ``True`` if *key* is a direct member of *document*."""

    return key in document


def has_key_nested(document: Mapping[str, Any], *keys: str) -> bool:
    """Return ``True`` if :func:`get_value` would find *keys*.

    Shares the :class:`TypeMismatch` contract of :func:`get_value`.

    Examples
    --------
    >>> has_key_nested({"a": {"b": None}}, "a", "b")
    True
    >>> has_key_nested({"a": {}}, "a", "b")
    False
    """

    return get_value(document, *keys)[1]


def set_value(document: MutableMapping[str, Any], value: Any, *keys: str) -> None:
    """Store a clone of *value* at *keys*, creating missing documents on the way.

    The final key is always overwritten whatever it held before. The path is
    validated before anything is created, so a :class:`TypeMismatch` leaves
    *document* untouched.

    Examples
    --------
    >>> doc = {"service": {"name": "demo"}}
    >>> set_value(doc, 30.0, "service", "limits", "timeout")
    >>> doc
    {'service': {'name': 'demo', 'limits': {'timeout': 30.0}}}
    >>> set_value(doc, {"x": 1}, "service", "name")
    >>> doc["service"]["name"]
    {'x': 1}
    """

    _require_keys(keys)
    _descend(document, keys)

    cursor = document
    for key in keys[:-1]:
        if key not in cursor:
            cursor[key] = {}
        cursor = cursor[key]
    cursor[keys[-1]] = clone_value(value)


def _descend(document: Mapping[str, Any], keys: tuple[str, ...]) -> tuple[Mapping[str, Any], bool]:
    """Walk every key but the last; return ``(parent, True)`` or ``(last_seen, False)``."""

    cursor = document
    for index, key in enumerate(keys[:-1]):
        if key not in cursor:
            return cursor, False
        child = cursor[key]
        if not is_document(child):
            raise TypeMismatch(keys[: index + 1], kind_of(child).value)
        cursor = child
    return cursor, True


def _require_keys(keys: tuple[str, ...]) -> None:
    if not keys:
        raise ValueError("a key path needs at least one key")
