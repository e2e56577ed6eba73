"""Mutable configuration object bundling every document operation.

Purpose
-------
Give consumers one object that owns a document and exposes the path accessor,
merge engine, key matcher, and type diff as methods, so typical code reads
``cfg.lookup("service", "timeout")`` instead of threading a ``dict`` through free
functions.

Contents
--------
* :class:`Config` – ``MutableMapping`` implementation over a single document.

System Role
-----------
Returned by :func:`lib_json_config.core.read_config` and
:func:`lib_json_config.core.config_from_string`. Every method delegates to the
application functions; a ``Config`` is accepted wherever those functions expect
a document.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping, MutableMapping
from typing import Any

from ..domain.values import clone_document, clone_value
from .matching import unique_key_match_of
from .merge import update
from .paths import get_value, has_key, has_key_nested, set_value
from .type_diff import TypeReport, compare_types


class Config(MutableMapping[str, Any]):
    """A configuration document with path-aware helpers.

    Why
    ----
    Callers want dictionary behaviour for simple lookups plus the nested-path
    and merge helpers without importing half a dozen functions.

    What
    ----
    Wraps a clone of the supplied mapping. Item access works on top-level keys;
    the helper methods address nested values by key path.

    Parameters
    ----------
    data:
        Initial document. It is cloned, so later changes to *data* do not leak
        into the configuration.

    Examples
    --------
    >>> cfg = Config({"service": {"timeout": 5.0}})
    >>> cfg.lookup("service", "timeout")
    (5.0, True)
    >>> cfg.assign("https://api.demo", "service", "endpoint")
    >>> cfg.merge({"service": {"timeout": 30.0}})
    >>> cfg.as_dict()
    {'service': {'timeout': 30.0, 'endpoint': 'https://api.demo'}}
    """

    __slots__ = ("_data",)

    def __init__(self, data: Mapping[str, Any] | None = None) -> None:
        self._data: dict[str, Any] = clone_document(data) if data else {}

    def __getitem__(self, key: str) -> Any:
        return self._data[key]

    def __setitem__(self, key: str, value: Any) -> None:
        self._data[key] = clone_value(value)

    def __delitem__(self, key: str) -> None:
        del self._data[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._data)

    def __len__(self) -> int:
        return len(self._data)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Config):
            return self._data == other._data
        if isinstance(other, Mapping):
            return self._data == dict(other)
        return NotImplemented

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"Config({self._data!r})"

    def lookup(self, *keys: str) -> tuple[Any, bool]:
        """Return ``(value, found)`` for the nested path *keys*.

        See :func:`~lib_json_config.application.paths.get_value`.
        """

        return get_value(self._data, *keys)

    def assign(self, value: Any, *keys: str) -> None:
        """Store a clone of *value* at *keys*, creating documents as needed."""

        set_value(self._data, value, *keys)

    def has_key(self, key: str) -> bool:
        return has_key(self._data, key)

    def has_key_nested(self, *keys: str) -> bool:
        return has_key_nested(self._data, *keys)

    def merge(self, source: Mapping[str, Any]) -> None:
        """Deep-merge *source* into this configuration (source wins)."""

        update(self._data, source)

    def unique_key_match_of(self, shortcut: str, ignore: Iterable[str] = ()) -> str:
        """Return the only top-level key abbreviated by *shortcut*, else ``""``."""

        return unique_key_match_of(self._data, shortcut, ignore)

    def compare_types(self, reference: Mapping[str, Any], prefix: str = "") -> TypeReport:
        """Compare value kinds against *reference*; see :func:`compare_types`."""

        return compare_types(self._data, reference, prefix)

    def as_dict(self) -> dict[str, Any]:
        """Return a deep, mutable ``dict`` copy of the document.

        Examples
        --------
        >>> cfg = Config({"flags": ["alpha"]})
        >>> exported = cfg.as_dict()
        >>> exported["flags"].append("beta")
        >>> cfg["flags"]
        ['alpha']
        """

        return clone_document(self._data)

    def to_json(self, *, indent: int | None = None) -> str:
        """Serialise the configuration with the canonical JSON codec.

        Examples
        --------
        >>> Config({"service": {"timeout": 5.0}}).to_json()
        '{"service":{"timeout":5}}'
        """

        from ..adapters.json_codec.default import render_document

        return render_document(self._data, indent=indent)
