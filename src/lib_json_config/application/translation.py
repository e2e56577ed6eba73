"""Copy values between documents through a table of path strings.

Purpose
-------
Map fields of one configuration shape onto another, e.g. an internal settings
document onto the JSON payload an external API expects.

Contents
--------
* :func:`split_path` – turn ``"b / c"`` into ``("b", "c")``.
* :class:`Translation` – ``dict`` of source path → destination path with
  :meth:`Translation.apply`.

System Role
-----------
Built on :func:`~lib_json_config.application.paths.get_value` and
:func:`~lib_json_config.application.paths.set_value`, so it inherits their
:class:`~lib_json_config.domain.errors.TypeMismatch` contract.
"""

from __future__ import annotations

from collections.abc import Mapping, MutableMapping
from typing import Any

from ..domain.errors import KeyNotFound
from ..observability import log_debug, log_error
from .paths import get_value, set_value

DEFAULT_SEPARATOR = "/"


def split_path(text: str, sep: str = DEFAULT_SEPARATOR) -> tuple[str, ...]:
    """Split *text* on *sep* and trim whitespace around every segment.

    Examples
    --------
    >>> split_path(" beta / gamma ")
    ('beta', 'gamma')
    >>> split_path("a.b", ".")
    ('a', 'b')
    """

    if not sep:
        raise ValueError("path separator must not be empty")
    return tuple(segment.strip() for segment in text.split(sep))


class Translation(dict[str, str]):
    """Mapping from delimited source paths to delimited destination paths.

    Examples
    --------
    >>> table = Translation({"a": "alpha", "b/c": "beta/gamma"})
    >>> source = {"a": 1.0, "b": {"c": 3.0, "d": 4.0}}
    >>> destination = {"alpha": 0.0, "beta": {"gamma": 7.0, "delta": 4.0}}
    >>> table.apply(source, destination)
    >>> destination
    {'alpha': 1.0, 'beta': {'gamma': 3.0, 'delta': 4.0}}
    """

    def apply(
        self,
        source: Mapping[str, Any],
        destination: MutableMapping[str, Any],
        sep: str = DEFAULT_SEPARATOR,
    ) -> None:
        """Copy every mapped value from *source* into *destination*.

        Why
        ----
        Keep field-mapping tables declarative instead of scattering
        ``get``/``set`` pairs through calling code.

        What
        ----
        Entries are processed in the mapping's iteration order, but callers
        must treat the order as unspecified. Destination paths are created as
        needed and receive deep clones. The first missing source path raises
        :class:`KeyNotFound`; entries applied before it stay applied.

        Raises
        ------
        KeyNotFound
            A source path does not exist.
        TypeMismatch
            A source or destination path runs through a non-document value.
        """

        for source_text, destination_text in self.items():
            source_keys = split_path(source_text, sep)
            destination_keys = split_path(destination_text, sep)
            value, found = get_value(source, *source_keys)
            if not found:
                log_error("translation_key_missing", path=sep.join(source_keys))
                raise KeyNotFound(source_keys, sep=sep)
            set_value(destination, value, *destination_keys)
        log_debug("translation_applied", entries=len(self), sep=sep)
