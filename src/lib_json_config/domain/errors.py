"""Domain-level exception hierarchy.

Purpose
-------
Expose the stable error taxonomy shared by the path engine, adapters, the
composition root, and consuming applications. The hierarchy lives in the domain
layer so inner layers never import outward.

Contents
--------
* :class:`ConfigError` – umbrella base class for all library failures.
* :class:`InvalidFormat` – text could not be converted to or from a document.
* :class:`ParseError` – malformed JSON or a non-object top level.
* :class:`RenderError` – a document holds values JSON cannot represent.
* :class:`ConfigIOError` – a configuration file could not be read or written.
* :class:`KeyNotFound` – a translation source path is absent.
* :class:`TypeMismatch` – a path descends through a value that is not a document.

System Role
-----------
Absence (``get_value``/``has_key``) and ambiguity (``unique_key_match_of``) are
reported through sentinel return values, never through these exceptions.
Callers catch :class:`ConfigError` to handle every library failure uniformly.
"""

from __future__ import annotations

from typing import Sequence


class ConfigError(Exception):
    """Base type for all exceptions emitted by ``lib_json_config``."""


class InvalidFormat(ConfigError):
    """Raised when text cannot be converted to or from a document.

    Why
    ----
    Group parse and render failures so callers that only care about "bad
    JSON" can catch a single type.
    """


class ParseError(InvalidFormat):
    """Malformed JSON text, or JSON whose top level is not an object.

    The target document is never modified when this is raised.
    """


class RenderError(InvalidFormat):
    """A document contains values (``NaN``, tuples, objects) JSON cannot hold."""


class ConfigIOError(ConfigError):
    """A configuration file could not be read or written.

    Why
    ----
    Separate storage problems from content problems; no retry is attempted.
    """


class KeyNotFound(ConfigError, LookupError):
    """Raised by :meth:`Translation.apply` when a source path is absent.

    Attributes
    ----------
    path:
        The missing source path as a tuple of keys.
    sep:
        Separator used to join *path* in the message, matching the one the
        translation table was written with.

    Examples
    --------
    >>> str(KeyNotFound(("a", "b")))
    'key path a/b not found in source document'
    >>> str(KeyNotFound(("a", "b"), sep="."))
    'key path a.b not found in source document'
    """

    def __init__(self, path: Sequence[str], *, sep: str = "/") -> None:
        self.path = tuple(path)
        self.sep = sep
        super().__init__(f"key path {sep.join(self.path)} not found in source document")


class TypeMismatch(ConfigError, TypeError):
    """A path step expected a document but found another kind of value.

    Attributes
    ----------
    path:
        Keys walked so far, ending with the key that holds the offending value.
    kind:
        Name of the value kind found instead of ``document``.

    Examples
    --------
    >>> err = TypeMismatch(("service", "port"), "number")
    >>> err.kind
    'number'
    >>> str(err)
    'expected document at service/port, found number'
    """

    def __init__(self, path: Sequence[str], kind: str) -> None:
        self.path = tuple(path)
        self.kind = kind
        super().__init__(f"expected document at {'/'.join(self.path)}, found {kind}")
