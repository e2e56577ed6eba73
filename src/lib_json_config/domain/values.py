"""Generic value model shared by every document operation.

Purpose
-------
Name the closed set of value kinds a configuration document may hold and give
the rest of the package a single place to classify and clone them.

Contents
--------
* :data:`Value` / :data:`Document` – type aliases for the tree structure.
* :class:`ValueKind` – tag enum over the six variants.
* :func:`kind_of` – exhaustive classification of a Python value.
* :func:`is_document` – predicate used by the path and merge engines.
* :func:`clone_value` / :func:`clone_document` – deep copies that keep
  documents free of shared mutable substructure.

System Role
-----------
Numbers form a single variant: ``int`` and ``float`` both classify as
:attr:`ValueKind.NUMBER`. Parsed documents always carry ``float``; plain ``int``
only appears when callers build documents by hand.
"""

from __future__ import annotations

from collections.abc import Mapping
from enum import Enum
from typing import Any, Dict, List, Union

Value = Union[None, bool, int, float, str, List[Any], Dict[str, Any]]
Document = Dict[str, Any]


class ValueKind(str, Enum):
    """Variant tag of a configuration value.

    The enum value doubles as the human-readable kind name used in type
    reports and error messages.

    Examples
    --------
    >>> ValueKind.DOCUMENT.value
    'document'
    """

    NULL = "null"
    BOOL = "bool"
    NUMBER = "number"
    STRING = "string"
    ARRAY = "array"
    DOCUMENT = "document"


def kind_of(value: object) -> ValueKind:
    """Return the :class:`ValueKind` of *value*.

    ``bool`` is checked before numbers because it subclasses ``int``. Any
    ``Mapping`` counts as a document so :class:`~lib_json_config.domain.config.Config`
    instances nest transparently.

    Raises
    ------
    TypeError
        When *value* is outside the supported union (tuples, sets, objects).

    Examples
    --------
    >>> kind_of(True), kind_of(3), kind_of(2.5)
    (<ValueKind.BOOL: 'bool'>, <ValueKind.NUMBER: 'number'>, <ValueKind.NUMBER: 'number'>)
    >>> kind_of({"a": []}).value
    'document'
    >>> kind_of((1, 2))
    Traceback (most recent call last):
    ...
    TypeError: unsupported configuration value type: tuple
    """

    if value is None:
        return ValueKind.NULL
    if isinstance(value, bool):
        return ValueKind.BOOL
    if isinstance(value, (int, float)):
        return ValueKind.NUMBER
    if isinstance(value, str):
        return ValueKind.STRING
    if isinstance(value, list):
        return ValueKind.ARRAY
    if isinstance(value, Mapping):
        return ValueKind.DOCUMENT
    raise TypeError(f"unsupported configuration value type: {type(value).__name__}")


def is_document(value: object) -> bool:
    """Return ``True`` when *value* is a nested document."""

    return isinstance(value, Mapping)


def clone_document(document: Mapping[str, Any]) -> Document:
    """Recursively clone *document* into fresh ``dict``/``list`` containers.

    Examples
    --------
    >>> source = {"a": {"b": [1, 2]}}
    >>> copy = clone_document(source)
    >>> copy["a"]["b"].append(3)
    >>> source["a"]["b"]
    [1, 2]
    """

    return {key: clone_value(value) for key, value in document.items()}


def clone_value(value: Any) -> Any:
    """Clone *value*; scalars are immutable and returned as-is."""

    if isinstance(value, Mapping):
        return clone_document(value)
    if isinstance(value, list):
        return [clone_value(item) for item in value]
    return value
