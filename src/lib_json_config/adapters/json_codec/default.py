"""JSON text codec for configuration documents.

Purpose
-------
Convert JSON text into documents and documents back into JSON text. The path
engine treats this module as a black box; it is the only place that knows about
the ``json`` module.

Contents
--------
* :func:`parse_value` – parse any JSON value under the number policy.
* :func:`parse_document` – strict parse of a JSON object.
* :func:`parse_fragment` – lenient parse that adds missing outer braces.
* :func:`render_document` / :func:`render_value` – canonical JSON rendering.
* :class:`JSONCodec` – object form satisfying
  :class:`~lib_json_config.application.ports.DocumentCodec`.

Number policy
-------------
All JSON numbers parse to ``float``; ``int`` never appears in parsed output.
Rendering writes integral floats without a fractional part, so ``1.0`` is
stored as ``1`` and reads back as ``1.0``. ``NaN`` and ``Infinity`` are rejected
in both directions.
"""

from __future__ import annotations

import json
import math
from collections.abc import Mapping
from typing import Any

from ...domain.errors import ParseError, RenderError
from ...domain.values import ValueKind, kind_of

# Largest magnitude rendered in plain integer notation; beyond it floats keep
# exponent notation.
_INTEGRAL_LIMIT = 1e21


def parse_document(text: str | bytes) -> dict[str, Any]:
    """Parse *text* as a JSON object.

    Raises
    ------
    ParseError
        For malformed JSON, non-finite numbers, or a non-object top level.

    Examples
    --------
    >>> parse_document('{"port": 8080, "tags": ["a"]}')
    {'port': 8080.0, 'tags': ['a']}
    >>> parse_document('[1, 2]')
    Traceback (most recent call last):
    ...
    lib_json_config.domain.errors.ParseError: JSON top level must be an object, got array
    """

    data = parse_value(text)
    if not isinstance(data, dict):
        raise ParseError(f"JSON top level must be an object, got {kind_of(data).value}")
    return data


def parse_value(text: str | bytes) -> Any:
    """Parse any JSON value (object, array, or scalar) under the number policy.

    Examples
    --------
    >>> parse_value('[1, "two", null]')
    [1.0, 'two', None]
    >>> parse_value('NaN')
    Traceback (most recent call last):
    ...
    lib_json_config.domain.errors.ParseError: invalid JSON: NaN is not a valid JSON number
    """

    try:
        return json.loads(
            text,
            parse_int=_parse_number,
            parse_float=_parse_number,
            parse_constant=_reject_constant,
        )
    except (ValueError, UnicodeDecodeError) as exc:
        raise ParseError(f"invalid JSON: {exc}") from exc
    except RecursionError as exc:
        raise ParseError("invalid JSON: nesting too deep") from exc


def parse_fragment(text: str) -> dict[str, Any]:
    """Parse an object body whose enclosing braces may be omitted.

    Text that does not start with ``{`` is wrapped in braces; text that does is
    parsed as a complete object.

    Examples
    --------
    >>> parse_fragment('"a": 1, "b": {"c": true}')
    {'a': 1.0, 'b': {'c': True}}
    >>> parse_fragment('   ')
    {}
    """

    body = text.strip()
    if not body.startswith("{"):
        body = "{" + body + "}"
    return parse_document(body)


def render_document(document: Mapping[str, Any], *, indent: int | None = None) -> str:
    """Render *document* as JSON with sorted keys.

    Examples
    --------
    >>> render_document({"b": 2.0, "a": [1.5, None]})
    '{"a":[1.5,null],"b":2}'
    """

    return render_value(document, indent=indent)


def render_value(value: Any, *, indent: int | None = None) -> str:
    """Render any supported value, not only documents.

    Examples
    --------
    >>> render_value([3.0, "x"])
    '[3,"x"]'
    """

    try:
        prepared = _prepare(value)
        return json.dumps(prepared, indent=indent, separators=(",", ":"), sort_keys=True, ensure_ascii=False)
    except RecursionError as exc:
        raise RenderError("cannot render value: nesting too deep") from exc


class JSONCodec:
    """Object wrapper around the module functions."""

    def parse(self, text: str) -> dict[str, Any]:
        return parse_document(text)

    def render(self, document: Mapping[str, Any], *, indent: int | None = None) -> str:
        return render_document(document, indent=indent)


def _parse_number(literal: str) -> float:
    number = float(literal)
    if not math.isfinite(number):
        raise ValueError(f"number {literal} is out of range")
    return number


def _reject_constant(literal: str) -> float:
    raise ValueError(f"{literal} is not a valid JSON number")


def _prepare(value: Any) -> Any:
    """Validate *value* and convert integral floats for rendering."""

    try:
        kind = kind_of(value)
    except TypeError as exc:
        raise RenderError(str(exc)) from exc
    if kind is ValueKind.DOCUMENT:
        prepared: dict[str, Any] = {}
        for key, item in value.items():
            if not isinstance(key, str):
                raise RenderError(f"document keys must be strings, got {type(key).__name__}")
            prepared[key] = _prepare(item)
        return prepared
    if kind is ValueKind.ARRAY:
        return [_prepare(item) for item in value]
    if kind is ValueKind.NUMBER and isinstance(value, float):
        if not math.isfinite(value):
            raise RenderError(f"cannot render non-finite number {value!r}")
        if value.is_integer() and abs(value) < _INTEGRAL_LIMIT:
            return int(value)
    return value
