"""Shortcut lookup among the top-level keys of a document.

Purpose
    Let interactive tools accept abbreviated key names (``frob`` for
    ``FrobnicationLevel``) while refusing to guess when the abbreviation is
    ambiguous.

Contents
    - ``unique_key_match_of``: public lookup returning the matching key or ``""``.
    - ``_normalise``: per-character lowercasing plus removal of ignorable
      characters.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any


def unique_key_match_of(document: Mapping[str, Any], shortcut: str, ignore: Iterable[str] = ()) -> str:
    """Return the single top-level key that *shortcut* abbreviates, else ``""``.

    Both the shortcut and every key are normalised by deleting characters in
    *ignore* and lowercasing the rest. A key matches when its normalised form
    starts with the normalised shortcut. No match and several matches both
    return the empty string. Nested documents are not searched.

    Parameters
    ----------
    document:
        Document whose top-level keys are candidates.
    shortcut:
        Abbreviation typed by the user.
    ignore:
        Characters to drop before comparing; a string is treated as a set of
        characters.

    Examples
    --------
    >>> unique_key_match_of({"key1": 1, "key2": 2}, "k")
    ''
    >>> unique_key_match_of({"key1": 1, "other": 2}, "K")
    'key1'
    >>> unique_key_match_of({"_x_key_": 1}, "xkey", "_")
    '_x_key_'
    """

    ignored = frozenset(ignore)
    needle = _normalise(shortcut, ignored)
    matches = [key for key in document if _normalise(key, ignored).startswith(needle)]
    if len(matches) != 1:
        return ""
    return matches[0]


def _normalise(text: str, ignored: frozenset[str]) -> str:
    # Lowercase one character to one character: "İ".lower() is "i" plus a
    # combining dot, and only the "i" is kept.
    return "".join(char.lower()[0] for char in text if char not in ignored)
