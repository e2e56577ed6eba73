"""Application-layer merge policy.

Purpose
-------
Fold one configuration document into another. The merge is destructive on the
target, never touches the source, and is free of I/O so it can be reused by the
composition root, the CLI, and :class:`~lib_json_config.domain.config.Config`.

Contents
    - ``update``: public entry point driven by a simple loop.
    - ``_merge_branch`` / ``_set_leaf``: tiny helpers that narrate how nested
      documents and leaf values land in the target.

System Role
-----------
Nested documents merge key by key. Everything else (scalars and arrays)
replaces the target value outright. A source document arriving over a
non-document target replaces it too: unlike the path accessor, ``update`` never
raises on type clashes.
"""

from __future__ import annotations

from collections.abc import Mapping, MutableMapping
from typing import Any

from ..domain.values import clone_document, clone_value, is_document


def update(target: MutableMapping[str, Any], source: Mapping[str, Any]) -> None:
    """Merge *source* into *target* in place.

    Why
    ----
    Callers overlay a partial document (user overrides, API payload fragments)
    onto a complete one without losing keys the overlay does not mention.

    What
    ----
    For every key in *source*: recurse when both sides hold documents,
    otherwise store a deep clone of the source value. Keys present only in
    *target* are left alone. Applying the same *source* twice yields the same
    result as applying it once.

    Examples
    --------
    >>> target = {"k": {"a": 1, "b": 2}, "keep": True}
    >>> update(target, {"k": {"a": 9, "c": 3}})
    >>> target
    {'k': {'a': 9, 'b': 2, 'c': 3}, 'keep': True}
    >>> update(target, {"keep": {"now": "nested"}})
    >>> target["keep"]
    {'now': 'nested'}
    """

    for key, value in source.items():
        if is_document(value):
            _merge_branch(target, key, value)
        else:
            _set_leaf(target, key, value)


def _merge_branch(target: MutableMapping[str, Any], key: str, value: Mapping[str, Any]) -> None:
    """Recurse into ``target[key]`` or replace it with a clone of *value*."""

    existing = target.get(key)
    if is_document(existing):
        update(existing, value)
        return
    target[key] = clone_document(value)


def _set_leaf(target: MutableMapping[str, Any], key: str, value: Any) -> None:
    target[key] = clone_value(value)
