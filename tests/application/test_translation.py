from __future__ import annotations

import pytest

from lib_json_config.application.translation import Translation, split_path
from lib_json_config.domain.errors import ConfigError, KeyNotFound, TypeMismatch


def test_apply_copies_mapped_values() -> None:
    translation = Translation({"a": "alpha", "b/c": "beta/gamma"})
    source = {"a": 1.0, "b": {"c": 3.0, "d": 4.0}}
    destination = {"alpha": 0.0, "beta": {"gamma": 7.0, "delta": 4.0}}

    translation.apply(source, destination, "/")

    assert destination == {"alpha": 1.0, "beta": {"gamma": 3.0, "delta": 4.0}}
    assert source == {"a": 1.0, "b": {"c": 3.0, "d": 4.0}}


def test_apply_trims_whitespace_around_segments() -> None:
    translation = Translation({" b . c ": "beta .  gamma"})
    destination: dict[str, object] = {}
    translation.apply({"b": {"c": "x"}}, destination, ".")
    assert destination == {"beta": {"gamma": "x"}}


def test_apply_creates_missing_destination_structure() -> None:
    destination: dict[str, object] = {"keep": True}
    Translation({"a": "x/y/z"}).apply({"a": [1.0, 2.0]}, destination)
    assert destination == {"keep": True, "x": {"y": {"z": [1.0, 2.0]}}}


def test_apply_copies_subtrees_by_value() -> None:
    source = {"auth": {"scopes": ["read"]}}
    destination: dict[str, object] = {}
    Translation({"auth": "credentials"}).apply(source, destination)
    destination["credentials"]["scopes"].append("write")  # type: ignore[index]
    assert source == {"auth": {"scopes": ["read"]}}


def test_missing_source_path_raises_without_rollback() -> None:
    translation = Translation({"a": "alpha", "b/missing": "beta"})
    destination: dict[str, object] = {}
    with pytest.raises(KeyNotFound) as excinfo:
        translation.apply({"a": 1.0, "b": {}}, destination)
    assert excinfo.value.path == ("b", "missing")
    assert isinstance(excinfo.value, ConfigError)
    assert isinstance(excinfo.value, LookupError)
    assert destination == {"alpha": 1.0}


def test_type_mismatch_on_destination_propagates() -> None:
    destination = {"beta": "flat"}
    with pytest.raises(TypeMismatch):
        Translation({"a": "beta/gamma"}).apply({"a": 1.0}, destination)
    assert destination == {"beta": "flat"}


def test_type_mismatch_on_source_propagates() -> None:
    with pytest.raises(TypeMismatch):
        Translation({"a/b": "x"}).apply({"a": 1.0}, {})


def test_split_path() -> None:
    assert split_path("a") == ("a",)
    assert split_path(" a / b ") == ("a", "b")
    assert split_path("a::b", "::") == ("a", "b")


def test_split_path_rejects_empty_separator() -> None:
    with pytest.raises(ValueError):
        split_path("a/b", "")


def test_translation_is_a_plain_mapping() -> None:
    translation = Translation()
    translation["a"] = "b"
    assert dict(translation) == {"a": "b"}


def test_missing_source_path_is_reported_with_the_table_separator() -> None:
    with pytest.raises(KeyNotFound) as excinfo:
        Translation({"b.missing": "beta"}).apply({"b": {}}, {}, sep=".")
    assert excinfo.value.path == ("b", "missing")
    assert str(excinfo.value) == "key path b.missing not found in source document"
