from __future__ import annotations

import pytest

from lib_json_config import Config
from lib_json_config.domain.values import ValueKind, clone_document, clone_value, is_document, kind_of


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        (None, ValueKind.NULL),
        (True, ValueKind.BOOL),
        (False, ValueKind.BOOL),
        (0, ValueKind.NUMBER),
        (2.5, ValueKind.NUMBER),
        ("", ValueKind.STRING),
        ([], ValueKind.ARRAY),
        ({}, ValueKind.DOCUMENT),
    ],
)
def test_kind_of_covers_every_variant(value, expected) -> None:
    assert kind_of(value) is expected


def test_config_instances_count_as_documents() -> None:
    assert kind_of(Config({"a": 1.0})) is ValueKind.DOCUMENT
    assert is_document(Config())


@pytest.mark.parametrize("value", [(1, 2), {1, 2}, object(), b"bytes"])
def test_kind_of_rejects_values_outside_the_union(value) -> None:
    with pytest.raises(TypeError):
        kind_of(value)


def test_kind_names_are_stable() -> None:
    assert [kind.value for kind in ValueKind] == ["null", "bool", "number", "string", "array", "document"]


def test_clone_document_shares_no_containers() -> None:
    original = {"a": {"b": [{"c": 1.0}]}}
    copy = clone_document(original)
    copy["a"]["b"][0]["c"] = 2.0
    copy["a"]["b"].append(None)
    assert original == {"a": {"b": [{"c": 1.0}]}}


def test_clone_value_returns_scalars_unchanged() -> None:
    marker = "text"
    assert clone_value(marker) is marker
    assert clone_value(None) is None
