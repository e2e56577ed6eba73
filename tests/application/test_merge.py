from __future__ import annotations

from hypothesis import given
from hypothesis import strategies as st

from lib_json_config.application.merge import update
from lib_json_config.domain.values import clone_document


KEYS = st.sampled_from(["a", "b", "c", "d"])
SCALAR = st.one_of(
    st.none(),
    st.booleans(),
    st.floats(allow_nan=False, allow_infinity=False),
    st.text(max_size=5),
)
VALUE = st.recursive(
    SCALAR,
    lambda children: st.one_of(
        st.lists(children, max_size=3),
        st.dictionaries(KEYS, children, max_size=3),
    ),
    max_leaves=10,
)
DOCUMENT = st.dictionaries(KEYS, VALUE, max_size=4)


def test_scalars_are_right_biased() -> None:
    target = {"x": 1.0}
    update(target, {"x": 2.0})
    assert target == {"x": 2.0}


def test_nested_documents_merge_key_by_key() -> None:
    target = {"k": {"a": 1.0, "b": 2.0}}
    update(target, {"k": {"a": 9.0, "c": 3.0}})
    assert target == {"k": {"a": 9.0, "b": 2.0, "c": 3.0}}


def test_target_only_keys_are_untouched() -> None:
    target = {"keep": "me", "db": {"host": "localhost"}}
    update(target, {"db": {"port": 5432.0}})
    assert target == {"keep": "me", "db": {"host": "localhost", "port": 5432.0}}


def test_document_over_scalar_overwrites_without_error() -> None:
    target = {"service": "disabled"}
    update(target, {"service": {"enabled": True}})
    assert target == {"service": {"enabled": True}}


def test_scalar_over_document_replaces_subtree() -> None:
    target = {"service": {"enabled": True, "port": 80.0}}
    update(target, {"service": None})
    assert target == {"service": None}


def test_arrays_are_replaced_not_concatenated() -> None:
    target = {"tags": ["a", "b"]}
    update(target, {"tags": ["c"]})
    assert target == {"tags": ["c"]}


def test_inserted_values_do_not_alias_source() -> None:
    source = {"new": {"list": [1.0, 2.0]}, "flat": ["x"]}
    target: dict[str, object] = {}
    update(target, source)
    target["new"]["list"].append(3.0)  # type: ignore[index]
    target["flat"].append("y")  # type: ignore[union-attr]
    assert source == {"new": {"list": [1.0, 2.0]}, "flat": ["x"]}


@given(DOCUMENT, DOCUMENT)
def test_source_is_never_mutated(target, source) -> None:
    snapshot = clone_document(source)
    update(target, source)
    assert source == snapshot


@given(DOCUMENT, DOCUMENT)
def test_update_is_idempotent(target, source) -> None:
    once = clone_document(target)
    update(once, source)
    twice = clone_document(once)
    update(twice, source)
    assert twice == once


@given(DOCUMENT, DOCUMENT)
def test_every_source_leaf_wins(target, source) -> None:
    update(target, source)

    def _assert_contains(actual, expected):
        if isinstance(expected, dict):
            assert isinstance(actual, dict)
            for key, value in expected.items():
                assert key in actual
                _assert_contains(actual[key], value)
        else:
            assert actual == expected

    _assert_contains(target, source)
