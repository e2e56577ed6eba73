from __future__ import annotations

from lib_json_config.application.matching import unique_key_match_of


def test_ambiguous_shortcut_returns_empty_string() -> None:
    assert unique_key_match_of({"key1": 1.0, "key2": 2.0}, "k") == ""


def test_unique_prefix_returns_original_key() -> None:
    assert unique_key_match_of({"key1": 1.0, "other": 2.0}, "k") == "key1"


def test_no_match_returns_empty_string() -> None:
    assert unique_key_match_of({"alpha": 1.0}, "beta") == ""
    assert unique_key_match_of({}, "anything") == ""


def test_matching_is_case_insensitive_both_ways() -> None:
    document = {"FrobLevel": 1.0, "other": 2.0}
    assert unique_key_match_of(document, "frob") == "FrobLevel"
    assert unique_key_match_of(document, "FROBL") == "FrobLevel"


def test_lowercasing_maps_each_character_to_one_character() -> None:
    assert unique_key_match_of({"İstanbul": 1.0, "Ankara": 2.0}, "ist") == "İstanbul"
    assert unique_key_match_of({"İstanbul": 1.0}, "İST") == "İstanbul"


def test_ignored_characters_are_removed_before_comparing() -> None:
    assert unique_key_match_of({"_x_key_": 1.0}, "xkey", ["_"]) == "_x_key_"
    assert unique_key_match_of({"max-retries": 1.0, "max_delay": 2.0}, "max_r", "-_") == "max-retries"


def test_ignored_characters_are_stripped_from_shortcut_too() -> None:
    assert unique_key_match_of({"timeout": 1.0}, "t_i_m_e", "_") == "timeout"


def test_without_ignore_set_separators_are_significant() -> None:
    assert unique_key_match_of({"_x_key_": 1.0}, "xkey") == ""


def test_exact_name_still_ambiguous_when_it_prefixes_another_key() -> None:
    assert unique_key_match_of({"port": 1.0, "portal": 2.0}, "port") == ""


def test_empty_shortcut_matches_a_lone_key() -> None:
    assert unique_key_match_of({"only": 1.0}, "") == "only"
    assert unique_key_match_of({"one": 1.0, "two": 2.0}, "") == ""


def test_empty_key_counts_towards_ambiguity() -> None:
    assert unique_key_match_of({"": 1.0, "name": 2.0}, "") == ""


def test_nested_keys_are_not_searched() -> None:
    assert unique_key_match_of({"service": {"timeout": 1.0}}, "time") == ""
