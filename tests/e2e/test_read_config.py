"""End-to-end coverage for the composition root.

Exercises reading, patching, merging, and writing real files the way a consuming
application would, including the failure modes surfaced to callers.
"""

from __future__ import annotations

import logging
from pathlib import Path

import pytest

from lib_json_config import (
    Config,
    ConfigIOError,
    ParseError,
    Translation,
    config_from_string,
    read_config,
    render_config,
    write_config,
)
from lib_json_config.observability import TRACE_ID, bind_trace_id


def test_write_then_read_round_trip(tmp_path: Path) -> None:
    """Documents written to disk should read back unchanged."""

    path = tmp_path / "config.json"
    original = Config({"service": {"timeout": 5.0, "hosts": ["a", "b"]}, "debug": None, "name": "demo"})
    write_config(original, str(path))
    assert read_config(str(path)) == original


def test_empty_config_round_trip(tmp_path: Path) -> None:
    path = tmp_path / "empty.json"
    write_config(Config(), str(path))
    assert path.read_text(encoding="utf-8") == "{}"
    assert read_config(str(path)) == Config()


def test_read_patch_write_workflow(tmp_path: Path) -> None:
    """A typical update cycle: read defaults, overlay user values, store the result."""

    defaults = tmp_path / "defaults.json"
    defaults.write_text('{"api": {"url": "https://api.demo", "retries": 3}, "verbose": false}', encoding="utf-8")
    config = read_config(str(defaults))
    config.merge(config_from_string('"api": {"retries": 5}, "verbose": true'))
    config.assign("token-123", "api", "auth", "token")

    output = tmp_path / "effective.json"
    write_config(config, str(output), indent=2)

    reread = read_config(str(output))
    assert reread.lookup("api", "retries") == (5.0, True)
    assert reread.lookup("api", "auth", "token") == ("token-123", True)
    assert reread.lookup("verbose") == (True, True)


def test_translation_between_files(tmp_path: Path) -> None:
    source = tmp_path / "settings.json"
    source.write_text('{"a": 1, "b": {"c": 3, "d": 4}}', encoding="utf-8")
    destination = tmp_path / "payload.json"
    destination.write_text('{"alpha": 0, "beta": {"gamma": 7, "delta": 4}}', encoding="utf-8")

    payload = read_config(str(destination))
    Translation({"a": "alpha", "b/c": "beta/gamma"}).apply(read_config(str(source)), payload, "/")
    write_config(payload, str(destination))

    assert destination.read_text(encoding="utf-8") == '{"alpha":1,"beta":{"delta":4,"gamma":3}}'


def test_read_missing_file_raises_io_error(tmp_path: Path) -> None:
    with pytest.raises(ConfigIOError):
        read_config(str(tmp_path / "missing.json"))


def test_read_malformed_file_raises_parse_error(tmp_path: Path) -> None:
    path = tmp_path / "config.json"
    path.write_text('{"a": 1,}', encoding="utf-8")
    with pytest.raises(ParseError):
        read_config(str(path))


def test_config_from_string_variants() -> None:
    assert config_from_string('{"a": 1}') == {"a": 1.0}
    assert config_from_string('"a": 1') == {"a": 1.0}
    assert config_from_string("  ") == {}
    with pytest.raises(ParseError):
        config_from_string('"a" 1')


def test_render_config_is_canonical() -> None:
    assert render_config({"b": [2.0], "a": 1.5}) == '{"a":1.5,"b":[2]}'


def test_entry_points_clear_trace_id_and_log(tmp_path: Path, caplog: pytest.LogCaptureFixture) -> None:
    caplog.set_level(logging.DEBUG, logger="lib_json_config")
    bind_trace_id("stale")
    path = tmp_path / "config.json"
    write_config({"a": 1.0}, str(path))
    assert TRACE_ID.get() is None
    read_config(str(path))
    messages = [record.getMessage() for record in caplog.records]
    assert "config_written" in messages
    assert "config_read" in messages
    read_record = next(record for record in caplog.records if record.getMessage() == "config_read")
    assert getattr(read_record, "context")["path"] == str(path)
    assert getattr(read_record, "context")["trace_id"] is None
