"""JSON file persistence for configuration documents.

Purpose
-------
Read one document per file and overwrite files with rendered documents. The
adapter is a small wrapper around :mod:`pathlib` and the JSON codec so error
handling and observability policies live in one place.

Contents
--------
* :class:`JSONFileStore` – satisfies
  :class:`~lib_json_config.application.ports.DocumentStore`.

System Role
-----------
Invoked by :mod:`lib_json_config.core`. Writes are plain overwrites: there is no
temporary file, atomic rename, or backup.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Mapping

from ...application.ports import DocumentCodec
from ...domain.errors import ConfigIOError, ParseError, RenderError
from ...observability import log_debug, log_error
from ..json_codec.default import JSONCodec


class JSONFileStore:
    """Load and dump documents stored as UTF-8 JSON files."""

    def __init__(self, *, codec: DocumentCodec | None = None) -> None:
        """Initialise the store with a specific *codec* for testability.

        Parameters
        ----------
        codec:
            Text codec to use. Defaults to :class:`JSONCodec`.
        """

        self._codec = codec or JSONCodec()

    def load(self, path: str) -> dict[str, Any]:
        """Return the document stored at *path*.

        Raises
        ------
        ConfigIOError
            When the file cannot be read.
        ParseError
            When the bytes are not UTF-8 or not a JSON object.

        Examples
        --------
        >>> from tempfile import NamedTemporaryFile
        >>> tmp = NamedTemporaryFile('w', delete=False, encoding='utf-8', suffix='.json')
        >>> _ = tmp.write('{"enabled": true}')
        >>> tmp.close()
        >>> JSONFileStore().load(tmp.name)["enabled"]
        True
        >>> Path(tmp.name).unlink()
        """

        payload = self._read(path)
        try:
            text = payload.decode("utf-8")
        except UnicodeDecodeError as exc:
            log_error("config_file_invalid", operation="read", path=path, error=str(exc))
            raise ParseError(f"File {path} is not valid UTF-8: {exc}") from exc
        try:
            document = self._codec.parse(text)
        except ParseError as exc:
            log_error("config_file_invalid", operation="read", path=path, error=str(exc))
            raise ParseError(f"Invalid JSON in {path}: {exc}") from exc
        log_debug("config_file_loaded", operation="read", path=path, keys=len(document))
        return document

    def dump(self, document: Mapping[str, Any], path: str, *, indent: int | None = None) -> None:
        """Overwrite *path* with the JSON rendering of *document*.

        Rendering happens before the file is opened, so a :class:`RenderError`
        leaves any existing file untouched.
        """

        text = self._codec.render(document, indent=indent)
        try:
            payload = text.encode("utf-8")
        except UnicodeEncodeError as exc:
            raise RenderError(f"Unable to encode config for {path}: {exc}") from exc
        try:
            Path(path).write_bytes(payload)
        except OSError as exc:
            log_error("config_file_error", operation="write", path=path, error=str(exc))
            raise ConfigIOError(f"Unable to write config file {path}: {exc}") from exc
        log_debug("config_file_written", operation="write", path=path, size=len(payload))

    def _read(self, path: str) -> bytes:
        """Read *path* as bytes, raising :class:`ConfigIOError` on failure."""

        try:
            payload = Path(path).read_bytes()
        except OSError as exc:
            log_error("config_file_error", operation="read", path=path, error=str(exc))
            raise ConfigIOError(f"Unable to read config file {path}: {exc}") from exc
        log_debug("config_file_read", operation="read", path=path, size=len(payload))
        return payload
