"""Application-layer ports describing adapter responsibilities.

Purpose
-------
Define the structural contracts for the text and storage collaborators so the
composition root can orchestrate behaviour without depending on concrete
implementations.

Contents
--------
* :class:`DocumentCodec` – converts between JSON text and documents.
* :class:`DocumentStore` – persists one document per file.

System Role
-----------
The path engine never performs I/O; everything that touches text or disk goes
through one of these protocols.
"""

from __future__ import annotations

from typing import Any, Mapping, Protocol, runtime_checkable


@runtime_checkable
class DocumentCodec(Protocol):
    """Parse JSON text into documents and render them back.

    Why
    ----
    Keep the text format swappable for tests and alternative encoders.
    """

    def parse(self, text: str) -> dict[str, Any]:
        """Return the document encoded by *text* or raise ``ParseError``."""

    def render(self, document: Mapping[str, Any], *, indent: int | None = None) -> str:
        """Return JSON text for *document* or raise ``RenderError``."""


@runtime_checkable
class DocumentStore(Protocol):
    """Read and write documents addressed by filesystem path."""

    def load(self, path: str) -> dict[str, Any]:
        """Read *path* or raise ``ConfigIOError`` / ``ParseError``."""

    def dump(self, document: Mapping[str, Any], path: str, *, indent: int | None = None) -> None:
        """Overwrite *path* with *document* or raise ``ConfigIOError``."""
