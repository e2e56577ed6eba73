"""Structural type comparison between a document and a reference shape.

Purpose
-------
Tell callers which keys of a document carry a different kind of value than a
reference document, and which keys the reference does not know at all. Typical
use: checking a user-supplied file against a bundled template before sending it
to an API.

Contents
    - ``TypeReport``: accumulated findings.
    - ``compare_types``: public entry point.
    - ``_compare_into``: recursive walk that appends into a report.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from ..domain.values import ValueKind, kind_of

PATH_SEPARATOR = ":"


@dataclass(slots=True)
class TypeReport:
    """Findings of :func:`compare_types`.

    Attributes
    ----------
    mismatches:
        Entries formatted ``"<path>:<subject kind>!=<reference kind>"``.
    not_found:
        Colon-joined paths present in the subject but not the reference.
    """

    mismatches: list[str] = field(default_factory=list)
    not_found: list[str] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        """``True`` when the subject conforms to the reference shape."""

        return not self.mismatches and not self.not_found


def compare_types(subject: Mapping[str, Any], reference: Mapping[str, Any], prefix: str = "") -> TypeReport:
    """Compare the value kinds in *subject* against *reference*.

    What
    ----
    Walks *subject* only; keys that exist solely in *reference* are never
    reported. A key missing from the reference, or holding a different kind,
    stops the descent for that branch. Matching nested documents are compared
    recursively. All numbers share one kind, so ``1`` and ``1.5`` agree.

    Parameters
    ----------
    subject:
        Document under inspection.
    reference:
        Document describing the expected shape. Never modified.
    prefix:
        Path prepended to every reported key.

    Examples
    --------
    >>> report = compare_types({"d": True, "extra": 1, "n": {"x": "s"}}, {"d": 0, "n": {"x": 2}})
    >>> report.mismatches
    ['d:bool!=number', 'n:x:string!=number']
    >>> report.not_found
    ['extra']
    """

    report = TypeReport()
    _compare_into(report, subject, reference, prefix)
    return report


def _compare_into(report: TypeReport, subject: Mapping[str, Any], reference: Mapping[str, Any], prefix: str) -> None:
    for key, value in subject.items():
        path = f"{prefix}{PATH_SEPARATOR}{key}" if prefix else key
        if key not in reference:
            report.not_found.append(path)
            continue
        expected = reference[key]
        subject_kind = kind_of(value)
        reference_kind = kind_of(expected)
        if subject_kind is not reference_kind:
            report.mismatches.append(f"{path}:{subject_kind.value}!={reference_kind.value}")
        elif subject_kind is ValueKind.DOCUMENT:
            _compare_into(report, value, expected, path)
