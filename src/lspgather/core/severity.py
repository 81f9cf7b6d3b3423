# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Severity related types and helpers."""

from __future__ import annotations

from enum import IntEnum
from typing import Final


class DiagnosticSeverity(IntEnum):
    """Protocol severity ordinals, lower values are more important."""

    ERROR = 1
    WARNING = 2
    INFORMATION = 3
    HINT = 4


SEVERITY_BY_NAME: Final[dict[str, DiagnosticSeverity]] = {
    "Error": DiagnosticSeverity.ERROR,
    "Warning": DiagnosticSeverity.WARNING,
    "Info": DiagnosticSeverity.INFORMATION,
    "Hint": DiagnosticSeverity.HINT,
}

DEFAULT_SORT_SEVERITY: Final[int] = int(DiagnosticSeverity.ERROR)


def severity_from_name(label: object) -> DiagnosticSeverity | None:
    """Return the ordinal for a severity *name* such as ``"Warning"``.

    Names are matched exactly; anything unknown yields ``None`` so the
    diagnostic is treated as carrying no severity.
    """

    if not isinstance(label, str):
        return None
    return SEVERITY_BY_NAME.get(label)


def sort_rank(severity: int | None) -> int:
    """Return the rank used when ordering diagnostics by severity."""

    return DEFAULT_SORT_SEVERITY if severity is None else int(severity)


__all__ = [
    "DEFAULT_SORT_SEVERITY",
    "SEVERITY_BY_NAME",
    "DiagnosticSeverity",
    "severity_from_name",
    "sort_rank",
]
