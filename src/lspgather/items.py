# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Build display items from diagnostics and locations."""

from __future__ import annotations

from .core.models import ActionData, DiagnosticItem, Location, LocationItem, SourceDiagnostic
from .core.uri import display_path
from .errors import InvalidLocationError


def first_line(text: str) -> str:
    """Return ``text`` cut at its first newline."""

    return text.split("\n", 1)[0]


def diagnostic_to_item(diagnostic: SourceDiagnostic) -> DiagnosticItem:
    """Return the item listing ``diagnostic`` and jumping to its start position."""

    start = diagnostic.range.start
    return DiagnosticItem(
        word=first_line(diagnostic.message),
        action=ActionData(
            path=diagnostic.path,
            buf_nr=diagnostic.buf_nr,
            line_nr=start.line + 1,
            col=start.character + 1,
        ),
        data=diagnostic,
    )


def location_to_item(location: Location) -> LocationItem:
    """Return the item listing ``location`` as ``path:line:col``.

    Raises:
        InvalidLocationError: If the ``file:`` URI of ``location`` cannot be decoded.
    """

    try:
        path = display_path(location.uri)
    except ValueError as exc:
        raise InvalidLocationError(f"Undecodable location URI {location.uri!r}: {exc}") from exc
    start = location.range.start
    line_nr, col = start.line + 1, start.character + 1
    return LocationItem(
        word=path,
        display=f"{path}:{line_nr}:{col}",
        action=ActionData(path=path, line_nr=line_nr, col=col),
        data=location,
    )


__all__ = ["diagnostic_to_item", "first_line", "location_to_item"]
