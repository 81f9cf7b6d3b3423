# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Core data models shared across the lspgather package."""

from __future__ import annotations

from typing import Any, TypeAlias

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from .severity import DiagnosticSeverity

JsonScalar: TypeAlias = str | int | float | bool | None
JsonValue: TypeAlias = "JsonScalar | list[JsonValue] | dict[str, JsonValue]"


class WireModel(BaseModel):
    """Immutable record exchanged with backends using camelCase wire names."""

    model_config = ConfigDict(
        frozen=True,
        populate_by_name=True,
        alias_generator=to_camel,
    )

    def to_dict(self) -> dict[str, Any]:
        """Return the JSON-compatible wire representation without unset ``None`` values."""

        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


class Position(WireModel):
    """Zero-based line and character offset inside a document."""

    line: int
    character: int


class Range(WireModel):
    """Start and end positions of a text span."""

    start: Position
    end: Position


class Location(WireModel):
    """Point location within a resource identified by ``uri``."""

    uri: str
    range: Range


class LocationLink(WireModel):
    """Link-style location returned by servers supporting ``linkSupport``."""

    target_uri: str
    target_selection_range: Range
    target_range: Range | None = None
    origin_selection_range: Range | None = None


class CodeDescription(WireModel):
    """Link describing a diagnostic code."""

    href: str


class DiagnosticRelatedInformation(WireModel):
    """Related message and location attached to a diagnostic."""

    location: Location
    message: str


class Diagnostic(WireModel):
    """Diagnostic restricted to the protocol-defined field set."""

    model_config = ConfigDict(extra="ignore")

    range: Range
    message: str
    severity: DiagnosticSeverity | None = None
    code: int | str | None = None
    code_description: CodeDescription | None = None
    source: str | None = None
    tags: list[int] | None = None
    related_information: list[DiagnosticRelatedInformation] | None = None
    data: Any = None


class SourceDiagnostic(Diagnostic):
    """Diagnostic produced by a backend adapter.

    Carries the buffer number and/or file path of the originating document and
    keeps whatever extra keys the backend attached to the record.
    """

    model_config = ConfigDict(extra="allow")

    buf_nr: int | None = None
    path: str | None = None


class ActionData(WireModel):
    """Navigation payload attached to an item; line and column are 1-based."""

    path: str | None = None
    buf_nr: int | None = None
    line_nr: int | None = None
    col: int | None = None


class ItemHighlight(WireModel):
    """Highlight applied to a byte span of an item's display text."""

    name: str
    hl_group: str
    col: int
    width: int


class Item(WireModel):
    """Display record handed to the list UI."""

    word: str
    display: str | None = None
    highlights: list[ItemHighlight] | None = None
    action: ActionData
    data: Any = None


class DiagnosticItem(Item):
    """Item built from a :class:`SourceDiagnostic`."""

    data: SourceDiagnostic


class LocationItem(Item):
    """Item built from a resolved :class:`Location`."""

    data: Location


__all__ = [
    "ActionData",
    "CodeDescription",
    "Diagnostic",
    "DiagnosticItem",
    "DiagnosticRelatedInformation",
    "Item",
    "ItemHighlight",
    "JsonScalar",
    "JsonValue",
    "Location",
    "LocationItem",
    "LocationLink",
    "Position",
    "Range",
    "SourceDiagnostic",
    "WireModel",
]
