# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Core models, severities and URI helpers."""

from __future__ import annotations

from .models import (
    ActionData,
    CodeDescription,
    Diagnostic,
    DiagnosticItem,
    DiagnosticRelatedInformation,
    Item,
    ItemHighlight,
    JsonValue,
    Location,
    LocationItem,
    LocationLink,
    Position,
    Range,
    SourceDiagnostic,
)
from .severity import SEVERITY_BY_NAME, DiagnosticSeverity, severity_from_name
from .uri import decode_file_uri, display_path, encode_file_uri, is_file_uri

__all__ = [
    "ActionData",
    "CodeDescription",
    "Diagnostic",
    "DiagnosticItem",
    "DiagnosticRelatedInformation",
    "DiagnosticSeverity",
    "Item",
    "ItemHighlight",
    "JsonValue",
    "Location",
    "LocationItem",
    "LocationLink",
    "Position",
    "Range",
    "SEVERITY_BY_NAME",
    "SourceDiagnostic",
    "decode_file_uri",
    "display_path",
    "encode_file_uri",
    "is_file_uri",
    "severity_from_name",
]
