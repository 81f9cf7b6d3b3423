# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Normalise language-server client results into sortable list items."""

from __future__ import annotations

from .adapters import ClientName, get_adapter
from .config import ConfigError, DiagnosticSourceParams, LocationSourceParams
from .core.models import Diagnostic, DiagnosticItem, Location, LocationItem, SourceDiagnostic
from .diagnostics import get_proper_diagnostics, sanitize_diagnostic, sort_diagnostic_items
from .errors import (
    BackendQueryError,
    InvalidLocationError,
    LspGatherError,
    UnsupportedClientError,
    UnsupportedMethodError,
)
from .interfaces import SourceContext
from .locations import SupportedMethod, resolve_location
from .orchestration import DiagnosticSource, LocationSource, collect_items

__all__ = [
    "BackendQueryError",
    "ClientName",
    "ConfigError",
    "Diagnostic",
    "DiagnosticItem",
    "DiagnosticSource",
    "DiagnosticSourceParams",
    "InvalidLocationError",
    "Location",
    "LocationItem",
    "LocationSource",
    "LocationSourceParams",
    "LspGatherError",
    "SourceContext",
    "SourceDiagnostic",
    "SupportedMethod",
    "UnsupportedClientError",
    "UnsupportedMethodError",
    "collect_items",
    "get_adapter",
    "get_proper_diagnostics",
    "resolve_location",
    "sanitize_diagnostic",
    "sort_diagnostic_items",
]
