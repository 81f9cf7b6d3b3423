# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Gather sources wiring adapters, item builders and sorting together."""

from __future__ import annotations

from .diagnostics import DiagnosticSource
from .locations import LocationSource
from .tasks import collect_items, gather_ordered

__all__ = ["DiagnosticSource", "LocationSource", "collect_items", "gather_ordered"]
