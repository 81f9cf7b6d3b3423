# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Diagnostics package exposing sanitising and ordering helpers."""

from __future__ import annotations

from .sanitize import (
    PROTOCOL_FIELDS,
    get_proper_diagnostics,
    sanitize_diagnostic,
    sanitize_diagnostics,
    to_protocol_payload,
)
from .sorting import compare_diagnostic_items, sort_diagnostic_items

__all__ = (
    "PROTOCOL_FIELDS",
    "compare_diagnostic_items",
    "get_proper_diagnostics",
    "sanitize_diagnostic",
    "sanitize_diagnostics",
    "sort_diagnostic_items",
    "to_protocol_payload",
)
