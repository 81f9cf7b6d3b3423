# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Public adapter exports for converting client state into diagnostics."""

from __future__ import annotations

from .base import ClientName, DiagnosticAdapter, DiagnosticScope, query_bridge
from .coc import CocAdapter
from .nvim_lsp import NvimLspAdapter
from .registry import ADAPTERS, get_adapter
from .vim_lsp import VimLspAdapter

__all__ = [
    "ADAPTERS",
    "ClientName",
    "CocAdapter",
    "DiagnosticAdapter",
    "DiagnosticScope",
    "NvimLspAdapter",
    "VimLspAdapter",
    "get_adapter",
    "query_bridge",
]
