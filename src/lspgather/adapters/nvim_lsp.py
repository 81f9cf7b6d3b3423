# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Adapter for diagnostics kept by the built-in Neovim LSP client."""

from __future__ import annotations

from collections.abc import Mapping

from ..core.models import JsonValue, SourceDiagnostic
from .base import ClientName, DiagnosticAdapter, DiagnosticScope, iter_records


class NvimLspAdapter(DiagnosticAdapter):
    """Read ``vim.diagnostic.get()`` records.

    Records use zero-based ``lnum``/``col``/``end_lnum``/``end_col`` offsets and a
    ``bufnr`` key; the protocol ``range`` is rebuilt from the four offsets.
    """

    client = ClientName.NVIM_LSP
    unsupported_hosts = frozenset({"vim"})

    def normalize(self, raw: JsonValue, scope: DiagnosticScope) -> list[SourceDiagnostic]:
        del scope  # the host already restricted the records to the requested buffer
        return [_convert(record) for record in iter_records(raw)]


def _convert(record: Mapping[str, JsonValue]) -> SourceDiagnostic:
    payload = dict(record)
    payload["range"] = {
        "start": {"line": record["lnum"], "character": record["col"]},
        "end": {"line": record["end_lnum"], "character": record["end_col"]},
    }
    payload["bufNr"] = record["bufnr"]
    return SourceDiagnostic.model_validate(payload)


__all__ = ["NvimLspAdapter"]
