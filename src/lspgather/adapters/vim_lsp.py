# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Adapter for the diagnostics state of vim-lsp."""

from __future__ import annotations

from collections.abc import Mapping

from ..core.models import JsonValue, SourceDiagnostic
from ..core.uri import decode_file_uri
from .base import ClientName, DiagnosticAdapter, DiagnosticScope, iter_records, mapping_values


class VimLspAdapter(DiagnosticAdapter):
    """Flatten vim-lsp ``publishDiagnostics`` notifications.

    With a buffer scope the host returns ``{server: notification}`` for the
    buffer's URI; without one it returns ``{uri: {server: notification}}``.
    Every notification holds ``params.uri`` and ``params.diagnostics``; the
    decoded path, and the buffer number when scoped, are stamped on each record.
    """

    client = ClientName.VIM_LSP

    def normalize(self, raw: JsonValue, scope: DiagnosticScope) -> list[SourceDiagnostic]:
        if scope.buf_nr:
            notifications = mapping_values(raw)
        else:
            notifications = [entry for by_server in mapping_values(raw) for entry in mapping_values(by_server)]
        results: list[SourceDiagnostic] = []
        for notification in notifications:
            results.extend(_flatten(notification, scope.buf_nr))
        return results


def _flatten(notification: JsonValue, buf_nr: int | None) -> list[SourceDiagnostic]:
    if not isinstance(notification, Mapping):
        raise TypeError(f"notification must be an object, got {type(notification).__name__}")
    params = notification["params"]
    if not isinstance(params, Mapping):
        raise TypeError("notification params must be an object")
    uri = params["uri"]
    if not isinstance(uri, str):
        raise TypeError("notification uri must be a string")
    path = decode_file_uri(uri)
    stamp: dict[str, JsonValue] = {"path": path}
    if buf_nr:
        stamp["bufNr"] = buf_nr
    return [SourceDiagnostic.model_validate({**diag, **stamp}) for diag in iter_records(params["diagnostics"])]


__all__ = ["VimLspAdapter"]
