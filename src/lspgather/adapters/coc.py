# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Adapter for ``CocAction('diagnosticList')`` records."""

from __future__ import annotations

from collections.abc import Mapping

from ..core.models import JsonValue, SourceDiagnostic
from ..core.severity import severity_from_name
from .base import ClientName, DiagnosticAdapter, DiagnosticScope, iter_records


class CocAdapter(DiagnosticAdapter):
    """Read the coc.nvim diagnostic list.

    coc.nvim always returns the diagnostics of every document, each carrying a
    ``location`` (``uri`` + ``range``), the ``file`` path and a severity *name*.
    A buffer scope is applied by comparing ``location.uri`` with the buffer URI
    and the records kept are stamped with the buffer number.
    """

    client = ClientName.COC
    needs_uri = True

    def normalize(self, raw: JsonValue, scope: DiagnosticScope) -> list[SourceDiagnostic]:
        results: list[SourceDiagnostic] = []
        for record in iter_records(raw):
            location = record["location"]
            if not isinstance(location, Mapping):
                raise TypeError(f"location must be an object, got {type(location).__name__}")
            if scope.uri and location.get("uri") != scope.uri:
                continue
            results.append(_convert(record, location, scope.buf_nr))
        return results


def _convert(
    record: Mapping[str, JsonValue],
    location: Mapping[str, JsonValue],
    buf_nr: int | None,
) -> SourceDiagnostic:
    payload = dict(record)
    payload["path"] = record["file"]
    payload["range"] = location["range"]
    payload["severity"] = severity_from_name(record.get("severity"))
    if buf_nr:
        payload["bufNr"] = buf_nr
    return SourceDiagnostic.model_validate(payload)


__all__ = ["CocAdapter"]
