# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Strip backend-specific fields from diagnostics."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any, Final

from ..adapters import ClientName, get_adapter
from ..core.models import Diagnostic
from ..interfaces import HostBridge

PROTOCOL_FIELDS: Final[frozenset[str]] = frozenset(Diagnostic.model_fields)


def sanitize_diagnostic(diagnostic: Diagnostic) -> Diagnostic:
    """Return a copy of ``diagnostic`` holding only protocol fields.

    Backends attach their own keys (``lnum``, ``bufnr``, ``file`` ...) and the
    adapters add ``bufNr``/``path``; none of them survive. Fields that were never
    set on ``diagnostic`` stay unset on the copy.
    """

    payload = diagnostic.model_dump(include=set(PROTOCOL_FIELDS), exclude_unset=True)
    return Diagnostic.model_validate(payload)


def sanitize_diagnostics(diagnostics: Iterable[Diagnostic]) -> list[Diagnostic]:
    """Return :func:`sanitize_diagnostic` applied to each of ``diagnostics``."""

    return [sanitize_diagnostic(diagnostic) for diagnostic in diagnostics]


def to_protocol_payload(diagnostic: Diagnostic) -> dict[str, Any]:
    """Return the camelCase wire mapping of the sanitised ``diagnostic``."""

    return sanitize_diagnostic(diagnostic).to_dict()


async def get_proper_diagnostics(
    client: ClientName | str,
    bridge: HostBridge,
    buf_nr: int | None,
) -> list[Diagnostic]:
    """Collect the diagnostics of ``buf_nr`` from ``client`` in strict protocol shape.

    Args:
        client: Backend to read diagnostics from.
        bridge: Host bridge giving access to the client state.
        buf_nr: Resolved buffer number, or ``None`` for every buffer.

    Returns:
        list[Diagnostic]: Sanitised diagnostics suitable for republishing.
    """

    diagnostics = await get_adapter(client).collect(bridge, buf_nr)
    return sanitize_diagnostics(diagnostics)


__all__ = [
    "PROTOCOL_FIELDS",
    "get_proper_diagnostics",
    "sanitize_diagnostic",
    "sanitize_diagnostics",
    "to_protocol_payload",
]
