# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Shared adapter infrastructure and helper utilities."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Awaitable, Iterator, Mapping, Sequence
from dataclasses import dataclass
from enum import StrEnum
from typing import ClassVar, TypeVar

from pydantic import ValidationError

from ..core.models import JsonValue, SourceDiagnostic
from ..errors import BackendQueryError, LspGatherError, UnsupportedClientError
from ..interfaces import HostBridge

T = TypeVar("T")


class ClientName(StrEnum):
    """Language-server client backends diagnostics can be read from."""

    NVIM_LSP = "nvim-lsp"
    COC = "coc.nvim"
    VIM_LSP = "vim-lsp"

    @classmethod
    def parse(cls, value: str) -> ClientName:
        """Return the member named by ``value``.

        Raises:
            UnsupportedClientError: If ``value`` names no known client.
        """

        try:
            return cls(value)
        except ValueError as exc:
            raise UnsupportedClientError(f"Unknown client name: {value!r}") from exc


@dataclass(frozen=True, slots=True)
class DiagnosticScope:
    """Resolved buffer scope handed to :meth:`DiagnosticAdapter.normalize`.

    ``buf_nr`` is ``None`` when diagnostics of every buffer are requested; ``uri``
    is only filled for adapters that filter records by document URI.
    """

    buf_nr: int | None = None
    uri: str | None = None


def iter_records(value: JsonValue) -> Iterator[Mapping[str, JsonValue]]:
    """Yield mapping items from ``value`` when it is a sequence of dict-like objects."""

    if isinstance(value, Sequence) and not isinstance(value, (str, bytes, bytearray)):
        for item in value:
            if isinstance(item, Mapping):
                yield item


def mapping_values(value: JsonValue) -> list[JsonValue]:
    """Return the values of ``value`` when it is a mapping, otherwise an empty list."""

    if isinstance(value, Mapping):
        return list(value.values())
    return []


async def query_bridge(call: Awaitable[T], *, what: str) -> T:
    """Await a host bridge ``call`` and translate its failures into :class:`BackendQueryError`."""

    try:
        return await call
    except LspGatherError:
        raise
    except Exception as exc:  # pylint: disable=broad-exception-caught -- the bridge is an opaque RPC boundary
        raise BackendQueryError(f"{what} failed: {exc}") from exc


class DiagnosticAdapter(ABC):
    """Convert one backend's diagnostic state into :class:`SourceDiagnostic` records."""

    client: ClassVar[ClientName]
    needs_uri: ClassVar[bool] = False
    unsupported_hosts: ClassVar[frozenset[str]] = frozenset()

    def ensure_supported(self, host: str) -> None:
        """Raise :class:`UnsupportedClientError` when the client cannot run on ``host``."""

        if host in self.unsupported_hosts:
            raise UnsupportedClientError(f"Client '{self.client}' is not available in {host}")

    @abstractmethod
    def normalize(self, raw: JsonValue, scope: DiagnosticScope) -> list[SourceDiagnostic]:
        """Return canonical diagnostics extracted from the backend payload ``raw``.

        Args:
            raw: Payload returned by the host bridge for this client.
            scope: Buffer scope the payload was requested for.

        Returns:
            list[SourceDiagnostic]: Diagnostics in backend order.
        """

    async def collect(self, bridge: HostBridge, buf_nr: int | None) -> list[SourceDiagnostic]:
        """Query ``bridge`` for the diagnostics of ``buf_nr`` and normalise them.

        Args:
            bridge: Host bridge giving access to the client state.
            buf_nr: Resolved buffer number, or ``None`` for every buffer.

        Returns:
            list[SourceDiagnostic]: Canonical diagnostics for the scope.

        Raises:
            UnsupportedClientError: If the client is unavailable on the host.
            BackendQueryError: If the bridge fails or the payload is malformed.
        """

        self.ensure_supported(bridge.host)
        uri: str | None = None
        if buf_nr and self.needs_uri:
            uri = await query_bridge(bridge.resolve_file_uri(buf_nr), what=f"Resolving URI of buffer {buf_nr}")
        raw = await query_bridge(
            bridge.query_diagnostics(str(self.client), buf_nr),
            what=f"Querying {self.client} diagnostics",
        )
        if raw is None:
            return []
        try:
            return self.normalize(raw, DiagnosticScope(buf_nr=buf_nr, uri=uri))
        except (KeyError, TypeError, ValueError) as exc:
            # ValidationError is a ValueError subclass.
            kind = "invalid" if isinstance(exc, ValidationError) else "malformed"
            raise BackendQueryError(f"{self.client} returned {kind} diagnostics: {exc}") from exc


__all__ = [
    "ClientName",
    "DiagnosticAdapter",
    "DiagnosticScope",
    "iter_records",
    "mapping_values",
    "query_bridge",
]
