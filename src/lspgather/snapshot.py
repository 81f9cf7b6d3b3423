# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Host bridge answering from a recorded JSON snapshot of client state.

A snapshot looks like::

    {
      "host": "nvim",
      "buffers": {"7": "file:///src/app.ts", "8": "/src/lib.ts"},
      "diagnostics": {
        "nvim-lsp": {"7": [...], "*": [...]},
        "coc.nvim": {"*": [...]}
      },
      "locations": {
        "textDocument/definition": [{"clientId": 1, "result": {...}}]
      }
    }

Diagnostics are stored per client under the requested buffer number, ``"*"``
holding the answer for "every buffer" and serving as fallback. Buffers
recorded by absolute path resolve to their ``file:`` URI.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Final, Self

from pydantic import BaseModel, ConfigDict, Field, ValidationError
from pydantic.alias_generators import to_camel

from .config import ConfigError
from .core.models import JsonValue
from .core.uri import encode_file_uri
from .interfaces import ClientResponse

ALL_BUFFERS_KEY: Final[str] = "*"


class RecordedResponse(BaseModel):
    """Answer of one client to a location request."""

    model_config = ConfigDict(frozen=True, populate_by_name=True, alias_generator=to_camel)

    client_id: int
    result: Any = None


class HostSnapshot(BaseModel):
    """Recorded state of the host editor and its language-server clients."""

    model_config = ConfigDict(frozen=True)

    host: str = "nvim"
    buffers: dict[int, str] = Field(default_factory=dict)
    diagnostics: dict[str, dict[str, Any]] = Field(default_factory=dict)
    locations: dict[str, list[RecordedResponse] | None] = Field(default_factory=dict)


@dataclass(frozen=True, slots=True)
class SnapshotHostBridge:
    """:class:`~lspgather.interfaces.HostBridge` backed by a :class:`HostSnapshot`."""

    snapshot: HostSnapshot

    @classmethod
    def from_json(cls, payload: str) -> Self:
        """Return a bridge for the JSON snapshot ``payload``.

        Raises:
            ConfigError: If ``payload`` is not a valid snapshot.
        """

        try:
            return cls(HostSnapshot.model_validate_json(payload))
        except ValidationError as exc:
            raise ConfigError(f"Invalid host snapshot: {exc}") from exc

    @classmethod
    def from_path(cls, path: Path) -> Self:
        """Return a bridge for the snapshot stored at ``path``."""

        try:
            payload = path.read_text(encoding="utf-8")
        except OSError as exc:
            raise ConfigError(f"Cannot read host snapshot {path}: {exc}") from exc
        return cls.from_json(payload)

    @property
    def host(self) -> str:
        return self.snapshot.host

    async def query_diagnostics(self, client: str, buf_nr: int | None) -> JsonValue:
        recorded = self.snapshot.diagnostics.get(client, {})
        key = str(buf_nr) if buf_nr else ALL_BUFFERS_KEY
        return recorded.get(key, recorded.get(ALL_BUFFERS_KEY))

    async def query_locations(self, method: str, buf_nr: int, win_id: int) -> Sequence[ClientResponse] | None:
        del buf_nr, win_id  # the snapshot records a single cursor position
        recorded = self.snapshot.locations.get(method)
        if recorded is None:
            return None
        return [ClientResponse(client_id=entry.client_id, result=entry.result) for entry in recorded]

    async def resolve_file_uri(self, buf_nr: int) -> str:
        try:
            recorded = self.snapshot.buffers[buf_nr]
        except KeyError:
            raise LookupError(f"Buffer {buf_nr} is not recorded in the snapshot") from None
        return encode_file_uri(recorded) if recorded.startswith("/") else recorded


__all__ = ["ALL_BUFFERS_KEY", "HostSnapshot", "RecordedResponse", "SnapshotHostBridge"]
