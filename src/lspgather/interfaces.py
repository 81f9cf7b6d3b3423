# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Collaborator interfaces consumed by adapters and orchestrators."""

# pylint: disable=too-few-public-methods -- Protocol definitions intentionally expose minimal method surfaces.

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from typing import Any, Protocol, TypeVar, runtime_checkable

from .core.models import Item, JsonValue

ItemT = TypeVar("ItemT", bound=Item)


@dataclass(frozen=True, slots=True)
class SourceContext:
    """Editor state of the caller issuing a gather request."""

    buf_nr: int
    win_id: int = 0


@dataclass(frozen=True, slots=True)
class ClientResponse:
    """Result returned by one language-server client for a location request."""

    client_id: int
    result: JsonValue


@runtime_checkable
class HostBridge(Protocol):
    """RPC bridge into the editor hosting the language-server clients."""

    @property
    def host(self) -> str:
        """Return the host editor name (``"nvim"`` or ``"vim"``)."""

        raise NotImplementedError

    async def query_diagnostics(self, client: str, buf_nr: int | None) -> JsonValue:
        """Return the raw diagnostic state kept by ``client`` for ``buf_nr`` (``None`` = all)."""

        raise NotImplementedError

    async def query_locations(
        self,
        method: str,
        buf_nr: int,
        win_id: int,
    ) -> Sequence[ClientResponse] | None:
        """Issue ``method`` at the cursor of ``win_id`` and return per-client responses."""

        raise NotImplementedError

    async def resolve_file_uri(self, buf_nr: int) -> str:
        """Return the ``file:`` URI of the document loaded in ``buf_nr``."""

        raise NotImplementedError


@runtime_checkable
class ErrorReporter(Protocol):
    """Side channel receiving failures that never reach the item stream."""

    def error(self, exc: BaseException, source: str) -> None:
        """Report ``exc`` raised while running ``source``."""

        raise NotImplementedError

    def warn(self, message: str, source: str) -> None:
        """Report a non-fatal condition encountered by ``source``."""

        raise NotImplementedError


@runtime_checkable
class ItemDecorator(Protocol):
    """Attach icons and highlights to an item before it is emitted."""

    async def __call__(self, item: Any) -> Any:
        """Return ``item`` or a decorated copy of it."""

        raise NotImplementedError


async def passthrough_decorator(item: ItemT) -> ItemT:
    """Return ``item`` unchanged."""

    return item


__all__ = [
    "ClientResponse",
    "ErrorReporter",
    "HostBridge",
    "ItemDecorator",
    "SourceContext",
    "passthrough_decorator",
]
