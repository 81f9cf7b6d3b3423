# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Source listing the diagnostics of one or more buffers."""

from __future__ import annotations

from collections.abc import AsyncIterator
from dataclasses import dataclass
from typing import ClassVar

from ..adapters import get_adapter
from ..config import DiagnosticSourceParams, resolve_buffers
from ..core.models import DiagnosticItem, SourceDiagnostic
from ..diagnostics import sort_diagnostic_items
from ..errors import LspGatherError
from ..interfaces import ErrorReporter, HostBridge, ItemDecorator, SourceContext, passthrough_decorator
from ..items import diagnostic_to_item
from .tasks import gather_ordered


@dataclass(slots=True)
class DiagnosticSource:
    """Gather, decorate and sort diagnostic items for the caller's context.

    Failures end the request: they go to ``reporter`` and no batch is emitted.
    """

    bridge: HostBridge
    reporter: ErrorReporter
    decorator: ItemDecorator = passthrough_decorator

    name: ClassVar[str] = "lsp_diagnostic"

    @staticmethod
    def params() -> DiagnosticSourceParams:
        """Return the default parameters."""

        return DiagnosticSourceParams()

    async def gather(
        self,
        context: SourceContext,
        params: DiagnosticSourceParams | None = None,
    ) -> AsyncIterator[list[DiagnosticItem]]:
        """Yield the sorted diagnostic items of the requested buffers as one batch."""

        try:
            items = await self.build_items(context, params or self.params())
        except LspGatherError as exc:
            self.reporter.error(exc, self.name)
            return
        yield items

    async def build_items(self, context: SourceContext, params: DiagnosticSourceParams) -> list[DiagnosticItem]:
        """Return the decorated items in display order.

        Raises:
            LspGatherError: If the client is unsupported or a backend query fails.
        """

        diagnostics = await self.collect_diagnostics(context, params)
        items = await gather_ordered(self._decorate(diagnostic_to_item(diagnostic)) for diagnostic in diagnostics)
        return sort_diagnostic_items(items, context.buf_nr)

    async def collect_diagnostics(
        self,
        context: SourceContext,
        params: DiagnosticSourceParams,
    ) -> list[SourceDiagnostic]:
        """Return the diagnostics of every scoped buffer, concatenated in scope order."""

        adapter = get_adapter(params.client_name)
        buffers = resolve_buffers(params.buffer, context.buf_nr)
        per_buffer = await gather_ordered(adapter.collect(self.bridge, buf_nr) for buf_nr in buffers)
        return [diagnostic for batch in per_buffer for diagnostic in batch]

    async def _decorate(self, item: DiagnosticItem) -> DiagnosticItem:
        try:
            return await self.decorator(item)
        except Exception as exc:  # pylint: disable=broad-exception-caught -- decorators are host-provided
            self.reporter.warn(f"Decoration failed for {item.word!r}: {exc}", self.name)
            return item


__all__ = ["DiagnosticSource"]
