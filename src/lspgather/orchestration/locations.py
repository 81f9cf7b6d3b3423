# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Source listing definition, declaration and reference locations."""

from __future__ import annotations

from collections.abc import AsyncIterator
from dataclasses import dataclass
from typing import ClassVar

from ..adapters import query_bridge
from ..config import LocationSourceParams
from ..core.models import LocationItem
from ..errors import LspGatherError, UnsupportedMethodError
from ..interfaces import ErrorReporter, HostBridge, SourceContext
from ..items import location_to_item
from ..locations import SupportedMethod, collect_locations


@dataclass(slots=True)
class LocationSource:
    """Request locations at the caller's cursor and turn them into items."""

    bridge: HostBridge
    reporter: ErrorReporter

    name: ClassVar[str] = "lsp_locations"

    @staticmethod
    def params() -> LocationSourceParams:
        """Return the default parameters; the empty method is unsupported."""

        return LocationSourceParams()

    async def gather(
        self,
        context: SourceContext,
        params: LocationSourceParams | None = None,
    ) -> AsyncIterator[list[LocationItem]]:
        """Yield the location items for ``params.method`` as one batch.

        Nothing is yielded for unsupported methods, failed requests or when no
        client answered.
        """

        params = params or self.params()
        try:
            method = SupportedMethod.parse(params.method)
        except UnsupportedMethodError as exc:
            self.reporter.warn(str(exc), self.name)
            return
        try:
            items = await self.build_items(method, context)
        except LspGatherError as exc:
            self.reporter.error(exc, self.name)
            return
        if items is not None:
            yield items

    async def build_items(self, method: SupportedMethod, context: SourceContext) -> list[LocationItem] | None:
        """Return the items answered for ``method``, or ``None`` without a response.

        Raises:
            LspGatherError: If the request fails or answers malformed locations.
        """

        responses = await query_bridge(
            self.bridge.query_locations(str(method), context.buf_nr, context.win_id),
            what=f"Requesting {method}",
        )
        if responses is None:
            return None
        return [location_to_item(location) for location in collect_locations(method, responses)]


__all__ = ["LocationSource"]
