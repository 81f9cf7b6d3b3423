# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Concurrency helpers shared by the gather sources."""

from __future__ import annotations

import asyncio
from collections.abc import AsyncIterable, Awaitable, Iterable
from typing import TypeVar

T = TypeVar("T")


async def gather_ordered(awaitables: Iterable[Awaitable[T]]) -> list[T]:
    """Run ``awaitables`` concurrently and return their results in input order.

    The first failure propagates; sub-tasks still pending at that point, or when
    the caller is cancelled, are cancelled before returning.
    """

    tasks = [asyncio.ensure_future(awaitable) for awaitable in awaitables]
    if not tasks:
        return []
    try:
        return list(await asyncio.gather(*tasks))
    finally:
        for task in tasks:
            if not task.done():
                task.cancel()


async def collect_items(batches: AsyncIterable[list[T]]) -> list[T]:
    """Drain ``batches`` and return every item in emission order."""

    items: list[T] = []
    async for batch in batches:
        items.extend(batch)
    return items


__all__ = ["collect_items", "gather_ordered"]
