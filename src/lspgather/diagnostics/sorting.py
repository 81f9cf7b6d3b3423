# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Display ordering of diagnostic items.

The pairwise rule is adapted from telescope.nvim's diagnostics picker
(Copyright (c) 2020-2021 nvim-telescope, MIT).
"""

from __future__ import annotations

from collections.abc import Iterable
from functools import cmp_to_key

from ..core.models import DiagnosticItem
from ..core.severity import sort_rank


def compare_diagnostic_items(a: DiagnosticItem, b: DiagnosticItem, focused_buf_nr: int) -> int:
    """Return a negative number when ``a`` should be listed before ``b``.

    Items of the same buffer are ordered by severity (a missing severity counts
    as an error), then by line. Otherwise items without a buffer or belonging
    to ``focused_buf_nr`` come first, and the remaining ones follow by buffer
    number. When both sides are unbuffered or focused, ``a`` wins, so the rule
    is not a strict weak ordering across more than two such items.
    """

    a_buf = a.action.buf_nr
    b_buf = b.action.buf_nr
    if a_buf and a_buf == b_buf:
        if a.data.severity == b.data.severity:
            return (a.action.line_nr or 0) - (b.action.line_nr or 0)
        return sort_rank(a.data.severity) - sort_rank(b.data.severity)
    if a_buf is None or a_buf == focused_buf_nr:
        return -1
    if b_buf is None or b_buf == focused_buf_nr:
        return 1
    return a_buf - b_buf


def sort_diagnostic_items(items: Iterable[DiagnosticItem], focused_buf_nr: int) -> list[DiagnosticItem]:
    """Return ``items`` in display order relative to the focused buffer.

    ``sorted`` is stable, so items comparing equal keep their input order.
    """

    return sorted(items, key=cmp_to_key(lambda a, b: compare_diagnostic_items(a, b, focused_buf_nr)))


__all__ = ["compare_diagnostic_items", "sort_diagnostic_items"]
