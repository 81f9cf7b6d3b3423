# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Tests for source parameters."""

from __future__ import annotations

import pytest

from lspgather.adapters import ClientName
from lspgather.config import (
    CURRENT_BUFFER,
    ConfigError,
    DiagnosticSourceParams,
    LocationSourceParams,
    resolve_buffers,
)


def test_defaults() -> None:
    params = DiagnosticSourceParams()

    assert params.client_name is ClientName.NVIM_LSP
    assert params.buffer is None
    assert LocationSourceParams().method == ""


def test_from_mapping_accepts_wire_names() -> None:
    params = DiagnosticSourceParams.from_mapping({"clientName": "vim-lsp", "buffer": [1, 0]})

    assert params.client_name is ClientName.VIM_LSP
    assert params.buffer == [1, 0]


@pytest.mark.parametrize(
    "mapping",
    [
        {"clientName": "lsp-zero"},
        {"buffer": "current"},
        {"bufnr": 1},
    ],
)
def test_from_mapping_rejects_invalid_parameters(mapping) -> None:
    with pytest.raises(ConfigError, match="DiagnosticSourceParams"):
        DiagnosticSourceParams.from_mapping(mapping)


@pytest.mark.parametrize(
    ("buffer", "expected"),
    [
        (None, [None]),
        (5, [5]),
        (CURRENT_BUFFER, [12]),
        ([3, CURRENT_BUFFER, 3], [3, 12, 3]),
        ([], []),
    ],
)
def test_resolve_buffers(buffer, expected) -> None:
    assert resolve_buffers(buffer, 12) == expected
