# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Shared pytest fixtures."""

from __future__ import annotations

from typing import Any

import pytest
from helpers.fakes import FakeBridge, RecordingReporter
from helpers.payloads import APP_PATH, APP_URI, LIB_PATH, LIB_URI, lsp_range


@pytest.fixture
def nvim_records() -> list[dict[str, Any]]:
    """Return ``vim.diagnostic.get(7)`` records."""
    return [
        {
            "lnum": 2,
            "col": 4,
            "end_lnum": 2,
            "end_col": 9,
            "bufnr": 7,
            "severity": 2,
            "message": "'value' is declared but never used.",
            "source": "typescript",
            "code": 6133,
            "namespace": 31,
            "user_data": {"lsp": {"code": 6133}},
        },
    ]


@pytest.fixture
def coc_records() -> list[dict[str, Any]]:
    """Return a ``CocAction('diagnosticList')`` answer spanning two files."""
    return [
        {
            "file": APP_PATH,
            "location": {"uri": APP_URI, "range": lsp_range(2, 4, 2, 9)},
            "severity": "Warning",
            "message": "'value' is declared but never used.",
            "source": "typescript",
            "code": 6133,
            "level": 2,
            "lnum": 3,
            "col": 5,
        },
        {
            "file": LIB_PATH,
            "location": {"uri": LIB_URI, "range": lsp_range(0, 0, 0, 3)},
            "severity": "Error",
            "message": "Cannot find name 'foo'.",
            "source": "typescript",
            "code": 2304,
            "level": 1,
            "lnum": 1,
            "col": 1,
        },
    ]


@pytest.fixture
def vim_lsp_notification() -> dict[str, Any]:
    """Return a ``publishDiagnostics`` notification for ``app.ts``."""
    return {
        "method": "textDocument/publishDiagnostics",
        "jsonrpc": "2.0",
        "params": {
            "uri": APP_URI,
            "diagnostics": [
                {
                    "range": lsp_range(2, 4, 2, 9),
                    "severity": 2,
                    "message": "'value' is declared but never used.",
                    "source": "typescript",
                    "code": 6133,
                    "tags": [1],
                },
            ],
        },
    }


@pytest.fixture
def bridge() -> FakeBridge:
    """Return an empty in-memory host bridge."""
    return FakeBridge(uris={7: APP_URI, 8: LIB_URI})


@pytest.fixture
def reporter() -> RecordingReporter:
    """Return a reporter recording errors and warnings."""
    return RecordingReporter()
