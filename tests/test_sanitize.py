# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Tests for stripping backend fields from diagnostics."""

from __future__ import annotations

import asyncio

from helpers.fakes import FakeBridge
from helpers.payloads import lsp_range

from lspgather.adapters import CocAdapter, DiagnosticScope, NvimLspAdapter
from lspgather.core.models import Diagnostic, SourceDiagnostic
from lspgather.diagnostics import PROTOCOL_FIELDS, get_proper_diagnostics, sanitize_diagnostic, to_protocol_payload


def test_protocol_fields_match_the_protocol() -> None:
    assert PROTOCOL_FIELDS == {
        "range",
        "severity",
        "code",
        "code_description",
        "source",
        "message",
        "tags",
        "related_information",
        "data",
    }


def test_sanitize_drops_buffer_path_and_backend_keys(nvim_records) -> None:
    diag = NvimLspAdapter().normalize(nvim_records, DiagnosticScope(buf_nr=7))[0]

    clean = sanitize_diagnostic(diag)

    assert type(clean) is Diagnostic
    assert clean.range == diag.range
    assert clean.message == diag.message
    assert clean.code == 6133
    assert not hasattr(clean, "buf_nr")
    assert set(to_protocol_payload(diag)) == {"range", "severity", "code", "source", "message"}


def test_sanitize_keeps_unset_fields_unset(coc_records) -> None:
    diag = CocAdapter().normalize(coc_records, DiagnosticScope())[0]

    clean = sanitize_diagnostic(diag)

    assert clean.model_fields_set == {"range", "severity", "code", "source", "message"}


def test_sanitize_preserves_related_information_and_data() -> None:
    diag = SourceDiagnostic.model_validate(
        {
            "range": lsp_range(1, 0),
            "message": "shadowed",
            "codeDescription": {"href": "https://example.invalid/E1"},
            "relatedInformation": [
                {"location": {"uri": "file:///a.py", "range": lsp_range(0, 0)}, "message": "first defined here"},
            ],
            "data": {"fix": ["rename"]},
            "bufNr": 3,
            "path": "/a.py",
        },
    )

    payload = to_protocol_payload(diag)

    assert payload["codeDescription"] == {"href": "https://example.invalid/E1"}
    assert payload["relatedInformation"][0]["message"] == "first defined here"
    assert payload["data"] == {"fix": ["rename"]}
    assert "bufNr" not in payload
    assert "path" not in payload


def test_get_proper_diagnostics_sanitizes_adapter_output(bridge: FakeBridge, vim_lsp_notification) -> None:
    bridge.diagnostics[("vim-lsp", 7)] = {"tsserver": vim_lsp_notification}

    diagnostics = asyncio.run(get_proper_diagnostics("vim-lsp", bridge, 7))

    assert len(diagnostics) == 1
    assert diagnostics[0].to_dict() == {
        "range": lsp_range(2, 4, 2, 9),
        "severity": 2,
        "message": "'value' is declared but never used.",
        "source": "typescript",
        "code": 6133,
        "tags": [1],
    }
