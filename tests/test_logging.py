# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Tests for the console error reporter."""

from __future__ import annotations

import pytest

import lspgather.logging as lspgather_logging
from lspgather.errors import BackendQueryError
from lspgather.interfaces import ErrorReporter
from lspgather.logging import ConsoleReporter, describe_exception, format_report


def test_console_reporter_satisfies_protocol() -> None:
    assert isinstance(ConsoleReporter(), ErrorReporter)


def test_console_reporter_prints_errors_and_warnings_to_stderr(capsys: pytest.CaptureFixture[str]) -> None:
    reporter = ConsoleReporter(use_color=False)

    reporter.error(BackendQueryError("Querying coc.nvim diagnostics failed"), "lsp_diagnostic")
    reporter.warn("Unsupported method: textDocument/hover", "lsp_locations")

    captured = capsys.readouterr()
    assert captured.out == ""
    assert "[lspgather] lsp_diagnostic: Querying coc.nvim diagnostics failed" in captured.err
    assert "[lspgather] lsp_locations: Unsupported method: textDocument/hover" in captured.err


def test_describe_exception_names_unexpected_types() -> None:
    assert describe_exception(BackendQueryError("boom")) == "boom"
    assert describe_exception(KeyError("lnum")) == "KeyError: 'lnum'"
    assert format_report("src", "msg") == "[lspgather] src: msg"


def test_logging_exports_console_helpers() -> None:
    assert {"info", "warn", "fail", "emoji", "ConsoleReporter"} <= set(lspgather_logging.__all__)
    assert all(callable(getattr(lspgather_logging, name)) for name in lspgather_logging.__all__)
