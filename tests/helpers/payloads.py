# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Wire payload builders used by the tests."""

from __future__ import annotations

from typing import Any

APP_URI = "file:///src/app.ts"
APP_PATH = "/src/app.ts"
LIB_URI = "file:///src/lib.ts"
LIB_PATH = "/src/lib.ts"


def lsp_range(
    line: int,
    character: int,
    end_line: int | None = None,
    end_character: int | None = None,
) -> dict[str, Any]:
    """Return a wire ``Range`` mapping."""
    return {
        "start": {"line": line, "character": character},
        "end": {
            "line": line if end_line is None else end_line,
            "character": character if end_character is None else end_character,
        },
    }
