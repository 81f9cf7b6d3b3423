# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Exception hierarchy raised while gathering language-server results."""

from __future__ import annotations


class LspGatherError(RuntimeError):
    """Base class for failures that end a single gather request."""


class UnsupportedClientError(LspGatherError):
    """Raised when a client backend is unknown or unavailable on the host."""


class UnsupportedMethodError(LspGatherError):
    """Raised when a location request names a method that is not handled."""


class BackendQueryError(LspGatherError):
    """Raised when the host bridge fails or returns malformed data."""


class InvalidLocationError(LspGatherError):
    """Raised when a location entry matches neither ``Location`` nor ``LocationLink``."""


__all__ = [
    "BackendQueryError",
    "InvalidLocationError",
    "LspGatherError",
    "UnsupportedClientError",
    "UnsupportedMethodError",
]
