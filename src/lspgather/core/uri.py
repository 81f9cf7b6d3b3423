# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Conversions between ``file:`` URIs and filesystem paths."""

from __future__ import annotations

from pathlib import PurePosixPath
from typing import Final
from urllib.parse import quote, unquote, urlsplit

FILE_SCHEME: Final[str] = "file"


def is_file_uri(uri: str) -> bool:
    """Return ``True`` when *uri* uses the ``file:`` scheme."""

    return uri.startswith(f"{FILE_SCHEME}:")


def decode_file_uri(uri: str) -> str:
    """Return the percent-decoded filesystem path encoded in a ``file:`` URI.

    Raises:
        ValueError: If *uri* is not a ``file:`` URI.
    """

    parts = urlsplit(uri)
    if parts.scheme != FILE_SCHEME:
        raise ValueError(f"Must be a file URL: {uri!r}")
    path = unquote(parts.path)
    if parts.netloc and parts.netloc != "localhost":
        return f"//{parts.netloc}{path}"
    return path


def encode_file_uri(path: str) -> str:
    """Return the ``file:`` URI for an absolute POSIX *path*."""

    posix = PurePosixPath(path)
    if not posix.is_absolute():
        raise ValueError(f"Path must be absolute: {path!r}")
    return f"{FILE_SCHEME}://{quote(posix.as_posix())}"


def display_path(uri: str) -> str:
    """Return the path shown for *uri*: decoded for ``file:`` URIs, raw otherwise."""

    return decode_file_uri(uri) if is_file_uri(uri) else uri


__all__ = ["FILE_SCHEME", "decode_file_uri", "display_path", "encode_file_uri", "is_file_uri"]
