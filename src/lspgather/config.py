# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Source parameter models and helpers."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Final, Self, TypeAlias

from pydantic import BaseModel, ConfigDict, ValidationError
from pydantic.alias_generators import to_camel

from .adapters import ClientName

CURRENT_BUFFER: Final[int] = 0

BufferScope: TypeAlias = int | list[int] | None


class ConfigError(Exception):
    """Raised when source parameters are invalid."""


class SourceParams(BaseModel):
    """Base for the parameters recognised by a gather source."""

    model_config = ConfigDict(
        frozen=True,
        populate_by_name=True,
        alias_generator=to_camel,
        extra="forbid",
    )

    @classmethod
    def from_mapping(cls, mapping: Mapping[str, Any]) -> Self:
        """Validate user supplied ``mapping`` into parameters.

        Raises:
            ConfigError: If ``mapping`` holds unknown keys or invalid values.
        """

        try:
            return cls.model_validate(dict(mapping))
        except ValidationError as exc:
            raise ConfigError(f"Invalid {cls.__name__}: {exc}") from exc


class DiagnosticSourceParams(SourceParams):
    """Parameters of the diagnostics source."""

    client_name: ClientName = ClientName.NVIM_LSP
    buffer: int | list[int] | None = None


class LocationSourceParams(SourceParams):
    """Parameters of the definition/references source."""

    method: str = ""


def resolve_buffers(buffer: BufferScope, current_buf_nr: int) -> list[int | None]:
    """Return the buffer numbers to query for ``buffer``.

    A single value (including ``None`` meaning every buffer) becomes a one-element
    scope. :data:`CURRENT_BUFFER` is replaced with ``current_buf_nr``.
    """

    buffers = buffer if isinstance(buffer, list) else [buffer]
    return [current_buf_nr if buf_nr == CURRENT_BUFFER else buf_nr for buf_nr in buffers]


__all__ = [
    "CURRENT_BUFFER",
    "BufferScope",
    "ConfigError",
    "DiagnosticSourceParams",
    "LocationSourceParams",
    "SourceParams",
    "resolve_buffers",
]
