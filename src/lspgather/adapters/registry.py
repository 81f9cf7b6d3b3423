# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Lookup of the adapter serving each client backend."""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType
from typing import Final

from .base import ClientName, DiagnosticAdapter
from .coc import CocAdapter
from .nvim_lsp import NvimLspAdapter
from .vim_lsp import VimLspAdapter

ADAPTERS: Final[Mapping[ClientName, DiagnosticAdapter]] = MappingProxyType(
    {
        ClientName.NVIM_LSP: NvimLspAdapter(),
        ClientName.COC: CocAdapter(),
        ClientName.VIM_LSP: VimLspAdapter(),
    },
)


def get_adapter(client: ClientName | str) -> DiagnosticAdapter:
    """Return the adapter registered for ``client``.

    Raises:
        UnsupportedClientError: If ``client`` names no known backend.
    """

    name = client if isinstance(client, ClientName) else ClientName.parse(client)
    return ADAPTERS[name]


__all__ = ["ADAPTERS", "get_adapter"]
