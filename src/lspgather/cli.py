# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Command line entry point listing items gathered from a host snapshot."""

from __future__ import annotations

import asyncio
import json
from collections.abc import Sequence
from pathlib import Path

import typer
from rich import box
from rich.console import Console
from rich.table import Table

from .adapters import ClientName
from .config import BufferScope, ConfigError, DiagnosticSourceParams, LocationSourceParams
from .core.models import DiagnosticItem, Item
from .interfaces import SourceContext
from .logging import ConsoleReporter, info
from .orchestration import DiagnosticSource, LocationSource, collect_items
from .snapshot import SnapshotHostBridge

app = typer.Typer(
    help="Gather language-server diagnostics and locations as list items.",
    no_args_is_help=True,
    add_completion=False,
)


def _load_bridge(snapshot: Path) -> SnapshotHostBridge:
    try:
        return SnapshotHostBridge.from_path(snapshot)
    except ConfigError as exc:
        raise typer.BadParameter(str(exc), param_hint="SNAPSHOT") from exc


def _buffer_scope(buffers: Sequence[int] | None) -> BufferScope:
    if not buffers:
        return None
    if len(buffers) == 1:
        return buffers[0]
    return list(buffers)


def _render(items: Sequence[Item], *, as_json: bool, title: str) -> None:
    if not items:
        info(f"No items for {title}.")
        return
    if as_json:
        for item in items:
            typer.echo(json.dumps(item.to_dict(), sort_keys=True))
        return
    table = Table(title=title, box=box.SIMPLE, expand=True)
    table.add_column("Item", overflow="fold")
    table.add_column("Location", overflow="fold")
    table.add_column("Severity", style="bold")
    for item in items:
        action = item.action
        target = action.path or (f"buffer {action.buf_nr}" if action.buf_nr is not None else "?")
        severity = ""
        if isinstance(item, DiagnosticItem) and item.data.severity is not None:
            severity = item.data.severity.name.lower()
        table.add_row(item.word, f"{target}:{action.line_nr}:{action.col}", severity)
    Console().print(table)


@app.command("diagnostics")
def diagnostics_command(
    snapshot: Path = typer.Argument(..., exists=True, dir_okay=False, help="JSON snapshot of the host state."),
    client: str = typer.Option(ClientName.NVIM_LSP.value, "--client", "-c", help="Client backend to read."),
    buffer: list[int] | None = typer.Option(
        None,
        "--buffer",
        "-b",
        help="Buffer to list (repeatable, 0 = focused buffer); all buffers when omitted.",
    ),
    focus: int = typer.Option(1, "--focus", help="Buffer number considered focused."),
    as_json: bool = typer.Option(False, "--json", help="Print one JSON object per item.", is_flag=True),
) -> None:
    """List the diagnostics reported by a client, most relevant first."""

    try:
        params = DiagnosticSourceParams.from_mapping({"clientName": client, "buffer": _buffer_scope(buffer)})
    except ConfigError as exc:
        raise typer.BadParameter(str(exc), param_hint="--client/--buffer") from exc
    source = DiagnosticSource(bridge=_load_bridge(snapshot), reporter=ConsoleReporter())
    items = asyncio.run(collect_items(source.gather(SourceContext(buf_nr=focus), params)))
    _render(items, as_json=as_json, title=f"Diagnostics ({params.client_name})")


@app.command("locations")
def locations_command(
    snapshot: Path = typer.Argument(..., exists=True, dir_okay=False, help="JSON snapshot of the host state."),
    method: str = typer.Option(..., "--method", "-m", help="Request such as textDocument/definition."),
    focus: int = typer.Option(1, "--focus", help="Buffer number the request is issued from."),
    window: int = typer.Option(0, "--window", help="Window id the request is issued from."),
    as_json: bool = typer.Option(False, "--json", help="Print one JSON object per item.", is_flag=True),
) -> None:
    """List the locations answered for a navigation request."""

    params = LocationSourceParams(method=method)
    source = LocationSource(bridge=_load_bridge(snapshot), reporter=ConsoleReporter())
    items = asyncio.run(collect_items(source.gather(SourceContext(buf_nr=focus, win_id=window), params)))
    _render(items, as_json=as_json, title=method)


def main() -> None:
    """Run the ``lspgather`` application."""

    app()


__all__ = ["app", "main"]
