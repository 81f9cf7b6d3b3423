# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""User-facing logging helpers with optional colour and emoji support."""

from __future__ import annotations

import sys
from dataclasses import dataclass
from functools import lru_cache
from typing import Final

from rich.console import Console
from rich.text import Text

from .errors import LspGatherError

PREFIX: Final[str] = "[lspgather]"


def detect_tty() -> bool:
    """Return ``True`` when stderr appears to be backed by a terminal."""

    try:
        return sys.stderr.isatty()
    except (AttributeError, ValueError):
        return False


@lru_cache(maxsize=8)
def get_console(*, color: bool, emoji: bool) -> Console:
    """Return a cached stderr console configured for ``color`` and ``emoji``."""

    tty = detect_tty()
    return Console(
        stderr=True,
        color_system="auto" if color and tty else None,
        no_color=not (color and tty),
        emoji=emoji,
        soft_wrap=True,
    )


def emoji(symbol: str, enable: bool) -> str:
    """Return ``symbol`` when emoji output is enabled, otherwise blank."""

    return symbol if enable else ""


def _print_line(msg: str, *, style: str, use_emoji: bool, use_color: bool | None = None) -> None:
    color_enabled = detect_tty() if use_color is None else use_color
    console = get_console(color=color_enabled, emoji=use_emoji)
    text = Text(msg)
    if color_enabled:
        text.stylize(style)
    console.print(text)


def info(msg: str, *, use_emoji: bool = False, use_color: bool | None = None) -> None:
    """Emit an informational message."""

    _print_line(f"{emoji('ℹ️ ', use_emoji)}{msg}", style="cyan", use_emoji=use_emoji, use_color=use_color)


def warn(msg: str, *, use_emoji: bool = False, use_color: bool | None = None) -> None:
    """Emit a warning message."""

    _print_line(f"{emoji('⚠️ ', use_emoji)}{msg}", style="yellow", use_emoji=use_emoji, use_color=use_color)


def fail(msg: str, *, use_emoji: bool = False, use_color: bool | None = None) -> None:
    """Emit an error message."""

    _print_line(f"{emoji('❌ ', use_emoji)}{msg}", style="red", use_emoji=use_emoji, use_color=use_color)


def format_report(source: str, message: str) -> str:
    """Return the single-line report shown for ``source``."""

    return f"{PREFIX} {source}: {message}"


def describe_exception(exc: BaseException) -> str:
    """Return a one-line description of ``exc``.

    Expected gather failures show their message only; anything else is prefixed
    with the exception type.
    """

    if isinstance(exc, LspGatherError):
        return str(exc)
    return f"{type(exc).__name__}: {exc}"


@dataclass(slots=True)
class ConsoleReporter:
    """Error reporter printing to the rich stderr console."""

    use_emoji: bool = False
    use_color: bool | None = None

    def error(self, exc: BaseException, source: str) -> None:
        """Print ``exc`` raised while running ``source``."""

        fail(format_report(source, describe_exception(exc)), use_emoji=self.use_emoji, use_color=self.use_color)

    def warn(self, message: str, source: str) -> None:
        """Print a warning emitted by ``source``."""

        warn(format_report(source, message), use_emoji=self.use_emoji, use_color=self.use_color)


__all__ = [
    "ConsoleReporter",
    "describe_exception",
    "detect_tty",
    "emoji",
    "fail",
    "format_report",
    "get_console",
    "info",
    "warn",
]
