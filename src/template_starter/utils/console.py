"""Shared console output for template-starter.

Levels follow the original tool: error, warn, info and verbose. Verbose
output is only printed once ``set_verbose(True)`` has been called.
"""

from __future__ import annotations

from rich.console import Console

console = Console(highlight=False)
error_console = Console(stderr=True, highlight=False)

_verbose = False


def set_verbose(enabled: bool) -> None:
    global _verbose
    _verbose = enabled


def info(message: str) -> None:
    console.print(message, markup=False)


def verbose(message: str) -> None:
    if _verbose:
        console.print(message, style="dim", markup=False)


def warn(message: str) -> None:
    error_console.print(message, style="yellow", markup=False)


def error(message: str) -> None:
    error_console.print(message, style="bold red", markup=False)
