"""Centralized CLI output with Rich: colors, spinners, tables."""

from __future__ import annotations

import sys
from contextlib import contextmanager
from typing import Iterator, Sequence

from rich.console import Console
from rich.markup import escape
from rich.padding import Padding
from rich.table import Table

console = Console(highlight=False)
err_console = Console(stderr=True, highlight=False)


# ── Status messages ──────────────────────────────────────────────────────────

def success(msg: str) -> None:
    console.print(f"  [green]✓[/green] {escape(msg)}")


def error(msg: str) -> None:
    err_console.print(f"  [red]✗[/red] {escape(msg)}")


def security_error(msg: str) -> None:
    err_console.print(f"  [bold red]✗ Security:[/bold red] {escape(msg)}")


def warning(msg: str) -> None:
    console.print(f"  [yellow]⚠[/yellow] {escape(msg)}")


def info(msg: str) -> None:
    console.print(f"  [dim]ℹ {escape(msg)}[/dim]")


def step(msg: str) -> None:
    console.print(f"  [bold]→[/bold] {escape(msg)}")


# ── Structure ────────────────────────────────────────────────────────────────

def header(msg: str) -> None:
    console.print()
    console.print(f"  [bold]{escape(msg)}[/bold]")


def kv(key: str, value: str, indent: int = 2) -> None:
    pad = " " * indent
    console.print(f"{pad}[bold]{escape(key + ':'):<12}[/bold] {escape(value)}")


def plain(msg: str = "") -> None:
    console.print(msg, markup=False)


# ── Progress ─────────────────────────────────────────────────────────────────

@contextmanager
def spinner(msg: str) -> Iterator[None]:
    """Show a spinner while a long operation runs.

    Falls back to a simple print when stdout is not a TTY (e.g. CI, piped).
    """
    if not sys.stdout.isatty():
        console.print(f"  {escape(msg)}...")
        yield
        return

    with console.status(f"  {escape(msg)}...", spinner="dots"):
        yield


# ── Tables ───────────────────────────────────────────────────────────────────

def table(headers: Sequence[str], rows: Sequence[Sequence[str]], indent: int = 2) -> None:
    t = Table(show_edge=True, pad_edge=False)
    for h in headers:
        t.add_column(h)
    for row in rows:
        t.add_row(*(escape(cell) for cell in row))
    console.print(Padding(t, (0, 0, 0, indent)))
