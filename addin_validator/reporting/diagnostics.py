"""Diagnostics renderer - numbered, severity-tagged entry listings."""

from typing import Literal, Sequence

from rich.console import Console

from ..schemas import DiagnosticEntry
from .console import emit

Severity = Literal["error", "warning", "info"]


def _header(severity: Severity, number: int) -> tuple[str, str]:
    if severity == "error":
        return (f"\nError #{number}: ", "bold red")
    if severity == "warning":
        return (f"  Warning  #{number}: ", "bold yellow")
    # Infos are not numbered.
    return ("    Additional information: ", "bold blue")


def render_entry(console: Console, entry: DiagnosticEntry) -> None:
    """Print the detail line and any location lines of one entry."""
    emit(console, f"{entry.title}: {entry.detail} (link: {entry.link})")
    if entry.code:
        emit(console, f"  - Details: {entry.code}")
    if entry.line:
        emit(console, f"  - Line: {entry.line}")
    if entry.column:
        emit(console, f"  - Column: {entry.column}")


def render_diagnostics(
    console: Console,
    entries: Sequence[DiagnosticEntry],
    severity: Severity,
) -> None:
    """
    Render diagnostic entries in their original order.

    Errors and warnings are numbered from 1; infos are not. Nothing is
    printed for an empty sequence.
    """
    for number, entry in enumerate(entries, start=1):
        emit(console, _header(severity, number))
        render_entry(console, entry)
