"""Console sink shared by the report renderers."""

from typing import TextIO

from rich.console import Console
from rich.text import Text

SEPARATOR = "-------------------------------------"


def make_console(file: TextIO | None = None, no_color: bool = False) -> Console:
    """
    Build the console the report is written to.

    Lines are never wrapped, so the report text stays byte-stable whatever
    the terminal width.
    """
    return Console(file=file, no_color=no_color, highlight=False, soft_wrap=True)


def emit(console: Console, *parts: str | tuple[str, str]) -> None:
    """Print one line. Parts are plain strings or (text, style) pairs.

    Text goes through rich.text.Text, so service-provided strings are never
    parsed as markup.
    """
    console.print(Text.assemble(*parts))


def separator(console: Console) -> None:
    emit(console, SEPARATOR)


def outcome_line(console: Console, label: str, style: str) -> None:
    emit(console, ("Validation: ", "bold"), (label, style))
