"""Width-aware selection of the updates to apply."""

import os
import sys
from collections.abc import Callable

from rich.console import Console
from rich.text import Text

from .errors import SelectionCancelled
from .models import ListingEntry, UpdateRecord
from .prompt import multiselect
from .render import render_from, render_name, render_to

MESSAGE = "Choose which modules to update"

# Spaces, arrow and checkbox glyphs surrounding the three columns.
COLUMN_OVERHEAD = 11


def get_terminal_width(console: Console) -> int | None:
    """Return the width of the terminal attached to stdout, or None."""
    try:
        return os.get_terminal_size(sys.stdout.fileno()).columns
    except (OSError, ValueError) as e:
        console.print(f"Error while getting terminal size {e}", markup=False)
        return None


def show_from_column(
    terminal_width: int | None, max_name: int, max_from: int, max_to: int
) -> bool:
    """Decide whether the current version column fits.

    The prompt misrenders options that wrap, so the column is dropped
    unless the full line fits. An unknown width hides it.
    """
    if terminal_width is None:
        return False
    return terminal_width > max_name + max_from + max_to + COLUMN_OVERHEAD


def to_ansi(text: Text, console: Console) -> str:
    """Render rich text to a string using the console's colour support."""
    with console.capture() as capture:
        console.print(text, end="", soft_wrap=True)
    return capture.get()


def build_listing(
    records: list[UpdateRecord], console: Console, terminal_width: int | None
) -> list[ListingEntry]:
    """Render one aligned option per record."""
    max_name = max((len(r.name) for r in records), default=0)
    max_from = max((len(str(r.from_version)) for r in records), default=0)
    max_to = max((len(str(r.to_version)) for r in records), default=0)
    with_from = show_from_column(terminal_width, max_name, max_from, max_to)

    listing = []
    for record in records:
        current = render_from(record.from_version, max_from) if with_from else ""
        option = Text.assemble(
            render_name(record, max_name), " ", current, " -> ", render_to(record)
        )
        listing.append(ListingEntry(label=record.name, option_text=to_ansi(option, console)))
    return listing


def choose(
    records: list[UpdateRecord],
    page_size: int,
    console: Console,
    select: Callable[[str, list[str], int], list[int]] = multiselect,
    width_query: Callable[[Console], int | None] = get_terminal_width,
) -> list[UpdateRecord]:
    """Ask the operator which updates to apply.

    Args:
        records: Discovered updates
        page_size: Number of options visible at once
        console: Console used for rendering and diagnostics
        select: Multi-select prompt returning chosen indices
        width_query: Returns the terminal width or None when unknown

    Returns:
        The chosen records, in the order the prompt reports them

    Raises:
        SelectionCancelled: If the operator interrupts the prompt
    """
    listing = build_listing(records, console, width_query(console))
    options = [entry.option_text for entry in listing]

    try:
        indices = select(MESSAGE, options, page_size)
    except (KeyboardInterrupt, EOFError):
        raise SelectionCancelled() from None

    return [records[index] for index in indices]
