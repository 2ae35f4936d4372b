"""Grid rendering for lists of names."""

from collections.abc import Sequence
from typing import TypeVar

from rich import box
from rich.console import Console
from rich.table import Table

T = TypeVar("T")

DEFAULT_COLUMNS = 3


def array_to_table(items: Sequence[T], columns: int = DEFAULT_COLUMNS) -> list[list[T]]:
    """Split a sequence into rows of ``columns`` items.

    The last row holds the remainder and may be shorter.

    Args:
        items: Values to lay out.
        columns: Number of values per row.

    Returns:
        List of rows.
    """
    return [list(items[start : start + columns]) for start in range(0, len(items), columns)]


def build_grid(items: Sequence[str], columns: int = DEFAULT_COLUMNS) -> Table:
    """Build a headerless bordered table holding ``items`` in rows."""
    table = Table(show_header=False, box=box.SQUARE)
    for _ in range(columns):
        table.add_column()
    for row in array_to_table(items, columns):
        table.add_row(*row)
    return table


def print_grid(items: Sequence[str], columns: int = DEFAULT_COLUMNS, console: Console | None = None) -> None:
    """Print ``items`` as an aligned grid.

    Args:
        items: Values to print.
        columns: Number of values per row.
        console: Console to print to. Defaults to a new stdout console.
    """
    (console or Console()).print(build_grid(items, columns))
