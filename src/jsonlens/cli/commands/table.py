"""
Table Command - Tabular view of an array or object.

Sorting mirrors clicking a column header: passing the same column twice
flips the direction. Container cells are expanded by their composite key,
which the command prints next to every Expand toggle.
"""

import sys
from typing import Tuple

import click
from rich.console import Console, Group
from rich.markup import escape
from rich.padding import Padding
from rich.table import Table

from ...core.exceptions import ShapeError
from ...core.types import SortDirection, TableView
from ...projections.table import (
    NestedTable,
    TableState,
    cell_text,
    expandable_value,
    expansion_key,
)
from ..utils import echo_error, echo_json, echo_json_error, load_document
from .options import document_options

console = Console()


@click.command()
@document_options
@click.option("-s", "--sort", "sort_columns", multiple=True,
              help="Sort by column; repeat the same column to sort descending")
@click.option("-e", "--expand", "expand_keys", multiple=True,
              help="Expand a container cell by its key (e.g. row-0)")
def table(source: str, sample: bool, config_path: str, as_json: bool,
          sort_columns: Tuple[str, ...], expand_keys: Tuple[str, ...]):
    """
    Show the document as a sortable table with expandable cells.
    """
    doc = load_document(source, sample=sample, config_path=config_path, as_json=as_json)
    if doc is None:
        sys.exit(1)

    view = doc.table()
    if view.error:
        if as_json:
            echo_json_error(ShapeError(view.error).to_dict())
        else:
            echo_error(view.error)
        sys.exit(1)

    state = doc.table_state
    for column in sort_columns:
        state.request_sort(column)
    for key in expand_keys:
        state.toggle(key)

    if as_json:
        echo_json({
            "mode": str(view.mode),
            "columns": view.columns,
            "rows": [row.model_dump(mode="json") for row in state.sorted_rows(view)],
            "sort": {"column": state.sort_column, "direction": str(state.sort_direction)},
            "expanded": sorted(k for k, v in state.expanded.items() if v),
        })
        return

    console.print(render_table(view, state))


def render_table(view: TableView, state: TableState):
    """Rich renderable of a table and, below it, every expanded sub-table."""
    grid = Table(show_lines=False, header_style="bold")
    for column in view.columns:
        header = column
        if state.sort_column == column and not isinstance(view, NestedTable):
            header += " ↑" if state.sort_direction is SortDirection.ASCENDING else " ↓"
        grid.add_column(escape(header))

    rows = list(view.rows) if isinstance(view, NestedTable) else state.sorted_rows(view)
    for row in rows:
        cells = []
        for column in view.columns:
            text = escape(cell_text(view, row, column))
            if expandable_value(view, row, column) is not None:
                key = expansion_key(view, row, column)
                label = state.action_label(key)
                text = f"{text} [cyan]\\[{label}: {escape(key)}][/]".strip()
            cells.append(text)
        grid.add_row(*cells)

    parts = [grid]
    for key, nested in state.expanded_children(view):
        parts.append(f"[bold]▼ {escape(key)}[/]")
        if nested.message is not None:
            parts.append(Padding(f"[dim]{escape(nested.message)}[/]", (0, 0, 0, 4)))
        else:
            parts.append(Padding(render_table(nested, state), (0, 0, 0, 4)))
    return Group(*parts)
