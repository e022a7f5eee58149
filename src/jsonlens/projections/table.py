"""
Tabular Projector.

Classifies a document as an array of objects, a mixed array or an object
and lays it out as rows and columns:

- array of objects: one row per element, one column per key seen in any
  element (first-seen order); missing keys render as a placeholder.
- mixed array: fixed columns index/value/type/actions.
- object: fixed columns key/value/type/actions.

Container cells show a short preview and expand in place into nested
tables. Nested tables are built lazily, only for expanded cells, and every
expansion is keyed by row, column and nesting path so siblings never
collide.
"""

import json
import logging
from typing import Any, Dict, List, Optional, Tuple

from pydantic import Field

from ..config import MISSING_CELL, PREVIEW_ENTRY_LIMIT, PREVIEW_VALUE_LIMIT
from ..core.exceptions import ShapeError
from ..core.types import SortDirection, TableMode, TableRow, TableView
from ..core.values import JsonType, children, json_type, stringify

logger = logging.getLogger(__name__)

NOT_TABULAR = "Only objects or arrays can be displayed in table format"
EMPTY_ARRAY = "Array is empty"

MIXED_COLUMNS = ["index", "value", "type", "actions"]
OBJECT_COLUMNS = ["key", "value", "type", "actions"]
ACTIONS = "actions"


class NestedTable(TableView):
    """A sub-table revealed by expanding a container cell."""
    key: str
    message: Optional[str] = None
    value: Any = Field(default=None, exclude=True, repr=False)


# =========================================================================
# Cell formatting
# =========================================================================

def type_label(value: Any) -> str:
    kind = json_type(value)
    if kind is JsonType.ARRAY:
        return "array"
    if kind is JsonType.NULL:
        return "null"
    return str(kind)


def preview_value(value: Any) -> str:
    kind = json_type(value)
    if kind is JsonType.ARRAY:
        return "Object (Array)"
    if kind is JsonType.OBJECT:
        return "Object"
    return stringify(value)


def format_object_preview(value: Any) -> str:
    """Short inline summary of a container: `Array(n)` or its first entries."""
    kind = json_type(value)
    if kind is JsonType.ARRAY:
        return f"Array({len(value)})"
    if kind is not JsonType.OBJECT:
        return ""

    entries = list(value.items())
    if not entries:
        return "Empty object"

    parts = []
    for key, val in entries[:PREVIEW_ENTRY_LIMIT]:
        val_kind = json_type(val)
        if val_kind is JsonType.ARRAY:
            val_preview = "[...]"
        elif val_kind is JsonType.OBJECT:
            val_preview = "{...}"
        else:
            val_preview = stringify(val)[:PREVIEW_VALUE_LIMIT]
        parts.append(f"{key}: {val_preview}")

    suffix = ", ..." if len(entries) > PREVIEW_ENTRY_LIMIT else ""
    return ", ".join(parts) + suffix


def cell_text(table: TableView, row: TableRow, column: str) -> str:
    """Text shown in a cell; missing cells render as the placeholder."""
    if column == ACTIONS:
        return ""
    if not row.has(column):
        return MISSING_CELL

    if table.mode is TableMode.ARRAY_OF_OBJECTS:
        cell = row.get(column)
        if json_type(cell).is_container:
            return format_object_preview(cell)
        return stringify(cell)

    if column == "value" and json_type(row.original_value).is_container:
        return format_object_preview(row.original_value)
    return stringify(row.get(column))


# =========================================================================
# Classification
# =========================================================================

def _summary_row(index: int, label_column: str, label: Any, value: Any) -> TableRow:
    return TableRow(
        row_id=index,
        cells={label_column: label, "value": preview_value(value), "type": type_label(value)},
        original_value=value,
    )


def classify(value: Any) -> Tuple[TableMode, List[str], List[TableRow]]:
    """
    Lay a value out as (mode, columns, rows).

    Raises:
        ShapeError: for scalars and empty arrays.
    """
    kind = json_type(value)
    if not kind.is_container:
        raise ShapeError(NOT_TABULAR)

    if kind is JsonType.ARRAY:
        if not value:
            raise ShapeError(EMPTY_ARRAY)

        if all(json_type(item) is JsonType.OBJECT for item in value):
            columns: Dict[str, None] = {}
            for item in value:
                for key in item:
                    columns.setdefault(key, None)
            rows = [TableRow(row_id=i, cells=dict(item), original_value=item) for i, item in enumerate(value)]
            return TableMode.ARRAY_OF_OBJECTS, list(columns), rows

        rows = [_summary_row(i, "index", i, item) for i, item in enumerate(value)]
        return TableMode.MIXED_ARRAY, list(MIXED_COLUMNS), rows

    rows = [_summary_row(i, "key", key, val) for i, (key, val) in enumerate(value.items())]
    return TableMode.OBJECT, list(OBJECT_COLUMNS), rows


def project_table(value: Any) -> TableView:
    """Top-level table; shape problems become the view's error state."""
    try:
        mode, columns, rows = classify(value)
    except ShapeError as e:
        logger.debug(f"Table projection not available: {e.message}")
        return TableView(error=e.message)
    return TableView(columns=columns, rows=rows, mode=mode)


def nested_table(value: Any, key: str) -> NestedTable:
    """One level of a recursive sub-table for an expanded container."""
    kind = json_type(value)
    if kind is JsonType.NULL:
        return NestedTable(key=key, message="null", value=value)
    if kind is JsonType.ARRAY and not value:
        return NestedTable(key=key, message="Empty array", value=value)
    if kind is JsonType.OBJECT and not value:
        return NestedTable(key=key, message="Empty object", value=value)
    if not kind.is_container:
        return NestedTable(key=key, message=stringify(value), value=value)

    mode, columns, rows = classify(value)
    return NestedTable(key=key, columns=columns, rows=rows, mode=mode, value=value)


# =========================================================================
# Expansion keys
# =========================================================================

_KEY_ESCAPES = (("%", "%25"), ("-", "%2D"))


def key_segment(name: Any) -> str:
    """Object key or column name with `%` and `-` percent-encoded."""
    segment = str(name)
    for raw, encoded in _KEY_ESCAPES:
        segment = segment.replace(raw, encoded)
    return segment


def expansion_key(table: TableView, row: TableRow, column: Optional[str] = None) -> str:
    """
    Composite key of an expandable cell.

    Top-level keys are `row-<n>` (`row-<key>` for objects, `row-<n>-<col>`
    for arrays of objects); nested keys extend their parent key with the
    nesting path. Keys and column names are encoded so that `-` only ever
    separates path parts, which keeps every key distinct.
    """
    prefix = table.key if isinstance(table, NestedTable) else None

    if table.mode is TableMode.ARRAY_OF_OBJECTS:
        base = prefix if prefix is not None else "row"
        return f"{base}-{row.row_id}-{key_segment(column)}"
    if table.mode is TableMode.OBJECT:
        label = key_segment(row.get("key"))
        return f"{prefix}-object-{label}" if prefix is not None else f"row-{label}"
    return f"{prefix}-array-{row.row_id}" if prefix is not None else f"row-{row.row_id}"


def expandable_value(table: TableView, row: TableRow, column: str) -> Any:
    """The container behind a cell if it can be expanded, else None."""
    if table.mode is TableMode.ARRAY_OF_OBJECTS:
        if row.has(column) and json_type(row.get(column)).is_container:
            return row.get(column)
        return None
    if column == ACTIONS and json_type(row.original_value).is_container:
        return row.original_value
    return None


def expandable_cells(table: TableView) -> List[Tuple[str, TableRow, str, Any]]:
    """Every (key, row, column, value) that carries an Expand toggle."""
    cells = []
    for row in table.rows:
        columns = table.columns if table.mode is TableMode.ARRAY_OF_OBJECTS else [ACTIONS]
        for column in columns:
            target = expandable_value(table, row, column)
            if target is not None:
                cells.append((expansion_key(table, row, column), row, column, target))
    return cells


# =========================================================================
# Sorting
# =========================================================================

_TYPE_RANK = {
    JsonType.NUMBER: 0,
    JsonType.BOOLEAN: 0,
    JsonType.STRING: 1,
    JsonType.NULL: 2,
    JsonType.ARRAY: 3,
    JsonType.OBJECT: 3,
}


def _sort_key(value: Any) -> Tuple[int, Any]:
    kind = json_type(value)
    rank = _TYPE_RANK[kind]
    if kind is JsonType.NULL:
        return rank, 0
    if kind.is_container:
        return rank, json.dumps(value, sort_keys=True)
    return rank, value


def sort_rows(rows: List[TableRow], column: str, direction: SortDirection | str = SortDirection.ASCENDING) -> List[TableRow]:
    """
    Stable sort by one column.

    Rows missing the column follow the rows that have it in both
    directions. The actions column is not sortable.
    """
    if column == ACTIONS:
        return list(rows)

    direction = SortDirection(direction)
    present = [row for row in rows if row.has(column)]
    missing = [row for row in rows if not row.has(column)]
    ordered = sorted(
        present,
        key=lambda row: _sort_key(row.get(column)),
        reverse=direction is SortDirection.DESCENDING,
    )
    return ordered + missing


# =========================================================================
# Interactive state
# =========================================================================

class TableState:
    """Sort configuration and expansion flags for one rendered table."""

    def __init__(self):
        self.sort_column: Optional[str] = None
        self.sort_direction: SortDirection = SortDirection.ASCENDING
        self.expanded: Dict[str, bool] = {}

    def request_sort(self, column: str) -> None:
        """Sort by `column`; repeating the same column flips the direction."""
        if column == ACTIONS:
            return
        if self.sort_column == column:
            self.sort_direction = self.sort_direction.toggled()
        else:
            self.sort_column = column
            self.sort_direction = SortDirection.ASCENDING

    def sorted_rows(self, table: TableView) -> List[TableRow]:
        if self.sort_column is None:
            return list(table.rows)
        return sort_rows(table.rows, self.sort_column, self.sort_direction)

    def toggle(self, key: str) -> bool:
        self.expanded[key] = not self.expanded.get(key, False)
        return self.expanded[key]

    def is_expanded(self, key: str) -> bool:
        return self.expanded.get(key, False)

    def action_label(self, key: str) -> str:
        return "Hide" if self.is_expanded(key) else "Expand"

    def expanded_children(self, table: TableView) -> List[Tuple[str, NestedTable]]:
        """Nested tables for the currently expanded cells of `table`, built on demand."""
        return [
            (key, nested_table(target, key))
            for key, _row, _column, target in expandable_cells(table)
            if self.is_expanded(key)
        ]

    def reset(self) -> None:
        self.sort_column = None
        self.sort_direction = SortDirection.ASCENDING
        self.expanded.clear()
