"""
Outline Projector.

Produces the indented tree view: one OutlineLine per visit record, in
pre-order. Connector glyphs are not stored on the lines because they
depend on lines that come later; `connector_columns` recomputes them from
the full list at render time.
"""

import logging
from typing import Any, List, Optional

from ..config import (
    ELLIPSIS,
    MAX_TRAVERSAL_DEPTH,
    OUTLINE_STRING_CUT,
    OUTLINE_STRING_LIMIT,
)
from ..core.identity import ROOT_LABEL
from ..core.types import NodeKind, OutlineLine, VisitRecord
from ..core.values import JsonType, stringify
from ..core.walker import walk

logger = logging.getLogger(__name__)

GLYPHS = {
    NodeKind.ROOT: "◆",
    NodeKind.OBJECT: "○",
    NodeKind.ARRAY: "▪",
}
VALUE_GLYPH = "•"


def items_phrase(count: int) -> str:
    return f"{count} {'item' if count == 1 else 'items'}"


def format_leaf_value(
    record: VisitRecord,
    limit: int = OUTLINE_STRING_LIMIT,
    cut: int = OUTLINE_STRING_CUT,
) -> str:
    text = stringify(record.value)
    if record.value_type is JsonType.STRING:
        if len(text) > limit:
            return f'"{text[:cut]}{ELLIPSIS}"'
        return f'"{text}"'
    return text


def line_for(record: VisitRecord, limit: int = OUTLINE_STRING_LIMIT, cut: int = OUTLINE_STRING_CUT) -> OutlineLine:
    if record.is_leaf:
        return OutlineLine(
            depth=record.depth,
            kind=record.kind,
            display_text=f"{record.label if not record.is_root else ROOT_LABEL}: {format_leaf_value(record, limit, cut)}",
            path=record.path,
            key=str(record.key) if record.key is not None else "root",
            value_type=str(record.value_type),
            has_children=False,
            is_last_child=record.is_last_sibling and not record.is_root,
            is_simple_value=True,
            node_id=record.node_id,
        )

    prefix = "Array" if record.value_type is JsonType.ARRAY else "Object"
    name = ROOT_LABEL if record.is_root else record.label
    return OutlineLine(
        depth=record.depth,
        kind=record.kind,
        display_text=f"{name}: {prefix} with {items_phrase(record.child_count)}",
        path=record.path,
        key=str(record.key) if record.key is not None else "root",
        value_type=str(record.value_type),
        has_children=record.child_count > 0,
        is_last_child=record.is_last_sibling and not record.is_root,
        is_simple_value=False,
        node_id=record.node_id,
    )


def project_outline(
    value: Any,
    max_depth: Optional[int] = MAX_TRAVERSAL_DEPTH,
    string_limit: int = OUTLINE_STRING_LIMIT,
    string_cut: int = OUTLINE_STRING_CUT,
) -> List[OutlineLine]:
    lines = [line_for(record, string_limit, string_cut) for record in walk(value, max_depth=max_depth)]
    logger.debug(f"Projected outline: {len(lines)} lines")
    return lines


def connector_columns(lines: List[OutlineLine], index: int) -> List[int]:
    """
    Ancestor depths that need a vertical continuation at line `index`.

    Depth d continues iff a later line at depth d + 1 appears before any
    line at depth <= d.
    """
    line = lines[index]
    columns = []
    for depth in range(line.depth):
        for later in lines[index + 1:]:
            if later.depth <= depth:
                break
            if later.depth == depth + 1:
                columns.append(depth)
                break
    return columns


def connector_class(line: OutlineLine) -> str:
    """Elbow class of a line: parent/leaf, with a last-child marker."""
    base = "json-parent" if line.has_children else "json-leaf"
    if line.is_last_child:
        return f"{base} json-last-child"
    return base


def glyph(line: OutlineLine) -> str:
    return GLYPHS.get(line.kind, VALUE_GLYPH)


def render_outline_text(lines: List[OutlineLine]) -> str:
    """Plain box-drawing rendering of an outline."""
    rendered = []
    for index, line in enumerate(lines):
        if line.depth == 0:
            rendered.append(f"{glyph(line)} {line.display_text}")
            continue

        continuing = set(connector_columns(lines, index))
        gutter = "".join("│   " if depth in continuing else "    " for depth in range(line.depth - 1))
        elbow = "└── " if line.is_last_child else "├── "
        rendered.append(f"{gutter}{elbow}{glyph(line)} {line.display_text}")
    return "\n".join(rendered)


def total_items(lines: List[OutlineLine]) -> int:
    return len(lines)
