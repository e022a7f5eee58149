"""
Tree Walker.

One traversal contract shared by every projection: a lazy, pre-order,
depth-first sequence of VisitRecords in source order (object insertion
order, array index order).

The walker keeps an explicit stack of frames instead of recursing, so a
deeply nested document cannot exhaust the interpreter stack and the walk
holds no state outside the generator.
"""

import logging
from typing import Any, Iterator, List, NamedTuple, Optional

from ..config import MAX_TRAVERSAL_DEPTH, VALUE_TEXT_LIMIT
from .identity import Identity, resolve, root_identity
from .types import NodeKind, VisitRecord
from .values import JsonType, children, json_type, stringify, truncate

logger = logging.getLogger(__name__)


class _Frame(NamedTuple):
    value: Any
    identity: Identity
    parent_id: Optional[str]
    depth: int
    key: Optional[str | int]
    sibling_index: int
    is_last_sibling: bool


def walk(
    value: Any,
    max_depth: Optional[int] = MAX_TRAVERSAL_DEPTH,
    value_text_limit: Optional[int] = VALUE_TEXT_LIMIT,
) -> Iterator[VisitRecord]:
    """
    Yield one VisitRecord per value, pre-order.

    Records deeper than `max_depth` are omitted without an error marker;
    `max_depth=None` walks the whole document.
    """
    stack: List[_Frame] = [_Frame(value, root_identity(), None, 0, None, 0, True)]
    truncated = 0

    while stack:
        frame = stack.pop()
        value_type = json_type(frame.value)
        entries = children(frame.value)

        yield VisitRecord(
            node_id=frame.identity.node_id,
            parent_id=frame.parent_id,
            depth=frame.depth,
            kind=NodeKind.for_type(value_type, is_root=frame.parent_id is None),
            value_type=value_type,
            key=frame.key,
            label=frame.identity.label,
            path=frame.identity.path,
            accessor=frame.identity.accessor,
            sibling_index=frame.sibling_index,
            is_last_sibling=frame.is_last_sibling,
            child_count=len(entries),
            value_text=None if value_type.is_container else truncate(stringify(frame.value), value_text_limit),
            value=frame.value,
        )

        if not entries:
            continue

        if max_depth is not None and frame.depth >= max_depth:
            truncated += 1
            continue

        is_array = value_type is JsonType.ARRAY
        last = len(entries) - 1
        # Reversed so the first child is popped first
        for index in range(last, -1, -1):
            key, child = entries[index]
            stack.append(_Frame(
                value=child,
                identity=resolve(frame.identity, key, is_array),
                parent_id=frame.identity.node_id,
                depth=frame.depth + 1,
                key=key,
                sibling_index=index,
                is_last_sibling=index == last,
            ))

    if truncated:
        logger.debug(f"Depth ceiling {max_depth} reached; {truncated} container(s) not descended")


def count_levels(value: Any) -> int:
    """Deepest depth present in the document (root = 0), without a ceiling."""
    deepest = 0
    stack = [(value, 0)]
    while stack:
        current, depth = stack.pop()
        deepest = max(deepest, depth)
        for _, child in children(current):
            stack.append((child, depth + 1))
    return deepest


def count_nodes(value: Any) -> int:
    """Total number of values in the document, root included."""
    total = 0
    stack = [value]
    while stack:
        current = stack.pop()
        total += 1
        stack.extend(child for _, child in children(current))
    return total
