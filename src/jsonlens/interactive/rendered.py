"""
Rendered outline model.

The collapsible JSON view renders every value as one node: containers get
a collapse marker and a body holding their children, members carry their
dotted path. This module captures that structure without any markup so
the controller can reason about visibility on plain data.
"""

import json
from dataclasses import dataclass, field
from typing import Any, Dict, Iterator, List, Optional

from ..core.identity import ROOT_ID
from ..core.types import NodeKind, VisitRecord
from ..core.values import JsonType
from ..core.walker import count_levels, walk


@dataclass
class RenderedNode:
    node_id: str
    parent_id: Optional[str]
    path: str
    depth: int
    kind: NodeKind
    text: str
    collapsible: bool
    child_ids: List[str] = field(default_factory=list)

    @property
    def is_root(self) -> bool:
        return self.parent_id is None


def render_text(record: VisitRecord, parent_type: Optional[JsonType]) -> str:
    """The node's own line: `"key": value` for members, the value alone otherwise."""
    if record.value_type is JsonType.ARRAY:
        body = "[" if record.child_count else "[]"
    elif record.value_type is JsonType.OBJECT:
        body = "{" if record.child_count else "{}"
    else:
        body = json.dumps(record.value, ensure_ascii=False)

    if parent_type is JsonType.OBJECT:
        return f'"{record.key}": {body}'
    return body


class RenderedOutline:
    """All rendered nodes of one document, in document order."""

    def __init__(self, nodes: List[RenderedNode], max_level: int):
        self._nodes: Dict[str, RenderedNode] = {node.node_id: node for node in nodes}
        self._order: List[str] = [node.node_id for node in nodes]
        self.max_level = max_level

    @classmethod
    def from_value(cls, value: Any) -> "RenderedOutline":
        nodes: List[RenderedNode] = []
        types: Dict[str, JsonType] = {}

        for record in walk(value, max_depth=None, value_text_limit=None):
            types[record.node_id] = record.value_type
            parent_type = types.get(record.parent_id) if record.parent_id else None
            node = RenderedNode(
                node_id=record.node_id,
                parent_id=record.parent_id,
                path=record.path,
                depth=record.depth,
                kind=record.kind,
                text=render_text(record, parent_type),
                collapsible=record.value_type.is_container and record.child_count > 0,
            )
            nodes.append(node)

        by_id = {node.node_id: node for node in nodes}
        for node in nodes:
            if node.parent_id is not None:
                by_id[node.parent_id].child_ids.append(node.node_id)

        return cls(nodes, max_level=count_levels(value))

    def __iter__(self) -> Iterator[RenderedNode]:
        for node_id in self._order:
            yield self._nodes[node_id]

    def __len__(self) -> int:
        return len(self._order)

    def __contains__(self, node_id: str) -> bool:
        return node_id in self._nodes

    def get(self, node_id: str) -> Optional[RenderedNode]:
        return self._nodes.get(node_id)

    @property
    def root(self) -> RenderedNode:
        return self._nodes[ROOT_ID]

    def ancestors(self, node_id: str) -> Iterator[RenderedNode]:
        """Parent first, root last."""
        node = self._nodes[node_id]
        while node.parent_id is not None:
            node = self._nodes[node.parent_id]
            yield node

    def containers(self) -> Iterator[RenderedNode]:
        return (node for node in self if node.collapsible)
