"""
Interactive Outline Controller.

Progressive disclosure and search on top of a RenderedOutline. All
mutable state lives in an explicit ViewState value:

- `visible[node]`: whether the node's row is displayed (search filters it)
- `expanded[container]`: whether a container's body is open
- `current_level` / `max_level`: the level counters for level stepping

A node is shown when its own row is visible and every ancestor is both
visible and expanded. Level operations outside their valid range are
no-ops; search never fails.
"""

import logging
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Set

from .rendered import RenderedOutline

logger = logging.getLogger(__name__)

EXPANDED_MARKER = "▼"
COLLAPSED_MARKER = "▶"


@dataclass
class ViewState:
    current_level: int = 0
    max_level: int = 0
    visible: Dict[str, bool] = field(default_factory=dict)
    expanded: Dict[str, bool] = field(default_factory=dict)
    highlighted: Set[str] = field(default_factory=set)
    notice: Optional[str] = None

    def marker(self, node_id: str) -> Optional[str]:
        if node_id not in self.expanded:
            return None
        return EXPANDED_MARKER if self.expanded[node_id] else COLLAPSED_MARKER

    def snapshot(self) -> dict:
        """Comparable copy of the state."""
        return {
            "current_level": self.current_level,
            "max_level": self.max_level,
            "visible": dict(self.visible),
            "expanded": dict(self.expanded),
            "highlighted": set(self.highlighted),
            "notice": self.notice,
        }


class OutlineController:
    """Expand/collapse by level, per-node toggling and search with highlight."""

    def __init__(self, outline: RenderedOutline):
        self.outline = outline
        self.state = ViewState(
            current_level=outline.max_level,
            max_level=outline.max_level,
            visible={node.node_id: True for node in outline},
            expanded={node.node_id: True for node in outline.containers()},
        )

    # =========================================================================
    # Queries
    # =========================================================================

    def is_shown(self, node_id: str) -> bool:
        if not self.state.visible.get(node_id, False):
            return False
        for ancestor in self.outline.ancestors(node_id):
            if not self.state.visible.get(ancestor.node_id, False):
                return False
            if not self.state.expanded.get(ancestor.node_id, True):
                return False
        return True

    def shown_ids(self) -> List[str]:
        return [node.node_id for node in self.outline if self.is_shown(node.node_id)]

    # =========================================================================
    # Level stepping
    # =========================================================================

    def _set_expanded(self, node_id: str, expanded: bool) -> None:
        if node_id in self.state.expanded:
            self.state.expanded[node_id] = expanded

    def collapse_one_level(self) -> None:
        if self.state.current_level <= 0:
            return

        self.state.current_level -= 1
        for node in self.outline.containers():
            if node.depth == self.state.current_level:
                self._set_expanded(node.node_id, False)

    def expand_one_level(self) -> None:
        if self.state.current_level >= self.state.max_level:
            return

        self.state.current_level += 1
        for node in self.outline.containers():
            self._set_expanded(node.node_id, node.depth <= self.state.current_level)

    def collapse_all(self) -> None:
        self.state.current_level = 0
        for node in self.outline.containers():
            self._set_expanded(node.node_id, node.depth == 0)

    def expand_all(self) -> None:
        self.state.current_level = self.state.max_level
        for node in self.outline.containers():
            self._set_expanded(node.node_id, True)

    def toggle(self, node_id: str) -> None:
        """Flip one container's collapse marker; unknown or leaf nodes are ignored."""
        if node_id in self.state.expanded:
            self.state.expanded[node_id] = not self.state.expanded[node_id]

    # =========================================================================
    # Search
    # =========================================================================

    def search(self, term: str) -> List[str]:
        """
        Filter the view to nodes whose path or text contains `term`.

        Matching is case-insensitive. Every ancestor of a match is revealed
        and force-expanded. An empty term restores the full view. Returns
        the matching node ids in document order.
        """
        needle = (term or "").strip().lower()
        self.state.highlighted.clear()

        if not needle:
            for node_id in self.state.visible:
                self.state.visible[node_id] = True
            self.state.notice = None
            self.expand_all()
            return []

        for node in self.outline:
            if not node.is_root:
                self.state.visible[node.node_id] = False

        matches = [
            node for node in self.outline
            if not node.is_root and (needle in node.path.lower() or needle in node.text.lower())
        ]

        for node in matches:
            self.state.visible[node.node_id] = True
            self.state.highlighted.add(node.node_id)
            for ancestor in self.outline.ancestors(node.node_id):
                self.state.visible[ancestor.node_id] = True
                self._set_expanded(ancestor.node_id, True)

        if matches:
            self.state.notice = None
        else:
            self.state.notice = f'No matches found for "{needle}"'

        logger.debug(f"Search {needle!r}: {len(matches)} match(es)")
        return [node.node_id for node in matches]
