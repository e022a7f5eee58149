"""
Projection Engine.

Parses one document and fans it out to every projector. Loading a new
document discards everything derived from the previous one; a failed load
leaves no document behind.

Usage:
    engine = Engine()
    result = engine.load('{"a": 1}')
    if result.is_ok():
        doc = result.unwrap()
        doc.graph(), doc.outline(), doc.narrative(), doc.table()
"""

import logging
from functools import cached_property
from typing import Any, List, Optional

from .config import LensConfig
from .core.exceptions import ParseError
from .core.result import Err, Ok, Result
from .core.types import GraphData, GraphStyle, NarrativeSegment, OutlineLine, TableView, VisitRecord
from .core.values import parse_document
from .core.walker import walk
from .interactive.controller import OutlineController
from .interactive.rendered import RenderedOutline
from .projections.graph import project_graph
from .projections.narrative import project_narrative
from .projections.outline import project_outline
from .projections.table import TableState, project_table

logger = logging.getLogger(__name__)

SAMPLE_DOCUMENT = {
    "status": "success",
    "code": 200,
    "data": {
        "users": [
            {
                "id": 1,
                "name": "John Doe",
                "email": "john@example.com",
                "address": {"city": "New York", "country": "USA"},
                "tags": ["developer", "designer"],
            },
            {
                "id": 2,
                "name": "Jane Smith",
                "email": "jane@example.com",
                "address": {"city": "San Francisco", "country": "USA"},
                "tags": ["manager", "marketing"],
            },
        ],
        "meta": {"total": 2, "page": 1},
    },
}


class Document:
    """One parsed document and its lazily computed projections."""

    def __init__(self, value: Any, config: Optional[LensConfig] = None):
        self.value = value
        self.config = config or LensConfig()

    def records(self) -> List[VisitRecord]:
        traversal = self.config.traversal
        return list(walk(self.value, max_depth=traversal.max_depth, value_text_limit=traversal.value_text_limit))

    def graph(self, style: Optional[GraphStyle | str] = None) -> GraphData:
        traversal = self.config.traversal
        return project_graph(
            self.value,
            style=style or self.config.graph.style,
            max_depth=traversal.max_depth,
            value_text_limit=traversal.value_text_limit,
        )

    def outline(self) -> List[OutlineLine]:
        return project_outline(
            self.value,
            max_depth=self.config.traversal.max_depth,
            string_limit=self.config.outline.string_limit,
            string_cut=self.config.outline.string_cut,
        )

    def narrative(self) -> List[NarrativeSegment]:
        narrative = self.config.narrative
        return project_narrative(self.value, max_depth=narrative.max_depth, truncate_at=narrative.truncate)

    def table(self) -> TableView:
        return project_table(self.value)

    @cached_property
    def table_state(self) -> TableState:
        return TableState()

    @cached_property
    def controller(self) -> OutlineController:
        return OutlineController(RenderedOutline.from_value(self.value))


class Engine:
    """Holds at most one document at a time."""

    def __init__(self, config: Optional[LensConfig] = None):
        self.config = config or LensConfig()
        self.document: Optional[Document] = None

    def load(self, text: str) -> Result[Document, ParseError]:
        self.document = None
        result = parse_document(text)
        if isinstance(result, Err):
            logger.debug(f"Load failed: {result.error}")
            return result

        self.document = Document(result.unwrap(), self.config)
        return Ok(self.document)

    def load_value(self, value: Any) -> Document:
        """Adopt an already parsed value (e.g. the sample document)."""
        self.document = Document(value, self.config)
        return self.document
