"""
jsonlens - Structural projections of JSON documents.

jsonlens walks an arbitrary JSON document once and derives several
read-only views of it that agree on node identity:

Key Components:
- core: value classification, identity resolver, tree walker
- projections: graph, outline, narrative and table projectors
- interactive: collapsible outline controller with search
- engine: parse once, fan out to every projector

Usage:
    from jsonlens import Engine

    engine = Engine()
    doc = engine.load('{"a": [1, 2]}').unwrap()
    graph = doc.graph()
"""

__version__ = "0.1.0"

from .core.types import (
    GraphData, GraphEdge, GraphNode, GraphStyle, NarrativeSegment,
    NodeKind, OutlineLine, SegmentRole, TableMode, TableRow, TableView,
    VisitRecord,
)
from .engine import Document, Engine

__all__ = [
    "__version__",
    "Document",
    "Engine",
    "GraphData",
    "GraphEdge",
    "GraphNode",
    "GraphStyle",
    "NarrativeSegment",
    "NodeKind",
    "OutlineLine",
    "SegmentRole",
    "TableMode",
    "TableRow",
    "TableView",
    "VisitRecord",
]
