"""
Core type definitions for jsonlens.

Every projection exchanges these models, so a graph node, an outline line
and a narrative segment describing the same JSON value agree on its
identity and kind.
"""

from enum import StrEnum
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field

from .values import JsonType


class NodeKind(StrEnum):
    """Kind of an encountered JSON value."""
    ROOT = "root"
    OBJECT = "object"
    ARRAY = "array"
    NULL = "value-null"
    STRING = "value-string"
    NUMBER = "value-number"
    BOOLEAN = "value-boolean"

    @classmethod
    def for_type(cls, value_type: JsonType, is_root: bool = False) -> "NodeKind":
        if is_root and value_type.is_container:
            return cls.ROOT
        return _KIND_BY_TYPE[value_type]


_KIND_BY_TYPE = {
    JsonType.OBJECT: NodeKind.OBJECT,
    JsonType.ARRAY: NodeKind.ARRAY,
    JsonType.NULL: NodeKind.NULL,
    JsonType.STRING: NodeKind.STRING,
    JsonType.NUMBER: NodeKind.NUMBER,
    JsonType.BOOLEAN: NodeKind.BOOLEAN,
}


class VisitRecord(BaseModel):
    """
    Normalized description of one JSON value met during traversal.

    `value` references the source value and is never serialized.
    """
    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    node_id: str
    parent_id: Optional[str] = None
    depth: int = 0
    kind: NodeKind
    value_type: JsonType
    key: Optional[str | int] = None
    label: str
    path: str = ""
    accessor: str = ""
    sibling_index: int = 0
    is_last_sibling: bool = True
    child_count: int = 0
    value_text: Optional[str] = None
    value: Any = Field(default=None, exclude=True, repr=False)

    @property
    def is_root(self) -> bool:
        return self.parent_id is None

    @property
    def is_leaf(self) -> bool:
        return not self.value_type.is_container


class ColorClass(StrEnum):
    """Visual class of a graph node."""
    ROOT = "root"
    OBJECT = "object"
    ARRAY = "array"
    PROPERTY = "property"
    VALUE = "value"


class GraphStyle(StrEnum):
    """Graph flavours: free force layout or left-to-right hierarchy."""
    NETWORK = "network"
    HIERARCHY = "hierarchy"


class GraphNode(BaseModel):
    id: str
    label: str
    weight: int
    color: str
    color_class: ColorClass
    depth: int


class GraphEdge(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    source_id: str = Field(alias="source")
    target_id: str = Field(alias="target")
    value: int = 1


class GraphData(BaseModel):
    nodes: List[GraphNode] = Field(default_factory=list)
    links: List[GraphEdge] = Field(default_factory=list)

    def get_node(self, node_id: str) -> Optional[GraphNode]:
        for node in self.nodes:
            if node.id == node_id:
                return node
        return None

    @property
    def is_empty(self) -> bool:
        return not self.nodes


class OutlineLine(BaseModel):
    """One line of the indented tree view."""
    depth: int
    kind: NodeKind
    display_text: str
    path: str = ""
    key: str = ""
    value_type: str
    has_children: bool = False
    is_last_child: bool = False
    is_simple_value: bool = False
    node_id: str


class SegmentRole(StrEnum):
    PLAIN = "plain"
    LITERAL_VALUE = "literal-value"
    TYPE_NAME = "type-name"


class NarrativeSegment(BaseModel):
    text: str
    role: SegmentRole = SegmentRole.PLAIN


class TableMode(StrEnum):
    ARRAY_OF_OBJECTS = "array-of-objects"
    MIXED_ARRAY = "mixed-array"
    OBJECT = "object"


class SortDirection(StrEnum):
    ASCENDING = "ascending"
    DESCENDING = "descending"

    def toggled(self) -> "SortDirection":
        if self is SortDirection.ASCENDING:
            return SortDirection.DESCENDING
        return SortDirection.ASCENDING


class TableRow(BaseModel):
    """
    One table row.

    `row_id` is the element's source position and stays stable under
    sorting. `cells` omits columns the source element does not have.
    """
    model_config = ConfigDict(arbitrary_types_allowed=True)

    row_id: int
    cells: Dict[str, Any] = Field(default_factory=dict)
    original_value: Any = Field(default=None, exclude=True, repr=False)

    def has(self, column: str) -> bool:
        return column in self.cells

    def get(self, column: str, default: Any = None) -> Any:
        return self.cells.get(column, default)


class TableView(BaseModel):
    columns: List[str] = Field(default_factory=list)
    rows: List[TableRow] = Field(default_factory=list)
    mode: Optional[TableMode] = None
    error: Optional[str] = None

    @property
    def is_array(self) -> bool:
        return self.mode in (TableMode.ARRAY_OF_OBJECTS, TableMode.MIXED_ARRAY)
