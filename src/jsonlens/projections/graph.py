"""
Graph Projector.

Turns the visit sequence into a node/link tree rooted at "root", ready for
force-directed or left-to-right hierarchical layout. Key nodes mirror the
visit records one to one; every non-null scalar additionally gets a value
leaf hanging off its key node, so a property and its value are drawn as
two connected nodes.

Weights and colors depend only on a node's color class and the chosen
style:

    class      network  hierarchy  color
    root        10        8        #5D8AA8
    object       7        7        #FFB900
    array        7        6        #F25022
    property     7        7        #FFB900
    value        5        5        #7FBA00
"""

import logging
from typing import Any, Dict, Optional

import networkx as nx

from ..config import MAX_TRAVERSAL_DEPTH, VALUE_TEXT_LIMIT
from ..core.identity import ROOT_ID, value_id
from ..core.types import (
    ColorClass,
    GraphData,
    GraphEdge,
    GraphNode,
    GraphStyle,
    NodeKind,
    VisitRecord,
)
from ..core.values import parse_document
from ..core.walker import walk

logger = logging.getLogger(__name__)

COLORS: Dict[ColorClass, str] = {
    ColorClass.ROOT: "#5D8AA8",
    ColorClass.OBJECT: "#FFB900",
    ColorClass.ARRAY: "#F25022",
    ColorClass.PROPERTY: "#FFB900",
    ColorClass.VALUE: "#7FBA00",
}

WEIGHTS: Dict[GraphStyle, Dict[ColorClass, int]] = {
    GraphStyle.NETWORK: {
        ColorClass.ROOT: 10,
        ColorClass.OBJECT: 7,
        ColorClass.ARRAY: 7,
        ColorClass.PROPERTY: 7,
        ColorClass.VALUE: 5,
    },
    GraphStyle.HIERARCHY: {
        ColorClass.ROOT: 8,
        ColorClass.OBJECT: 7,
        ColorClass.ARRAY: 6,
        ColorClass.PROPERTY: 7,
        ColorClass.VALUE: 5,
    },
}


def color_class(record: VisitRecord) -> ColorClass:
    if record.is_root:
        return ColorClass.ROOT
    if record.kind is NodeKind.OBJECT:
        return ColorClass.OBJECT
    if record.kind is NodeKind.ARRAY:
        return ColorClass.ARRAY
    return ColorClass.PROPERTY


def make_node(node_id: str, label: str, cls: ColorClass, depth: int, style: GraphStyle) -> GraphNode:
    return GraphNode(
        id=node_id,
        label=label,
        weight=WEIGHTS[style][cls],
        color=COLORS[cls],
        color_class=cls,
        depth=depth,
    )


def project_graph(
    value: Any,
    style: GraphStyle | str = GraphStyle.NETWORK,
    max_depth: Optional[int] = MAX_TRAVERSAL_DEPTH,
    value_text_limit: Optional[int] = VALUE_TEXT_LIMIT,
) -> GraphData:
    """Build the node/link tree for a parsed document."""
    style = GraphStyle(style)
    graph = GraphData()

    for record in walk(value, max_depth=max_depth, value_text_limit=value_text_limit):
        cls = color_class(record)
        graph.nodes.append(make_node(record.node_id, record.label, cls, record.depth, style))
        if record.parent_id is not None:
            graph.links.append(GraphEdge(source=record.parent_id, target=record.node_id))

        if record.is_leaf and record.kind is not NodeKind.NULL:
            leaf_id = value_id(record.node_id)
            graph.nodes.append(make_node(leaf_id, record.value_text, ColorClass.VALUE, record.depth + 1, style))
            graph.links.append(GraphEdge(source=record.node_id, target=leaf_id))

    logger.debug(f"Projected graph: {len(graph.nodes)} nodes, {len(graph.links)} links ({style})")
    return graph


def project_graph_text(text: str, style: GraphStyle | str = GraphStyle.NETWORK, **kwargs) -> GraphData:
    """Parse and project; malformed input yields an empty graph, never a partial one."""
    result = parse_document(text)
    if result.is_err():
        logger.debug(f"Graph projection skipped: {result.error}")
        return GraphData()
    return project_graph(result.unwrap(), style=style, **kwargs)


def to_networkx(graph: GraphData) -> nx.DiGraph:
    """Export the projection as a networkx DiGraph with node attributes."""
    g = nx.DiGraph()
    for node in graph.nodes:
        g.add_node(
            node.id,
            label=node.label,
            weight=node.weight,
            color=node.color,
            color_class=str(node.color_class),
            depth=node.depth,
        )
    for edge in graph.links:
        g.add_edge(edge.source_id, edge.target_id, value=edge.value)
    return g


def is_rooted_tree(graph: GraphData) -> bool:
    """True when the projection is an arborescence rooted at "root"."""
    if graph.is_empty:
        return False
    g = to_networkx(graph)
    return nx.is_arborescence(g) and g.in_degree(ROOT_ID) == 0
