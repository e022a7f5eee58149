"""
Graph Command - Project a document onto a node/link tree.

Prints the graph as a terminal tree, outputs raw JSON for front-ends, or
exports it to a file (.json node-link data or .graphml).
"""

import json
import sys
from collections import defaultdict
from pathlib import Path
from typing import Dict, List

import click
import networkx as nx
from rich.console import Console
from rich.markup import escape
from rich.tree import Tree

from ...core.identity import ROOT_ID
from ...core.types import GraphData, GraphStyle
from ...projections.graph import to_networkx
from ..utils import echo_error, echo_info, echo_json, echo_success, load_document
from .options import document_options

console = Console()


@click.command()
@document_options
@click.option("--style", type=click.Choice([s.value for s in GraphStyle]), default=None,
              help="Node weighting: network graph or hierarchical tree")
@click.option("-o", "--output", default=None, help="Export to a file (.json or .graphml)")
def graph(source: str, sample: bool, config_path: str, as_json: bool, style: str, output: str):
    """
    Project a JSON document onto a node/link graph.
    """
    doc = load_document(source, sample=sample, config_path=config_path, as_json=as_json)
    if doc is None:
        sys.exit(1)

    data = doc.graph(style=style)

    if as_json:
        echo_json(data.model_dump(mode="json", by_alias=True))
        return

    if output:
        _export(data, Path(output))
        return

    console.print(build_tree(data))
    echo_info(f"{len(data.nodes)} nodes, {len(data.links)} links")


def build_tree(data: GraphData) -> Tree:
    """Rich tree of a graph projection, following its edges from the root."""
    outgoing: Dict[str, List[str]] = defaultdict(list)
    for edge in data.links:
        outgoing[edge.source_id].append(edge.target_id)
    nodes = {node.id: node for node in data.nodes}

    root = nodes[ROOT_ID]
    tree = Tree(f"[bold {root.color}]{escape(root.label)}[/]")
    stack = [(ROOT_ID, tree)]
    while stack:
        node_id, branch = stack.pop()
        for child_id in outgoing.get(node_id, []):
            child = nodes[child_id]
            sub = branch.add(f"[{child.color}]{escape(child.label)}[/] [dim]({child.color_class}, w={child.weight})[/]")
            stack.append((child_id, sub))
    return tree


def _export(data: GraphData, output_path: Path) -> None:
    if output_path.suffix == ".json":
        output_path.write_text(json.dumps(data.model_dump(mode="json", by_alias=True), indent=2))
    elif output_path.suffix == ".graphml":
        nx.write_graphml(to_networkx(data), output_path)
    else:
        echo_error(f"Unsupported format: {output_path.suffix}")
        click.echo("Supported: .json, .graphml")
        sys.exit(1)

    echo_success(f"Generated: {output_path}")
