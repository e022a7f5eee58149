"""
Outline Command - Indented tree view of a document.
"""

import sys

import click

from ...projections.outline import render_outline_text, total_items
from ..utils import echo_info, echo_json, load_document
from .options import document_options


@click.command()
@document_options
def outline(source: str, sample: bool, config_path: str, as_json: bool):
    """
    Print the document as an indented tree with connector lines.
    """
    doc = load_document(source, sample=sample, config_path=config_path, as_json=as_json)
    if doc is None:
        sys.exit(1)

    lines = doc.outline()

    if as_json:
        echo_json([line.model_dump(mode="json") for line in lines])
        return

    click.echo(render_outline_text(lines))
    echo_info(f"{total_items(lines)} total items")
