"""
Explain Command - Plain-language description of a document.
"""

import sys

import click
from rich.console import Console
from rich.text import Text

from ...core.types import SegmentRole
from ..utils import echo_json, load_document
from .options import document_options

console = Console()

ROLE_STYLES = {
    SegmentRole.PLAIN: "",
    SegmentRole.LITERAL_VALUE: "green",
    SegmentRole.TYPE_NAME: "bold magenta",
}


@click.command()
@document_options
def explain(source: str, sample: bool, config_path: str, as_json: bool):
    """
    Describe every value of the document in plain language.
    """
    doc = load_document(source, sample=sample, config_path=config_path, as_json=as_json)
    if doc is None:
        sys.exit(1)

    segments = doc.narrative()

    if as_json:
        echo_json([segment.model_dump(mode="json") for segment in segments])
        return

    text = Text()
    for segment in segments:
        text.append(segment.text, style=ROLE_STYLES[segment.role])
    console.print(text, end="")
