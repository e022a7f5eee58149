"""
View Command - Collapsible JSON view driven from the command line.

Steps are applied in order, the way a user would press the view buttons:

    jsonlens view data.json -d collapse-all -d expand-one
    jsonlens view data.json -d search:email
    jsonlens view data.json -d toggle:root.data.users
"""

import sys
from typing import Dict, Tuple

import click
from rich.console import Console
from rich.markup import escape
from rich.tree import Tree

from ...interactive.controller import OutlineController
from ..utils import echo_error, echo_json, echo_json_error, echo_warning, load_document
from .options import document_options

console = Console()

LEVEL_STEPS = {
    "collapse-one": OutlineController.collapse_one_level,
    "expand-one": OutlineController.expand_one_level,
    "collapse-all": OutlineController.collapse_all,
    "expand-all": OutlineController.expand_all,
}


def apply_step(controller: OutlineController, step: str) -> None:
    """
    Apply one step to the controller.

    Raises:
        click.BadParameter: for an unknown step.
    """
    if step in LEVEL_STEPS:
        LEVEL_STEPS[step](controller)
        return

    name, sep, argument = step.partition(":")
    if sep and name == "search":
        controller.search(argument)
    elif sep and name == "toggle":
        controller.toggle(argument)
    else:
        raise click.BadParameter(
            f"Unknown step '{step}'. Use {', '.join(LEVEL_STEPS)}, search:TERM or toggle:NODE_ID",
            param_hint="--do",
        )


@click.command()
@document_options
@click.option("-d", "--do", "steps", multiple=True, help="Step to apply (repeatable, applied in order)")
def view(source: str, sample: bool, config_path: str, as_json: bool, steps: Tuple[str, ...]):
    """
    Render the collapsible view after applying expand/collapse/search steps.
    """
    doc = load_document(source, sample=sample, config_path=config_path, as_json=as_json)
    if doc is None:
        sys.exit(1)

    controller = doc.controller
    try:
        for step in steps:
            apply_step(controller, step)
    except click.BadParameter as e:
        if as_json:
            echo_json_error(e.format_message())
        else:
            echo_error(e.format_message())
        sys.exit(2)

    state = controller.state
    if as_json:
        echo_json({
            "current_level": state.current_level,
            "max_level": state.max_level,
            "shown": controller.shown_ids(),
            "highlighted": sorted(state.highlighted),
            "collapsed": sorted(k for k, v in state.expanded.items() if not v),
            "notice": state.notice,
        })
        return

    console.print(build_tree(controller))
    if state.notice:
        echo_warning(state.notice)


def build_tree(controller: OutlineController) -> Tree:
    """Rich tree of the nodes currently shown."""
    state = controller.state
    outline = controller.outline

    def label(node_id: str) -> str:
        node = outline.get(node_id)
        marker = state.marker(node_id)
        text = escape(node.text)
        if node_id in state.highlighted:
            text = f"[reverse yellow]{text}[/]"
        return f"{marker} {text}" if marker else f"  {text}"

    tree = Tree(label(outline.root.node_id))
    branches: Dict[str, Tree] = {outline.root.node_id: tree}
    for node_id in controller.shown_ids():
        node = outline.get(node_id)
        if node.is_root:
            continue
        branches[node_id] = branches[node.parent_id].add(label(node_id))
    return tree
