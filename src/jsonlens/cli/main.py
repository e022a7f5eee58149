"""
jsonlens CLI - Main entry point.

This module registers all CLI commands. Each command is implemented
in its own module under cli/commands/.
"""

import click

from .commands import explain, graph, outline, table, view
from .utils import configure_logging


@click.group()
@click.version_option(package_name="jsonlens")
@click.option("-v", "--verbose", is_flag=True, help="Show debug logging")
def main(verbose: bool):
    """jsonlens: Structural projections of JSON documents.

    \b
    Quick Start:
      jsonlens graph data.json
      jsonlens outline data.json
      jsonlens explain data.json
      jsonlens table data.json --sort name
      jsonlens view data.json -d collapse-all -d search:email
    """
    configure_logging(verbose)


# Register commands
main.add_command(graph.graph)
main.add_command(outline.outline)
main.add_command(explain.explain)
main.add_command(table.table)
main.add_command(view.view)

if __name__ == "__main__":
    main()
