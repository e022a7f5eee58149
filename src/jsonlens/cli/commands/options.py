"""Options shared by every command that reads a document."""

import click


def document_options(func):
    """Attach SOURCE, --sample, --config and --json to a command."""
    func = click.option("--json", "as_json", is_flag=True, help="Output as JSON")(func)
    func = click.option("-c", "--config", "config_path", default=None,
                        type=click.Path(dir_okay=False), help="Path to a .jsonlens.yaml file")(func)
    func = click.option("--sample", is_flag=True, help="Use the bundled sample document")(func)
    func = click.argument("source", required=False)(func)
    return func
