"""Read-only views derived from one traversal of a document."""

from .graph import project_graph, to_networkx
from .narrative import narrative_text, project_narrative
from .outline import connector_columns, project_outline
from .table import TableState, project_table

__all__ = [
    "project_graph",
    "to_networkx",
    "project_narrative",
    "narrative_text",
    "project_outline",
    "connector_columns",
    "project_table",
    "TableState",
]
