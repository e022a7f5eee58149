"""
CLI Commands Package.

Each command is implemented in its own module for maintainability.
"""

from . import explain
from . import graph
from . import outline
from . import table
from . import view

__all__ = [
    "explain",
    "graph",
    "outline",
    "table",
    "view",
]
