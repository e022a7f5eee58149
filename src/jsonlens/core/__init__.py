"""
jsonlens Core Module.

Value classification, the identity resolver and the tree walker that every
projection is built on.
"""

from .identity import Identity, resolve, root_identity, value_id
from .result import Err, Ok, Result
from .walker import count_levels, walk

__all__ = [
    "Identity",
    "resolve",
    "root_identity",
    "value_id",
    "Ok",
    "Err",
    "Result",
    "walk",
    "count_levels",
]
