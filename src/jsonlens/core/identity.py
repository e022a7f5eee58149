"""
Identity & Path Resolver.

Derives, from a value's position in the document, the node id shared by
every projection, its display label, the dotted path used for search and
the bracketed accessor used in prose.

    root                 ->  id "root",            path "",          accessor ""
    root["data"]         ->  id "root.data",       path "data",      accessor "data"
    root["data"][0]      ->  id "root.data.0",     path "data.0",    accessor "data[0]"
    root["a.b"]          ->  id "root.a%2Eb",      path "a.b",       accessor "a.b"

Array indices and object keys share one id namespace. Inside an id, each
key segment has `%`, `.` and `#` percent-encoded, so a key can never forge
a separator or the value leaf suffix and ids stay injective over paths.
Paths and accessors are display text and keep the raw keys.
"""

from typing import NamedTuple

ROOT_ID = "root"
ROOT_LABEL = "Root"
VALUE_SUFFIX = "#value"

# "%" first, so encoded output is never encoded twice
_ESCAPES = (("%", "%25"), (".", "%2E"), ("#", "%23"))


class Identity(NamedTuple):
    node_id: str
    path: str
    accessor: str
    label: str


def root_identity() -> Identity:
    return Identity(ROOT_ID, "", "", ROOT_LABEL)


def escape_segment(key: str | int) -> str:
    """Id-safe form of one key; array indices pass through unchanged."""
    segment = str(key)
    for raw, encoded in _ESCAPES:
        segment = segment.replace(raw, encoded)
    return segment


def resolve(parent: Identity, key: str | int, is_array_parent: bool) -> Identity:
    """Resolve the identity of `parent[key]`."""
    segment = str(key)
    node_id = f"{parent.node_id}.{escape_segment(key)}"
    path = f"{parent.path}.{segment}" if parent.path else segment

    if is_array_parent:
        label = f"[{segment}]"
        accessor = f"{parent.accessor}{label}"
    else:
        label = segment
        accessor = f"{parent.accessor}.{segment}" if parent.accessor else segment

    return Identity(node_id, path, accessor, label)


def value_id(node_id: str) -> str:
    """Id of the synthetic leaf that carries a scalar under its key node."""
    return f"{node_id}{VALUE_SUFFIX}"
