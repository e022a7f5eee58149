"""
JSON value classification and parsing.

Documents are parsed with the standard library into plain Python values
(dict, list, str, int/float, bool, None). `json_type` is the single place
that decides which JSON variant a value is; projectors never sniff types
themselves.
"""

import json
import math
from enum import StrEnum
from typing import Any

from .exceptions import ParseError
from .result import Err, Ok, Result


class JsonType(StrEnum):
    """The six JSON variants."""
    NULL = "null"
    BOOLEAN = "boolean"
    NUMBER = "number"
    STRING = "string"
    ARRAY = "array"
    OBJECT = "object"

    @property
    def is_container(self) -> bool:
        return self in (JsonType.ARRAY, JsonType.OBJECT)


def json_type(value: Any) -> JsonType:
    """
    Classify a parsed value.

    bool is checked before numbers because it is an int subclass.
    """
    if value is None:
        return JsonType.NULL
    if isinstance(value, bool):
        return JsonType.BOOLEAN
    if isinstance(value, (int, float)):
        return JsonType.NUMBER
    if isinstance(value, str):
        return JsonType.STRING
    if isinstance(value, (list, tuple)):
        return JsonType.ARRAY
    if isinstance(value, dict):
        return JsonType.OBJECT
    raise TypeError(f"Not a JSON value: {type(value).__name__}")


def children(value: Any) -> list[tuple[Any, Any]]:
    """Return (key, child) pairs in source order; empty for scalars."""
    kind = json_type(value)
    if kind is JsonType.OBJECT:
        return list(value.items())
    if kind is JsonType.ARRAY:
        return list(enumerate(value))
    return []


def stringify(value: Any) -> str:
    """
    Render a scalar the way JSON viewers print it.

    Integral floats drop their fractional part, booleans and null use their
    JSON spelling. Containers fall back to compact JSON.
    """
    kind = json_type(value)
    if kind is JsonType.NULL:
        return "null"
    if kind is JsonType.BOOLEAN:
        return "true" if value else "false"
    if kind is JsonType.NUMBER:
        if isinstance(value, float):
            if math.isfinite(value) and value.is_integer() and abs(value) < 1e21:
                return str(int(value))
            return repr(value)
        return str(value)
    if kind is JsonType.STRING:
        return value
    return json.dumps(value, separators=(",", ":"), ensure_ascii=False)


def truncate(text: str, limit: int | None) -> str:
    """Cut text to `limit` characters; no ellipsis is added."""
    if limit is None:
        return text
    return text[:limit]


def _reject_constant(name: str) -> Any:
    raise ValueError(f"{name} is not a valid JSON value")


def parse_document(text: str) -> Result[Any, ParseError]:
    """
    Parse one JSON document, returning Err(ParseError) on malformed input.

    Python's NaN/Infinity extensions are rejected, and so are integers past
    the interpreter's digit limit, which `json` reports as a plain ValueError.
    """
    if text is None or not text.strip():
        return Err(ParseError("Please enter JSON data"))

    try:
        return Ok(json.loads(text, parse_constant=_reject_constant))
    except json.JSONDecodeError as e:
        return Err(ParseError(f"Invalid JSON: {e.msg}", line=e.lineno, column=e.colno))
    except ValueError as e:
        return Err(ParseError(f"Invalid JSON: {e}"))
    except RecursionError:
        return Err(ParseError("Invalid JSON: document is nested too deeply"))
